"""Gatekeeper domain layer."""
