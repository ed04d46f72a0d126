"""Gatekeeper - registration, login and token verification service.

Combines gatekeeper_auth (hashing, tokens) and gatekeeper_identity (users)
into the credential workflows, and exposes them over HTTP.
"""
