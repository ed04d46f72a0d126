"""Application layer: credential workflows and their DTOs."""
