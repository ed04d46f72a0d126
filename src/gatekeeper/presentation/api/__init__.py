"""FastAPI presentation layer for Gatekeeper.

This module provides the REST API for the credential workflows.

Structure:
    api/
    ├── app.py                  # FastAPI application factory
    ├── dependencies.py         # Dependency injection
    ├── exception_handlers.py   # Error envelope mapping
    ├── routers/                # API route handlers
    │   └── auth.py             # Register, login, verify
    └── schemas/                # Pydantic request/response models
        └── auth.py
"""

from gatekeeper.presentation.api.app import create_app

__all__ = ["create_app"]
