"""FastAPI REST API for case layout editing.

Usage:
    uvicorn editbook.web:app --reload
"""

from editbook.web.app import app, create_app

__all__ = ["app", "create_app"]
