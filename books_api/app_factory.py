"""Entry points for the books FastAPI app."""
from books_api.app import app, create_app

__all__ = ["app", "create_app"]
