"""
Services Layer

Business logic services used by the API endpoints.
"""
from app.services.core import ProductService, UserService

__all__ = ["ProductService", "UserService"]
