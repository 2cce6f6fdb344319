"""
Core Services Module

Provides the CRUD services behind the products and users endpoints.
"""
from app.services.core.crud_service import CRUDService
from app.services.core.product_service import ProductService
from app.services.core.user_service import UserService

__all__ = ["CRUDService", "ProductService", "UserService"]
