"""
API Dependencies

Provides dependency injection for services and database sessions.
Each request gets its own session, and the services built on it share it.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services import ProductService, UserService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """
    Get Product Service instance with database session

    Returns:
        ProductService: Configured product service
    """
    return ProductService(db=db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """
    Get User Service instance with database session

    Returns:
        UserService: Configured user service
    """
    return UserService(db=db)
