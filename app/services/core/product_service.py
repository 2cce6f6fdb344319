from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.core.crud_service import CRUDService


class ProductService(CRUDService[Product, ProductCreate, ProductUpdate]):
    model = Product
    resource_name = "Product"
