"""SQLAlchemy models."""

from storeadmin.models.base import Base
from storeadmin.models.billboard import Billboard
from storeadmin.models.category import Category
from storeadmin.models.color import Color
from storeadmin.models.order import Order, OrderItem
from storeadmin.models.product import Image, Product
from storeadmin.models.size import Size
from storeadmin.models.store import Store

__all__ = [
    # Base
    "Base",
    # Tenant
    "Store",
    # Catalog
    "Billboard",
    "Category",
    "Size",
    "Color",
    "Product",
    "Image",
    # Orders
    "Order",
    "OrderItem",
]
