"""Product catalog."""

from .repository import ProductRepository
from .seed import default_products

__all__ = ["ProductRepository", "default_products"]
