from .product_iter import ProductIterator, make_iterator
from .product_range import ProductRange, product

__all__ = ["ProductIterator", "ProductRange", "make_iterator", "product"]
