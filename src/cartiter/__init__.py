from .iter_utils import ProductIterator, ProductRange, make_iterator, product

__all__ = ["ProductIterator", "ProductRange", "make_iterator", "product"]
