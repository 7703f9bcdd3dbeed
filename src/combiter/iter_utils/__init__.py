from .product import CartesianProduct, PairProduct, product, product_pair
from .zip_longest import ZipLongest, zip_longest

__all__ = [
    "CartesianProduct",
    "PairProduct",
    "ZipLongest",
    "product",
    "product_pair",
    "zip_longest",
]
