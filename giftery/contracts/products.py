"""
Product catalogue helpers for narrowing a getProducts answer.
"""

from dataclasses import dataclass
from typing import List, Optional

from .responses import Product


@dataclass
class ProductFilter:
    """Optional filters when querying the product catalogue."""
    face: Optional[int] = None                   # keep products that accept this value
    search: Optional[str] = None                 # case-insensitive title substring


def filter_products(products: List[Product], f: ProductFilter) -> List[Product]:
    """Apply a ProductFilter to a list of products and return matching ones."""
    result = products

    if f.face is not None:
        result = [p for p in result if p.accepts_face(f.face)]
    if f.search:
        needle = f.search.lower()
        result = [p for p in result if needle in p.title.lower()]

    return result
