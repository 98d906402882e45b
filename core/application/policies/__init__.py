"""Reusable application policies."""

from .scoping import OrderScopePolicy
from .snapshot_builder import ProductSnapshotBuilder, RequestedProduct

__all__ = [
    "OrderScopePolicy",
    "ProductSnapshotBuilder",
    "RequestedProduct",
]
