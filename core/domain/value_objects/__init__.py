"""Domain value objects."""

from .value_objects import Actor, ExecutionID, Money

__all__ = [
    "Actor",
    "ExecutionID",
    "Money",
]
