"""
User Role Enum.

Roles carried by the actor identity of every request.
"""
from enum import Enum


class UserRole(str, Enum):
    """Staff and customer roles."""

    ADMIN = "ADMIN"
    CLIENT = "CLIENT"
    WAITER = "WAITER"
    OWNER = "OWNER"
