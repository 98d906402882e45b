"""Application services."""
from .order_service import OrderApplicationService, start_of_day

__all__ = ["OrderApplicationService", "start_of_day"]
