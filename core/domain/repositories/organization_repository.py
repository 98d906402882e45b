"""Repository interface for tenant lookups."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.catalog import Organization


class OrganizationRepository(ABC):
    """Read-only access to tenants and their owners."""

    @abstractmethod
    async def get(self, organization_id: str) -> Optional[Organization]:
        """Return the tenant, or None if it does not exist."""
        pass

    @abstractmethod
    async def is_owned_by(self, organization_id: str, user_id: str) -> bool:
        """Check whether ``user_id`` owns the tenant."""
        pass
