"""SQLAlchemy implementation of OrganizationRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Organization
from core.domain.repositories import OrganizationRepository

from ..mappers import OrganizationMapper
from ..models import OrganizationModel


class SqlAlchemyOrganizationRepository(OrganizationRepository):
    """Tenant lookups."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, organization_id: str) -> Optional[Organization]:
        model = await self._session.get(OrganizationModel, organization_id)
        if model is None:
            return None
        return OrganizationMapper.to_domain(model)

    async def is_owned_by(self, organization_id: str, user_id: str) -> bool:
        result = await self._session.execute(
            select(OrganizationModel.id).where(
                OrganizationModel.id == organization_id,
                OrganizationModel.owner_id == user_id,
            )
        )
        return result.scalar_one_or_none() is not None
