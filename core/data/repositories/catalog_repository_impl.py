"""SQLAlchemy implementation of CatalogRepository."""

from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities import CatalogProduct
from core.domain.repositories import CatalogRepository

from ..mappers import CatalogProductMapper
from ..models import ProductModel


class SqlAlchemyCatalogRepository(CatalogRepository):
    """Catalog lookups scoped to one tenant."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_products(self, organization_id: str, product_ids: Iterable[str]) -> List[CatalogProduct]:
        """One query for the whole cart, category loaded alongside."""
        ids = list(product_ids)
        if not ids:
            return []

        result = await self._session.execute(
            select(ProductModel)
            .options(selectinload(ProductModel.category))
            .where(
                ProductModel.organization_id == organization_id,
                ProductModel.id.in_(ids),
            )
        )
        return [CatalogProductMapper.to_domain(model) for model in result.scalars().all()]
