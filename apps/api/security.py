"""
Caller identity.

Authentication happens at the gateway in front of this service; it forwards
the verified identity in trusted headers:

- X-User-Id: authenticated user
- X-User-Role: ADMIN, CLIENT, WAITER or OWNER
- X-Org-Id: tenant the request is made for
"""
import logging
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from core.domain.enums import UserRole
from core.domain.value_objects import Actor


logger = logging.getLogger(__name__)


async def get_actor(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
    x_user_role: Optional[str] = Header(None, alias="X-User-Role"),
) -> Actor:
    """Resolve the calling actor from gateway headers.

    Raises:
        HTTPException: 401 without identity, 400 on an unknown role
    """
    if not x_user_id or not x_user_role:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing caller identity")
    try:
        return Actor(user_id=x_user_id, role=UserRole(x_user_role.upper()))
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown role: {x_user_role}")


async def get_org_id(x_org_id: Optional[str] = Header(None, alias="X-Org-Id")) -> str:
    """Tenant of the request.

    Raises:
        HTTPException: 400 if the header is missing
    """
    if not x_org_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Organization ID is required")
    return x_org_id


def require_roles(*roles: UserRole) -> Callable:
    """Dependency allowing only the given roles through (403 otherwise)."""

    async def _check(actor: Actor = Depends(get_actor)) -> Actor:
        if actor.role not in roles:
            logger.warning(f"Role {actor.role.value} of user {actor.user_id} rejected")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return actor

    return _check
