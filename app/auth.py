"""Authentication gate — reads the identity resolved by the upstream auth layer.

This service never issues or verifies credentials. An auth middleware may
attach ``request.state.user``; otherwise a trusted proxy forwards the user id
in ``settings.user_id_header``.
"""

import logging

from fastapi import Request
from pydantic import BaseModel

from app.config import settings
from app.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class CurrentUser(BaseModel):
    id: str


def _user_id_from_state(request: Request) -> str | None:
    user = getattr(request.state, "user", None)
    if user is None:
        return None
    if isinstance(user, dict):
        return user.get("id")
    return getattr(user, "id", None)


async def get_current_user(request: Request) -> CurrentUser:
    """Return the signed-in user or fail with UNAUTHORIZED before any data access."""
    user_id = _user_id_from_state(request) or request.headers.get(settings.user_id_header)
    if not user_id or not str(user_id).strip():
        logger.debug("Rejected unauthenticated request to %s", request.url.path)
        raise UnauthorizedError("You must be signed in to perform this action.")
    return CurrentUser(id=str(user_id).strip())
