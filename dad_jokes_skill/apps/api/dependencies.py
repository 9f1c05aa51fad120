"""Shared FastAPI dependencies for token validation and service access."""

import hmac
from typing import Annotated, Optional

from ask_sdk_webservice_support.webservice_handler import WebserviceSkillHandler
from fastapi import Header, HTTPException, Request, status

from dad_jokes_skill.core.config import config


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
) -> None:
    """Bearer token guard for the health check endpoint, when enabled."""
    if not config.ENABLE_HEALTHCHECK_AUTH:
        return
    expected = config.HEALTHCHECK_API_TOKEN
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token not configured",
            headers={"WWW-Authenticate": "Bearer"},
        )

    provided = None
    if authorization and authorization.lower().startswith("bearer "):
        provided = authorization.split(" ", 1)[1].strip()
    if not provided:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not hmac.compare_digest(provided, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_skill_handler(request: Request) -> WebserviceSkillHandler:
    """Resolve the verifying skill handler attached to the running app."""
    skill_handler = getattr(request.app.state, "skill_handler", None)
    if not isinstance(skill_handler, WebserviceSkillHandler):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Skill handler not configured",
        )
    return skill_handler


__all__ = ["get_skill_handler", "require_healthcheck_token"]
