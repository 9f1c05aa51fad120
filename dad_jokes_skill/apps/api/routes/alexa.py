"""Skill endpoint receiving voice platform request envelopes."""

from __future__ import annotations

from typing import Annotated, Any

from ask_sdk_core.exceptions import AskSdkException
from ask_sdk_webservice_support.verifier import VerificationException
from ask_sdk_webservice_support.webservice_handler import WebserviceSkillHandler
from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.concurrency import run_in_threadpool

from dad_jokes_skill.core.logging import get_logger

from ..dependencies import get_skill_handler

router = APIRouter()
logger = get_logger(__name__)


@router.post("/alexa")
async def handle_skill_request(
    request: Request,
    skill_handler: Annotated[WebserviceSkillHandler, Depends(get_skill_handler)],
) -> dict[str, Any]:
    """Verify and answer one request envelope.

    Handler failures come back as the fallback envelope; only requests that
    fail verification or cannot be dispatched at all get an HTTP error.
    """
    body = (await request.body()).decode("utf-8")
    try:
        # Skill handlers block on the joke fetch, so keep them off the event loop.
        return await run_in_threadpool(
            skill_handler.verify_request_and_dispatch, request.headers, body
        )
    except VerificationException as exc:
        logger.warning("Skill request failed verification: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Incoming request failed verification",
        ) from exc
    except AskSdkException as exc:
        logger.error("Skill dispatch exception", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Exception occurred during skill dispatch",
        ) from exc


__all__ = ["router"]
