from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.config import AppSettings
from ..deps.settings import get_app_settings
from ..schemas.timewords import TimeWordsBatchRequest, TimeWordsBatchResponse, TimeWordsResponse
from ..services.timewords import format_time_words

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/time-words", tags=["time-words"])


@router.get("/{time}", response_model=TimeWordsResponse, summary="Read a 24-hour time aloud")
def api_time_words(time: str):
    # InvalidInput propagates to the app-level handler (422 invalid_input)
    words = format_time_words(time)
    LOGGER.info("time_words.converted", extra={"extra_data": {"time": time, "words": words}})
    return TimeWordsResponse(time=time, words=words)


@router.post("", response_model=TimeWordsBatchResponse, summary="Read several 24-hour times aloud")
def api_time_words_batch(
    payload: TimeWordsBatchRequest,
    settings: AppSettings = Depends(get_app_settings),
):
    if len(payload.times) > settings.BATCH_LIMIT:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"At most {settings.BATCH_LIMIT} times per request",
        )
    results = [TimeWordsResponse(time=time, words=format_time_words(time)) for time in payload.times]
    LOGGER.info("time_words.batch_converted", extra={"extra_data": {"count": len(results)}})
    return TimeWordsBatchResponse(results=results)
