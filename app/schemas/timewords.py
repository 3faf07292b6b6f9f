from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class TimeWordsResponse(BaseModel):
    """A clock time alongside its spoken-word reading."""

    time: str = Field(..., description="24-hour time as supplied, HH:MM")
    words: str = Field(..., description="English reading of the time")

    model_config = {
        "json_schema_extra": {
            "example": {"time": "06:01", "words": "six oh one am"}
        }
    }


class TimeWordsBatchRequest(BaseModel):
    times: List[str] = Field(..., min_length=1, description="24-hour times, HH:MM")

    model_config = {
        "json_schema_extra": {
            "example": {"times": ["00:00", "10:34", "23:23"]}
        }
    }


class TimeWordsBatchResponse(BaseModel):
    results: List[TimeWordsResponse] = Field(default_factory=list)
