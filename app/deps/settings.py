from __future__ import annotations

from fastapi import Request

from ..core.config import AppSettings, get_settings


def get_app_settings(request: Request) -> AppSettings:
    """Settings the running app was built with, falling back to the environment."""
    return getattr(request.app.state, "settings", None) or get_settings()
