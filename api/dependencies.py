"""
Dependency provider functions for the API routes.
"""

from fastapi import Depends, Request

from config import Settings
from services.openai_service import OpenAIChatProvider


def get_settings(request: Request) -> Settings:
    """Returns the settings loaded at startup."""
    return request.app.state.settings


def get_chat_provider(settings: Settings = Depends(get_settings)) -> OpenAIChatProvider:
    return OpenAIChatProvider(api_key=settings.openai_key)
