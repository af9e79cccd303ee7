"""Shared enums for models and API."""

from enum import Enum


class Language(str, Enum):
    """UI language preference stored per user."""

    EN = "en"
    PT = "pt"


DEFAULT_LANGUAGE = Language.EN


def normalize_language(value: str | None) -> Language:
    """Unknown or missing values fall back to the default language."""
    try:
        return Language(value)
    except ValueError:
        return DEFAULT_LANGUAGE
