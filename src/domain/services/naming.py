"""Domain service helpers for resolving display names."""

from typing import Optional

from src.domain.entities.objects import LocalizedMap, LocalizedName, PlainName

DEFAULT_LANGUAGE = "en"
DEFAULT_FALLBACK_LANGUAGE = "de"


def resolve_name(
    name: Optional[LocalizedName],
    object_id: str,
    language: str = DEFAULT_LANGUAGE,
    fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
) -> str:
    """Resolve a display name to a single string.

    Order: requested language, English, the fallback language, and finally
    the raw identifier.
    """
    if name is None:
        return object_id
    if isinstance(name, PlainName):
        return name.text or object_id
    if isinstance(name, LocalizedMap):
        for lang in (language, DEFAULT_LANGUAGE, fallback_language):
            text = name.translations.get(lang)
            if text:
                return text
    return object_id
