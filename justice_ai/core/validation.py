from dataclasses import dataclass
from typing import Optional

from .constants import AppSettings, Language
from .messages import translate

MIN_QUERY_LENGTH = AppSettings.MIN_QUERY_LENGTH
MAX_QUERY_LENGTH = AppSettings.MAX_QUERY_LENGTH


@dataclass(frozen=True)
class QueryValidationError:
    """Why a query was rejected before it reached the model"""

    code: str
    message: str

    def __str__(self) -> str:
        return self.message


def validate_query(
    text: str, language: Language = Language.EN
) -> Optional[QueryValidationError]:
    """Check a raw query against the emptiness and length rules.

    Returns None when the query may be submitted, otherwise the first
    rule it breaks with a message in the requested language.
    """
    trimmed = (text or "").strip()

    if not trimmed:
        return QueryValidationError(
            "query_empty", translate("query_empty", language))

    if len(trimmed) < MIN_QUERY_LENGTH:
        return QueryValidationError(
            "query_too_short",
            translate("query_too_short", language, min_length=MIN_QUERY_LENGTH),
        )

    if len(trimmed) > MAX_QUERY_LENGTH:
        return QueryValidationError(
            "query_too_long",
            translate("query_too_long", language, max_length=MAX_QUERY_LENGTH),
        )

    return None


def format_character_count(current: int, maximum: int) -> str:
    return f"{current}/{maximum}"


def is_near_limit(current: int, maximum: int, threshold: float = 0.9) -> bool:
    return current > maximum * threshold
