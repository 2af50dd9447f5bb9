from __future__ import annotations

from typing import Any

from markupsafe import Markup, escape

from metatags.domain.schema import DESCRIPTION_MAX_LENGTH, KEYWORDS_MAX_LENGTH
from metatags.utils.values import as_list

OMISSION = "..."


def strip_tags(text: Any) -> str:
    """
    Remove HTML tags and comments, resolve entities and collapse whitespace.

    The result is plain text; callers escape it again before it goes back
    into markup, so "&lt;head&gt;" survives any number of passes.
    """
    if text is None:
        return ""
    return Markup(str(text)).striptags()


def truncate(text: str, length: int, omission: str = OMISSION) -> str:
    """
    Cut `text` so the result (omission included) is at most `length` chars.
    """
    if len(text) <= length:
        return text
    return text[: max(0, length - len(omission))] + omission


def normalize_title(title: Any) -> list[Markup]:
    """Strip tags from every title part and escape it for output."""
    return [escape(strip_tags(t)) for t in as_list(title)]


def normalize_description(description: Any, separator: str = "") -> Markup:
    if description is None or description is False:
        return Markup("")
    joined = separator.join(str(d) for d in as_list(description))
    return escape(truncate(strip_tags(joined), DESCRIPTION_MAX_LENGTH))


def normalize_keywords(keywords: Any) -> Markup:
    if keywords is None or keywords is False:
        return Markup("")
    if isinstance(keywords, (list, tuple)):
        keywords = ", ".join(str(k) for k in as_list(keywords))
    return escape(truncate(strip_tags(keywords).lower(), KEYWORDS_MAX_LENGTH))
