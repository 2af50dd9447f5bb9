from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

Scalar = Union[str, bool, None]
Value = Union[Scalar, list[Scalar]]
VarValue = Union[str, list[str]]

# Either a ready string or a set of candidate templates keyed by a discriminator
Translatable = Union[str, dict[str, str]]


# -------------------------
# Translation records
# -------------------------

class TranslationRecord(BaseModel):
    """
    Metadata bundle stored in the translation backend under
    ``metas.<controller...>.<action>`` (or ``metas.defaults``).

    title/description/keywords may be a mapping of candidate templates;
    the one to use is picked at render time from the available vars.
    """
    model_config = ConfigDict(extra="ignore")

    title: Optional[Translatable] = None
    description: Optional[Translatable] = None
    keywords: Optional[Translatable] = None
    noindex: Optional[Union[bool, str, list[str]]] = None
    nofollow: Optional[Union[bool, str, list[str]]] = None
    canonical: Optional[str] = None


# -------------------------
# Render-time objects
# -------------------------

@dataclass(frozen=True, slots=True)
class LayoutOptions:
    """
    Resolved title layout: ``site + prefix + separator + suffix + title``.
    """
    prefix: str = " "
    separator: str = ""
    suffix: str = " "
    lowercase: bool = False
    reverse: bool = False

    @property
    def glue(self) -> str:
        return self.prefix + self.separator + self.suffix


@dataclass(frozen=True, slots=True)
class PageAttributes:
    """
    Controller-level page attributes folded into the tags before rendering.
    """
    page_title: Optional[Value] = None
    page_keywords: Optional[Value] = None
    page_description: Optional[Value] = None
