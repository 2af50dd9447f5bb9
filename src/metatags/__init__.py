from .domain.errors import (
    MetaTagsError,
    MetasNotFoundError,
    MissingTranslationError,
    NoMatchingTemplateError,
    SubstitutionError,
)
from .domain.models import PageAttributes, TranslationRecord
from .renderer import TagRenderer
from .resolver import resolve_metas
from .state import MetaTags
from .substitution import select_translation, substitute

__all__ = [
    "MetaTags",
    "MetaTagsError",
    "MetasNotFoundError",
    "MissingTranslationError",
    "NoMatchingTemplateError",
    "PageAttributes",
    "SubstitutionError",
    "TagRenderer",
    "TranslationRecord",
    "resolve_metas",
    "select_translation",
    "substitute",
]
