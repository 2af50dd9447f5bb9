from .markup import MarkupHelper
from .request_context import RequestContext
from .translations import TranslationBackend

__all__ = [
    "MarkupHelper",
    "RequestContext",
    "TranslationBackend",
]
