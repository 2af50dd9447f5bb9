from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from metatags.domain.errors import MissingTranslationError
from metatags.domain.schema import PATH_SEPARATOR


def dig(data: Mapping[str, Any], path: str) -> Any:
    """
    Walk a nested mapping along a dot-joined path.
    Raises MissingTranslationError when a segment is absent.
    """
    node: Any = data
    for segment in path.split(PATH_SEPARATOR):
        if not isinstance(node, Mapping) or segment not in node:
            raise MissingTranslationError(path)
        node = node[segment]
    return node


@dataclass(slots=True)
class InMemoryTranslationBackend:
    """
    Translations held in a nested dict, optionally under a locale root:

        {"en": {"metas": {"defaults": {"title": "Home"}}}}
    """
    data: Mapping[str, Any] = field(default_factory=dict)
    locale: Optional[str] = None

    def lookup(self, path: str) -> Any:
        if self.locale is None:
            return dig(self.data, path)
        return dig(self.data, f"{self.locale}{PATH_SEPARATOR}{path}")
