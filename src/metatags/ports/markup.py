from __future__ import annotations

from typing import Mapping, Protocol


class MarkupHelper(Protocol):
    """
    Emits well-formed, escaped HTML tags.
    """

    def content_tag(self, name: str, text: str) -> str:
        ...

    def void_tag(self, name: str, attributes: Mapping[str, object]) -> str:
        ...
