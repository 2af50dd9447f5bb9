from __future__ import annotations

from typing import Any, Protocol


class TranslationBackend(Protocol):
    """
    Key -> value lookup over dot-joined paths (e.g. "metas.users.show").

    Returns whatever is stored at the path (a string or a nested mapping)
    and raises MissingTranslationError when nothing is stored there.
    """

    def lookup(self, path: str) -> Any:
        ...
