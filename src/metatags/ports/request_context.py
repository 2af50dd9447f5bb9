from __future__ import annotations

from typing import Protocol


class RequestContext(Protocol):
    """
    Source of the hierarchical path of the current request,
    e.g. ["metas", "users", "show"].
    """

    def path(self) -> list[str]:
        ...
