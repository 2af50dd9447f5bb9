from __future__ import annotations

from dataclasses import dataclass

from metatags.domain.schema import METAS_ROOT


@dataclass(frozen=True, slots=True)
class RouteContext:
    """
    Request path built from the routed controller and action.
    Namespaced controllers ("admin/users") add one segment per namespace.
    """
    controller: str
    action: str
    root: str = METAS_ROOT

    def path(self) -> list[str]:
        return [self.root, *[c for c in self.controller.split("/") if c], self.action]
