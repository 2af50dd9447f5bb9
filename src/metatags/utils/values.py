from __future__ import annotations

from typing import Any, Mapping


def as_list(x: Any) -> list[Any]:
    """
    Coerce a tag value into its canonical list form.
    - None -> []
    - list/tuple -> flattened one level, None entries dropped
    - anything else -> [x]
    """
    if x is None:
        return []

    if isinstance(x, (list, tuple)):
        out: list[Any] = []
        for v in x:
            if isinstance(v, (list, tuple)):
                out.extend(i for i in v if i is not None)
            elif v is not None:
                out.append(v)
        return out

    return [x]


def is_blank(x: Any) -> bool:
    """
    True for None, False, whitespace-only strings and empty containers.
    """
    if x is None or x is False:
        return True

    if isinstance(x, str):
        return not x.strip()

    if isinstance(x, (list, tuple, set, Mapping)):
        return len(x) == 0

    return False


def unique(items: list[Any]) -> list[Any]:
    """Drop duplicates, keeping first-occurrence order."""
    seen: list[Any] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen
