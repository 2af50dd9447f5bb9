from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Union

from metatags.domain.errors import NoMatchingTemplateError, SubstitutionError
from metatags.utils.values import unique

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"%\{([^}]+)\}")

Substituted = Union[str, list[str]]


def placeholders(template: str) -> list[str]:
    """Names referenced as ``%{name}`` in `template`, in order of appearance."""
    return _PLACEHOLDER_RE.findall(template or "")


def _format(template: str, vars: Mapping[str, Any]) -> str:
    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in vars:
            raise SubstitutionError(f"key<{name}> not found in {template!r}")
        return str(vars[name])

    return _PLACEHOLDER_RE.sub(replace, template)


def substitute(template: Any, vars: Mapping[str, Any] | None) -> Substituted:
    """
    Replace ``%{name}`` placeholders in `template` with values from `vars`.

    Returns a plain string unless some referenced variable is a list; then
    every combination of the list values is rendered and the distinct results
    are returned as a list:

        substitute("%{a} - %{b}", {"a": ["x", "y"], "b": "z"})
        -> ["x - z", "y - z"]

    List-valued variables the template does not reference never trigger
    expansion. A referenced name missing from `vars` raises SubstitutionError.
    """
    vars = dict(vars or {})

    if template is None:
        return ""

    if isinstance(template, (list, tuple)):
        out: list[str] = []
        for t in template:
            result = substitute(t, vars)
            out.extend(result if isinstance(result, list) else [result])
        return unique(out)

    template = str(template)
    replaces = placeholders(template)

    expansion = [k for k, v in vars.items() if k in replaces and isinstance(v, (list, tuple))]
    if not expansion:
        return _format(template, vars)

    results: list[str] = []
    for key in expansion:
        for candidate in vars[key]:
            pinned = dict(vars)
            pinned[key] = candidate
            result = substitute(template, pinned)
            results.extend(result if isinstance(result, list) else [result])
    return unique(results)


def select_translation(field: Any, available_vars: Mapping[str, Any]) -> str:
    """
    Pick the most specific template whose placeholders are all available.

    A plain string is returned unchanged. For a mapping of candidates, the
    viable candidate referencing the most placeholders wins; on ties the
    first one in mapping order is kept.
    """
    if isinstance(field, str):
        return field

    best_value: str | None = None
    best_count: int | None = None
    for key, value in (field or {}).items():
        match = placeholders(value)
        not_set = [m for m in match if m not in available_vars]
        if not_set:
            logger.debug("Template %r skipped, unset placeholders: %s", key, not_set)
            continue
        if best_count is None or best_count < len(match):
            best_value, best_count = value, len(match)
            logger.debug("Template %r selected (%d placeholders)", key, best_count)

    if best_value is None:
        raise NoMatchingTemplateError(
            f"No template matches the available vars {sorted(available_vars)}: {field!r}"
        )
    return best_value
