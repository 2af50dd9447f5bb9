from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from metatags.domain.models import PageAttributes, Value
from metatags.domain.schema import (
    ROBOTS,
    TAG_CANONICAL,
    TAG_DESCRIPTION,
    TAG_KEYWORDS,
    TAG_NOFOLLOW,
    TAG_NOINDEX,
    TAG_TITLE,
)
from metatags.utils.values import as_list, is_blank


def robots_names(value: Value) -> list[str]:
    """Crawler names for a noindex/nofollow value; True stands for "robots"."""
    return [v if isinstance(v, str) else ROBOTS for v in as_list(value) if v is not False]


@dataclass(slots=True)
class MetaTags:
    """
    Meta tags and substitution vars accumulated while handling one request.

    Create one instance per request and hand it to the renderer at the end;
    instances must not be shared between requests.

    Example:
        tags = MetaTags()
        tags.set_tags({"title": "Login Page", "description": "Here you can login"})
        tags.keywords(["authorization", "login"])
        tags.noindex("googlebot")
    """
    _tags: dict[str, Any] = field(default_factory=dict)
    _vars: dict[str, Any] = field(default_factory=dict)

    @property
    def tags(self) -> dict[str, Any]:
        return dict(self._tags)

    @property
    def vars(self) -> dict[str, Any]:
        return dict(self._vars)

    def get(self, tag: str, default: Any = None) -> Any:
        return self._tags.get(tag, default)

    def is_set(self, tag: str) -> bool:
        value = self._tags.get(tag)
        return value is not None and value is not False

    # -------------------------
    # Generic mutators
    # -------------------------

    def set_tags(self, tags: Optional[Mapping[str, Value]] = None, append: bool = False) -> None:
        """
        Merge `tags` into the current state; the last value set for a key wins.
        With `append`, values are accumulated instead (see append_tags).
        """
        if append:
            self.append_tags(tags)
        else:
            self._tags.update(tags or {})

    def append_tags(self, tags: Optional[Mapping[str, Value]] = None) -> None:
        """
        Accumulate values per key. An existing scalar is promoted to a
        one-element list before the new value(s) are added, so an appended
        key always holds a list.
        """
        for tag, value in (tags or {}).items():
            current = self._tags.get(tag)
            if current is None:
                current = []
            elif not isinstance(current, list):
                current = [current]
            self._tags[tag] = current + as_list(value)

    def set_vars(self, vars: Optional[Mapping[str, Any]] = None, append: bool = True) -> None:
        if append:
            self._vars.update(vars or {})
        else:
            self._vars = dict(vars or {})

    def drop_unset_vars(self) -> None:
        self._vars = {k: v for k, v in self._vars.items() if v is not None}

    # -------------------------
    # Convenience setters
    # -------------------------

    def title(self, title: Value, headline: str = "", append: bool = False) -> Value:
        """
        Set the page title and return it, or `headline` when one is given.

            tags.title("Login Page")                   # -> "Login Page"
            tags.title("Login Page", "Please login")   # -> "Please login"
        """
        self.set_tags({TAG_TITLE: title}, append)
        return title if is_blank(headline) else headline

    def keywords(self, keywords: Value, append: bool = False) -> Value:
        self.set_tags({TAG_KEYWORDS: keywords}, append)
        return keywords

    def description(self, description: Value, append: bool = False) -> Value:
        self.set_tags({TAG_DESCRIPTION: description}, append)
        return description

    def canonical(self, url: str) -> str:
        self.set_tags({TAG_CANONICAL: url})
        return url

    def noindex(self, noindex: Value, append: bool = False) -> list[str]:
        """
        Add a noindex robots tag. True means "robots", a string names the
        crawler (e.g. "googlebot"); a list sets one entry per crawler.
        """
        return self._robots_directive(TAG_NOINDEX, noindex, append)

    def nofollow(self, nofollow: Value, append: bool = False) -> list[str]:
        return self._robots_directive(TAG_NOFOLLOW, nofollow, append)

    def _robots_directive(self, tag: str, value: Value, append: bool) -> list[str]:
        names = robots_names(value)
        for name in names:
            self.set_tags({tag: name}, append)
            append = True
        return names

    def apply_page_attributes(self, attrs: PageAttributes) -> None:
        """Fold controller-level page_title/page_keywords/page_description in."""
        tags: dict[str, Value] = {}
        if attrs.page_title:
            tags[TAG_TITLE] = attrs.page_title
        if attrs.page_keywords:
            tags[TAG_KEYWORDS] = attrs.page_keywords
        if attrs.page_description:
            tags[TAG_DESCRIPTION] = attrs.page_description
        self.set_tags(tags)
