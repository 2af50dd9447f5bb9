from __future__ import annotations

import pytest

from metatags.adapters.markup.html_markup import HtmlMarkupHelper
from metatags.adapters.request_context.route_context import RouteContext
from metatags.adapters.translations.in_memory_backend import InMemoryTranslationBackend
from metatags.renderer import TagRenderer
from metatags.state import MetaTags

TRANSLATIONS = {
    "metas": {
        "defaults": {
            "description": "Default description",
        },
        "users": {
            "show": {
                "title": {
                    "anonymous": "Profile",
                    "named": "Profile of %{name}",
                    "named_in_city": "Profile of %{name} in %{city}",
                },
                "description": "All about %{name}",
            },
            "index": {
                "title": "Members",
                "keywords": "members, people",
            },
        },
        "admin": {
            "title": "Admin",
            "noindex": True,
            "nofollow": "googlebot",
            "canonical": "https://example.com/admin",
        },
    }
}


@pytest.fixture
def backend() -> InMemoryTranslationBackend:
    return InMemoryTranslationBackend(data=TRANSLATIONS)


@pytest.fixture
def markup() -> HtmlMarkupHelper:
    return HtmlMarkupHelper()


@pytest.fixture
def state() -> MetaTags:
    return MetaTags()


@pytest.fixture
def make_renderer(backend, markup):
    def _make(controller: str = "pages", action: str = "home") -> TagRenderer:
        return TagRenderer(backend=backend, markup=markup, context=RouteContext(controller, action))

    return _make
