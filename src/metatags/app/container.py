from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from metatags.adapters.markup.html_markup import HtmlMarkupHelper
from metatags.adapters.request_context.route_context import RouteContext
from metatags.adapters.translations.yaml_backend import YamlTranslationBackend
from metatags.domain.errors import SettingsError
from metatags.ports import MarkupHelper, RequestContext, TranslationBackend
from metatags.renderer import TagRenderer
from metatags.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds the process-wide collaborators; per-request state is not kept here.
    """
    backend: TranslationBackend
    markup: MarkupHelper
    defaults: dict[str, Any]

    def renderer(self, context: RequestContext) -> TagRenderer:
        return TagRenderer(backend=self.backend, markup=self.markup, context=context)

    def renderer_for(self, controller: str, action: str) -> TagRenderer:
        return self.renderer(RouteContext(controller=controller, action=action))


def build_container(settings: Settings) -> Container:
    backend = YamlTranslationBackend.from_dir(settings.translations.dir, locale=settings.translations.locale)
    if settings.translations.locale not in backend.locales():
        raise SettingsError(
            f"Locale {settings.translations.locale!r} not found in {settings.translations.dir} "
            f"(available: {', '.join(backend.locales()) or 'none'})"
        )
    logger.debug("Translations from %s (locale=%s)", settings.translations.dir, settings.translations.locale)
    return Container(
        backend=backend,
        markup=HtmlMarkupHelper(self_closing=settings.markup.self_closing),
        defaults=settings.layout.as_defaults(),
    )
