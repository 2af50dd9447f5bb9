from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from markupsafe import Markup, escape

from metatags.domain.models import LayoutOptions, TranslationRecord
from metatags.domain.schema import (
    OPT_LOWERCASE,
    OPT_PREFIX,
    OPT_REVERSE,
    OPT_SEPARATOR,
    OPT_SUFFIX,
    TAG_CANONICAL,
    TAG_DESCRIPTION,
    TAG_KEYWORDS,
    TAG_NOFOLLOW,
    TAG_NOINDEX,
    TAG_SITE,
    TAG_TITLE,
)
from metatags.normalize import normalize_description, normalize_keywords, normalize_title
from metatags.ports import MarkupHelper, RequestContext, TranslationBackend
from metatags.resolver import resolve_metas
from metatags.state import MetaTags, robots_names
from metatags.substitution import select_translation, substitute
from metatags.utils.values import as_list, is_blank

logger = logging.getLogger(__name__)

_WS_RE = re.compile(r"\s+")


def layout_options(tags: Mapping[str, Any]) -> LayoutOptions:
    """
    Title layout from the merged tags. prefix/suffix default to a single
    space when unset and render nothing when set to False; separator defaults to "".
    """
    prefix = tags.get(OPT_PREFIX)
    separator = tags.get(OPT_SEPARATOR)
    suffix = tags.get(OPT_SUFFIX)
    return LayoutOptions(
        prefix="" if prefix is False else (" " if prefix is None else str(prefix)),
        separator="" if separator is None or separator is False else str(separator),
        suffix="" if suffix is False else (" " if suffix is None else str(suffix)),
        lowercase=tags.get(OPT_LOWERCASE) is True,
        reverse=tags.get(OPT_REVERSE) is True,
    )


@dataclass(frozen=True, slots=True)
class TagRenderer:
    """
    Builds the <head> fragment (title, meta and link tags) for one request.

    The renderer itself is stateless; all per-request data lives in the
    MetaTags instance passed to render().
    """
    backend: TranslationBackend
    markup: MarkupHelper
    context: RequestContext

    def apply_translations(self, state: MetaTags) -> TranslationRecord:
        """
        Fill every tag not set explicitly from the most specific translated
        metas of the current request path.
        """
        state.drop_unset_vars()
        vars = state.vars
        metas = resolve_metas(self.context.path(), self.backend)

        if not state.is_set(TAG_TITLE) and metas.title is not None:
            state.title(select_translation(metas.title, vars))
        if not state.is_set(TAG_DESCRIPTION) and metas.description is not None:
            state.description(select_translation(metas.description, vars))
        if not state.is_set(TAG_KEYWORDS) and metas.keywords is not None:
            state.keywords(select_translation(metas.keywords, vars))
        if not state.is_set(TAG_NOINDEX) and metas.noindex:
            state.noindex(metas.noindex)
        if not state.is_set(TAG_NOFOLLOW) and metas.nofollow:
            state.nofollow(metas.nofollow)
        if not state.is_set(TAG_CANONICAL) and metas.canonical:
            state.canonical(metas.canonical)

        logger.debug("Tags after translations: %s", state.tags)
        return metas

    def render(self, state: MetaTags, defaults: Optional[Mapping[str, Any]] = None) -> Markup:
        """
        Render all tags. `defaults` holds layout-wide values (site, separator,
        fallback title...); anything set on `state` takes precedence.
        """
        self.apply_translations(state)

        meta_tags = {**(defaults or {}), **state.tags}
        vars = state.vars
        layout = layout_options(meta_tags)

        result: list[str] = [self._title(meta_tags, layout, vars)]

        # description
        description = substitute(normalize_description(meta_tags.get(TAG_DESCRIPTION), layout.separator), vars)
        description = normalize_description(description, layout.separator)
        if not is_blank(description):
            result.append(self.markup.void_tag("meta", {"name": "description", "content": description}))

        # keywords
        keywords = substitute(normalize_keywords(meta_tags.get(TAG_KEYWORDS)), vars)
        if isinstance(keywords, list):
            keywords = ",".join(keywords)
        keywords = normalize_keywords(keywords)
        if not is_blank(keywords):
            result.append(self.markup.void_tag("meta", {"name": "keywords", "content": keywords}))

        # noindex & nofollow
        noindex = robots_names(meta_tags.get(TAG_NOINDEX))
        nofollow = robots_names(meta_tags.get(TAG_NOFOLLOW))
        for name in noindex:
            content = "noindex, nofollow" if name in nofollow else "noindex"
            result.append(self.markup.void_tag("meta", {"name": name, "content": content}))
        for name in nofollow:
            if name not in noindex:
                result.append(self.markup.void_tag("meta", {"name": name, "content": "nofollow"}))

        # canonical
        canonical = meta_tags.get(TAG_CANONICAL)
        if not is_blank(canonical):
            href = "".join(str(c) for c in as_list(canonical))
            result.append(self.markup.void_tag("link", {"rel": "canonical", "href": href}))

        return Markup("\n".join(str(r) for r in result))

    def _title(self, meta_tags: Mapping[str, Any], layout: LayoutOptions, vars: Mapping[str, Any]) -> str:
        site = str(meta_tags.get(TAG_SITE) or "")

        title = substitute(meta_tags.get(TAG_TITLE), vars)
        if layout.lowercase and not is_blank(title):
            title = [t.lower() for t in as_list(title)]

        if is_blank(title):
            return self.markup.content_tag("title", site.strip())

        parts = [escape(site), *normalize_title(title)]
        if layout.reverse:
            parts.reverse()

        glue = layout.glue
        if not layout.separator:
            # "Site" + " " + "" + " " + "Page" reads "Site Page"
            glue = _WS_RE.sub(" ", glue)
        return self.markup.content_tag("title", escape(glue).join(parts).strip())
