from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from metatags.domain.errors import MetasNotFoundError, MissingTranslationError
from metatags.domain.models import TranslationRecord
from metatags.domain.schema import CONTENT_FIELDS, METAS_DEFAULTS_PATH, PATH_SEPARATOR
from metatags.ports import TranslationBackend

logger = logging.getLogger(__name__)


def _is_usable(entry: Any) -> bool:
    return isinstance(entry, Mapping) and any(entry.get(f) is not None for f in CONTENT_FIELDS)


def resolve_metas(path: Sequence[str], backend: TranslationBackend) -> TranslationRecord:
    """
    Find the most specific metadata record for `path`.

    Tries ``metas.users.show``, then ``metas.users``, then ``metas`` and
    finally the global ``metas.defaults``. Only entries carrying a title,
    description or keywords count as a match.
    """
    segments = list(path)

    while segments:
        key = PATH_SEPARATOR.join(segments)
        try:
            entry = backend.lookup(key)
        except MissingTranslationError:
            entry = None

        if _is_usable(entry):
            logger.debug("Metas resolved at %s", key)
            return TranslationRecord.model_validate(dict(entry))

        logger.debug("No metas at %s, falling back", key)
        segments.pop()

    try:
        entry = backend.lookup(METAS_DEFAULTS_PATH)
    except MissingTranslationError as e:
        raise MetasNotFoundError(
            f"No metas found for {PATH_SEPARATOR.join(path)!r} nor {METAS_DEFAULTS_PATH!r}"
        ) from e

    if not isinstance(entry, Mapping):
        raise MetasNotFoundError(f"{METAS_DEFAULTS_PATH!r} is not a metas record: {entry!r}")

    logger.debug("Metas resolved at %s", METAS_DEFAULTS_PATH)
    return TranslationRecord.model_validate(dict(entry))
