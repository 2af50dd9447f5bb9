from __future__ import annotations

from typing import Final

# Canonical tag keys used across the system
TAG_SITE: Final[str] = "site"
TAG_TITLE: Final[str] = "title"
TAG_DESCRIPTION: Final[str] = "description"
TAG_KEYWORDS: Final[str] = "keywords"
TAG_NOINDEX: Final[str] = "noindex"
TAG_NOFOLLOW: Final[str] = "nofollow"
TAG_CANONICAL: Final[str] = "canonical"

# Layout options
OPT_PREFIX: Final[str] = "prefix"
OPT_SEPARATOR: Final[str] = "separator"
OPT_SUFFIX: Final[str] = "suffix"
OPT_LOWERCASE: Final[str] = "lowercase"
OPT_REVERSE: Final[str] = "reverse"

# Translation lookups
METAS_ROOT: Final[str] = "metas"
METAS_DEFAULTS_PATH: Final[str] = "metas.defaults"
PATH_SEPARATOR: Final[str] = "."

# Fields whose presence marks a translation record as usable
CONTENT_FIELDS: Final[tuple[str, ...]] = (TAG_TITLE, TAG_DESCRIPTION, TAG_KEYWORDS)

DESCRIPTION_MAX_LENGTH: Final[int] = 200
KEYWORDS_MAX_LENGTH: Final[int] = 500
ROBOTS: Final[str] = "robots"
