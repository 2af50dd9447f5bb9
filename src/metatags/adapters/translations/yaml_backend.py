from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from metatags.adapters.translations.in_memory_backend import dig
from metatags.domain.errors import MissingTranslationError, TranslationLoadError
from metatags.domain.schema import PATH_SEPARATOR

logger = logging.getLogger(__name__)


def deep_merge(base: dict[str, Any], other: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge `other` into `base`; later files win on scalars."""
    for k, v in other.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), dict):
            deep_merge(base[k], v)
        elif isinstance(v, Mapping):
            base[k] = deep_merge({}, v)
        else:
            base[k] = v
    return base


@dataclass(slots=True)
class YamlTranslationBackend:
    """
    Locale files loaded from a directory, Rails-style:

        locales/en.yml
          en:
            metas:
              defaults:
                title: "Welcome"
              users:
                show:
                  title:
                    named: "%{name}'s profile"
                    anonymous: "Profile"

    Every *.yml / *.yaml file is read (sorted by name) and deep-merged.
    """
    path: Path
    locale: str = "en"
    _data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dir(cls, path: str | Path, locale: str = "en") -> "YamlTranslationBackend":
        backend = cls(path=Path(path), locale=locale)
        backend.load()
        return backend

    def load(self) -> None:
        self._data.clear()

        if not self.path.is_dir():
            raise TranslationLoadError(f"Missing translations directory: {self.path}")

        files = sorted([*self.path.glob("*.yml"), *self.path.glob("*.yaml")])
        for file in files:
            try:
                raw = yaml.safe_load(file.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise TranslationLoadError(f"Invalid YAML in {file}: {e}") from e
            if not isinstance(raw, Mapping):
                raise TranslationLoadError(f"{file} must contain a mapping at the top level")
            deep_merge(self._data, raw)

        logger.debug("Loaded %d translation file(s) from %s", len(files), self.path)

    def lookup(self, path: str) -> Any:
        try:
            return dig(self._data, f"{self.locale}{PATH_SEPARATOR}{path}")
        except MissingTranslationError:
            raise MissingTranslationError(path) from None

    def locales(self) -> list[str]:
        return sorted(str(k) for k in self._data)
