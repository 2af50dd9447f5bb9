from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from metatags.domain.errors import SettingsError


@dataclass(frozen=True)
class Translations:
    dir: Path
    locale: str


@dataclass(frozen=True)
class LayoutDefaults:
    site: str = ""
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    prefix: Any = " "
    separator: str = ""
    suffix: Any = " "
    lowercase: bool = False
    reverse: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    def as_defaults(self) -> dict[str, Any]:
        """Defaults mapping for TagRenderer.render(); unset fields are left out."""
        out: dict[str, Any] = {
            "site": self.site,
            "prefix": self.prefix,
            "separator": self.separator,
            "suffix": self.suffix,
            "lowercase": self.lowercase,
            "reverse": self.reverse,
        }
        for key in ("title", "description", "keywords"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        out.update(self.extra)
        return out


@dataclass(frozen=True)
class MarkupOptions:
    # False renders HTML5-style void tags: <meta ...>
    self_closing: bool = True


@dataclass(frozen=True)
class Settings:
    translations: Translations
    layout: LayoutDefaults
    markup: MarkupOptions = field(default_factory=MarkupOptions)


_LAYOUT_KEYS = {"site", "title", "description", "keywords", "prefix", "separator", "suffix", "lowercase", "reverse"}


def load_settings(path: str | Path = "settings.toml", locale: Optional[str] = None) -> Settings:
    path = Path(path)

    if not path.exists():
        raise SettingsError(f"Missing config file: {path}")

    with path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise SettingsError(f"Invalid TOML in {path}: {e}") from e

    def expand(p: str) -> Path:
        p = Path(os.path.expandvars(os.path.expanduser(p)))
        # relative dirs are relative to the settings file
        return (p if p.is_absolute() else path.parent / p).resolve()

    try:
        layout = dict(raw.get("layout", {}))
        return Settings(
            translations=Translations(
                dir=expand(raw["translations"]["dir"]),
                locale=locale or str(raw["translations"]["locale"]),
            ),
            layout=LayoutDefaults(
                **{k: v for k, v in layout.items() if k in _LAYOUT_KEYS},
                extra={k: v for k, v in layout.items() if k not in _LAYOUT_KEYS},
            ),
            markup=MarkupOptions(
                self_closing=bool(raw.get("markup", {}).get("self_closing", True)),
            ),
        )
    except KeyError as e:
        raise SettingsError(f"Missing config key: {e}") from e
