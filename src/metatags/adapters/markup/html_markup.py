from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from markupsafe import Markup, escape


@dataclass(frozen=True, slots=True)
class HtmlMarkupHelper:
    """
    Tag serializer backed by markupsafe. Text and attribute values are
    escaped unless already Markup; None attributes are skipped.
    """
    self_closing: bool = True

    def content_tag(self, name: str, text: str) -> Markup:
        return Markup("<{0}>{1}</{0}>").format(name, text)

    def void_tag(self, name: str, attributes: Mapping[str, object]) -> Markup:
        attrs = Markup("").join(
            Markup(' {0}="{1}"').format(key, value)
            for key, value in attributes.items()
            if value is not None
        )
        close = Markup(" />") if self.self_closing else Markup(">")
        return Markup("<") + escape(name) + attrs + close
