from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import print as rprint
from rich.markup import escape as rich_escape

from metatags import config
from metatags.app.container import build_container
from metatags.domain.errors import MetaTagsError
from metatags.settings import load_settings
from metatags.state import MetaTags


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render the <head> meta tags for a controller/action.")
    p.add_argument("route", type=str, help="controller/action, e.g. users/show or admin/users/index")

    p.add_argument("--settings", type=str, default=config.SETTINGS_PATH, help="Path to settings.toml")
    p.add_argument("--locale", type=str, default=config.LOCALE, help="Override the translations locale")

    p.add_argument("--var", action="append", default=[], metavar="NAME=VALUE",
                   help="Substitution variable; repeat a name to give it several values")

    p.add_argument("--title", type=str, default=None)
    p.add_argument("--description", type=str, default=None)
    p.add_argument("--keywords", type=str, default=None)
    p.add_argument("--noindex", action="append", default=None, metavar="BOT")
    p.add_argument("--nofollow", action="append", default=None, metavar="BOT")
    p.add_argument("--canonical", type=str, default=None)

    p.add_argument("--verbose", action="store_true", help="Log translation lookups")

    return p.parse_args(argv)


def parse_vars(pairs: list[str]) -> dict[str, Any]:
    """
    ["name=Bob", "tag=a", "tag=b"] -> {"name": "Bob", "tag": ["a", "b"]}
    """
    out: dict[str, Any] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got {pair!r}")
        if name in out:
            current = out[name]
            out[name] = (current if isinstance(current, list) else [current]) + [value]
        else:
            out[name] = value
    return out


def split_route(route: str) -> tuple[str, str]:
    controller, _, action = route.strip("/").rpartition("/")
    if not controller:
        return action, "index"
    return controller, action


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = load_settings(args.settings, locale=args.locale)
        c = build_container(settings)

        controller, action = split_route(args.route)
        tags = MetaTags()
        tags.set_vars(parse_vars(args.var))

        if args.title:
            tags.title(args.title)
        if args.description:
            tags.description(args.description)
        if args.keywords:
            tags.keywords(args.keywords)
        if args.noindex:
            tags.noindex(args.noindex)
        if args.nofollow:
            tags.nofollow(args.nofollow)
        if args.canonical:
            tags.canonical(args.canonical)

        html = c.renderer_for(controller, action).render(tags, c.defaults)
    except (MetaTagsError, ValueError) as e:
        rprint(f"[red]error:[/red] {rich_escape(str(e))}", file=sys.stderr)
        return 1

    rprint(f"[bold]{rich_escape(controller)}#{rich_escape(action)}[/bold]", file=sys.stderr)
    print(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
