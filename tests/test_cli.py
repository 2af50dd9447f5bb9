"""Tests for the metatags command line."""

from __future__ import annotations

import pytest

from metatags.app.cli import main, parse_vars, split_route


def test_parse_vars_repeated_names_become_lists():
    assert parse_vars(["name=Bob", "tag=a", "tag=b", "tag=c"]) == {"name": "Bob", "tag": ["a", "b", "c"]}


def test_parse_vars_rejects_missing_equals():
    with pytest.raises(ValueError):
        parse_vars(["name"])


@pytest.mark.parametrize(
    "route, expected",
    [
        ("users/show", ("users", "show")),
        ("admin/users/index", ("admin/users", "index")),
        ("/users/show/", ("users", "show")),
        ("users", ("users", "index")),
    ],
)
def test_split_route(route, expected):
    assert split_route(route) == expected


@pytest.fixture
def settings_file(tmp_path):
    locales = tmp_path / "locales"
    locales.mkdir()
    (locales / "en.yml").write_text(
        "en:\n"
        "  metas:\n"
        "    defaults:\n"
        "      title: Welcome\n"
        "    users:\n"
        "      show:\n"
        "        title:\n"
        "          anonymous: Profile\n"
        "          named: Profile of %{name}\n",
        encoding="utf-8",
    )
    path = tmp_path / "settings.toml"
    path.write_text('[translations]\ndir = "locales"\nlocale = "en"\n\n[layout]\nsite = "Site"\nseparator = "|"\n')
    return path


def test_main_renders_translated_title(settings_file, capsys):
    code = main(["users/show", "--settings", str(settings_file), "--var", "name=Ann", "--noindex", "googlebot"])
    out = capsys.readouterr().out
    assert code == 0
    assert "<title>Site | Profile of Ann</title>" in out
    assert '<meta name="googlebot" content="noindex" />' in out


def test_main_reports_errors(tmp_path, capsys):
    code = main(["users/show", "--settings", str(tmp_path / "missing.toml")])
    assert code == 1
    assert "Missing config file" in capsys.readouterr().err
