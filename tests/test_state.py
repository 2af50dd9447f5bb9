"""Unit tests for the per-request meta tag accumulator."""

from __future__ import annotations

from metatags.domain.models import PageAttributes
from metatags.state import MetaTags, robots_names


class TestSetTags:
    def test_later_keys_win(self, state):
        state.set_tags({"title": "A", "description": "D"})
        state.set_tags({"title": "B"})
        assert state.tags == {"title": "B", "description": "D"}

    def test_none_is_ignored(self, state):
        state.set_tags(None)
        assert state.tags == {}

    def test_append_flag_delegates(self, state):
        state.set_tags({"title": "A"})
        state.set_tags({"title": "B"}, append=True)
        assert state.get("title") == ["A", "B"]

    def test_tags_view_is_a_copy(self, state):
        state.tags["title"] = "x"
        assert state.tags == {}


class TestAppendTags:
    def test_absent_key_starts_empty(self, state):
        state.append_tags({"keywords": ["a", "b"]})
        assert state.get("keywords") == ["a", "b"]

    def test_scalar_promoted_before_append(self, state):
        state.set_tags({"keywords": "a"})
        state.append_tags({"keywords": "b"})
        state.append_tags({"keywords": ["c", "d"]})
        assert state.get("keywords") == ["a", "b", "c", "d"]

    def test_boolean_scalar_promoted(self, state):
        state.set_tags({"noindex": True})
        state.append_tags({"noindex": "googlebot"})
        assert state.get("noindex") == [True, "googlebot"]


class TestSetVars:
    def test_merge_by_default(self, state):
        state.set_vars({"a": "1"})
        state.set_vars({"b": ["2", "3"]})
        assert state.vars == {"a": "1", "b": ["2", "3"]}

    def test_replace(self, state):
        state.set_vars({"a": "1"})
        state.set_vars({"b": "2"}, append=False)
        assert state.vars == {"b": "2"}

    def test_drop_unset_vars(self, state):
        state.set_vars({"a": "1", "b": None})
        state.drop_unset_vars()
        assert state.vars == {"a": "1"}


class TestConvenienceSetters:
    def test_title_returns_title(self, state):
        assert state.title("Login Page") == "Login Page"
        assert state.get("title") == "Login Page"

    def test_title_returns_headline(self, state):
        assert state.title("Login Page", "Please login") == "Please login"
        assert state.get("title") == "Login Page"

    def test_title_append(self, state):
        state.title("Users")
        state.title("Ann", append=True)
        assert state.get("title") == ["Users", "Ann"]

    def test_keywords_and_description(self, state):
        assert state.keywords(["a", "b"]) == ["a", "b"]
        assert state.description("Desc") == "Desc"
        assert state.tags == {"keywords": ["a", "b"], "description": "Desc"}

    def test_canonical(self, state):
        assert state.canonical("https://example.com/") == "https://example.com/"
        assert state.get("canonical") == "https://example.com/"

    def test_noindex_true_means_robots(self, state):
        assert state.noindex(True) == ["robots"]
        assert state.get("noindex") == "robots"

    def test_noindex_list_accumulates(self, state):
        state.noindex(["googlebot", "bingbot"])
        assert state.get("noindex") == ["googlebot", "bingbot"]

    def test_nofollow_repeated_calls_accumulate(self, state):
        state.nofollow("googlebot")
        state.nofollow("bingbot", append=True)
        assert state.get("nofollow") == ["googlebot", "bingbot"]

    def test_nofollow_overwrites_without_append(self, state):
        state.nofollow("googlebot")
        state.nofollow("bingbot")
        assert state.get("nofollow") == "bingbot"

    def test_false_sets_nothing(self, state):
        assert state.noindex(False) == []
        assert not state.is_set("noindex")

    def test_apply_page_attributes(self, state):
        state.description("keep me")
        state.apply_page_attributes(PageAttributes(page_title="Member Login", page_keywords="site, login"))
        assert state.tags == {
            "description": "keep me",
            "title": "Member Login",
            "keywords": "site, login",
        }


def test_robots_names():
    assert robots_names([True, "googlebot", None, False]) == ["robots", "googlebot"]
    assert robots_names(None) == []


def test_instances_do_not_share_state():
    a, b = MetaTags(), MetaTags()
    a.title("A")
    a.set_vars({"x": "1"})
    assert b.tags == {}
    assert b.vars == {}
