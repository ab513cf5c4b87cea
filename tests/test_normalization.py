from __future__ import annotations

from pymetatags.normalize import deep_merge, filter_attributes, is_meaningful, prepare_keywords, strip_tags


def test_is_meaningful() -> None:
    assert not is_meaningful(None)
    assert not is_meaningful("")
    assert not is_meaningful([])
    assert not is_meaningful({})
    assert is_meaningful(0)
    assert is_meaningful(False)
    assert is_meaningful(" ")
    assert is_meaningful(["a"])


def test_filter_attributes_is_top_level_only() -> None:
    attributes = {"og": {"title": "", "type": "article"}, "robots": "noindex", "author": ""}

    assert filter_attributes(attributes, exclude={"robots"}) == {"og": {"title": "", "type": "article"}}


def test_deep_merge_does_not_mutate_inputs() -> None:
    base = {"og": {"title": "A", "type": "website"}, "keywords": ["a", "b"]}
    override = {"og": {"title": "B"}, "keywords": ["c"]}

    merged = deep_merge(base, override)

    assert merged == {"og": {"title": "B", "type": "website"}, "keywords": ["c"]}
    assert base == {"og": {"title": "A", "type": "website"}, "keywords": ["a", "b"]}
    merged["og"]["title"] = "C"
    assert override["og"]["title"] == "B"


def test_strip_tags() -> None:
    assert strip_tags("<p>Hi</p><!-- note -->there") == "Hithere"
    assert strip_tags("a < b") == "a < b"
    assert strip_tags("cut <em unclosed") == "cut "


def test_prepare_keywords() -> None:
    assert prepare_keywords(None) is None
    assert prepare_keywords([]) is None
    assert prepare_keywords(["Foo", "BAR"]) == "foo, bar"
    assert prepare_keywords("Single") == "single"
    assert prepare_keywords({"a": "X", "b": "Y"}) == "x, y"


def test_prepare_keywords_options() -> None:
    assert prepare_keywords(["Foo", "Bar"], separator=",", lowercase=False) == "Foo,Bar"
