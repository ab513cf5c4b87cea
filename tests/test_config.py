from __future__ import annotations

import pytest

from pymetatags.config import RendererConfig
from pymetatags.exceptions import MetaTagConfigError, MetaTagError


def test_defaults() -> None:
    config = RendererConfig()

    assert config.image_query == "auto=format%2Ccompress"
    assert config.rel_strip == "literal"
    assert config.separator == "\n"
    assert config.keyword_separator == ", "
    assert config.lowercase_keywords is True


def test_invalid_rel_strip_rejected() -> None:
    with pytest.raises(MetaTagConfigError):
        RendererConfig(rel_strip="regex")

    assert issubclass(MetaTagConfigError, MetaTagError)


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PYMETATAGS_IMAGE_QUERY", "fm=webp")
    monkeypatch.setenv("PYMETATAGS_REL_STRIP", " Charset ")
    monkeypatch.setenv("PYMETATAGS_LOWERCASE_KEYWORDS", "off")

    config = RendererConfig.from_env()

    assert config.image_query == "fm=webp"
    assert config.rel_strip == "charset"
    assert config.lowercase_keywords is False


def test_from_env_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv("PYMETATAGS_SEPARATOR", " ")
    monkeypatch.setenv("PYMETATAGS_LOWERCASE_KEYWORDS", "false")

    config = RendererConfig.from_env(separator="\n", lowercase_keywords=True)

    assert config.separator == "\n"
    assert config.lowercase_keywords is True
