"""Renderer configuration for pymetatags."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pymetatags._constants import (
    DEFAULT_IMAGE_QUERY,
    DEFAULT_KEYWORD_SEPARATOR,
    DEFAULT_SEPARATOR,
    REL_STRIP_LITERAL,
    REL_STRIP_MODES,
)
from pymetatags.exceptions import MetaTagConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class RendererConfig:
    """Renderer configuration.

    Parameters
    ----------
    image_query : str
        Query string appended to the content of a bare ``og:image`` tag
        (joined with ``&``). An empty string disables the suffix.
    rel_strip : str
        How the ``rel:`` prefix is removed from link names. ``"literal"``
        removes the four-character prefix once; ``"charset"`` left-trims
        any run of the characters ``r``, ``e``, ``l`` and ``:``, which
        matches output produced by older renderers byte for byte.
    separator : str
        String placed between rendered tags.
    keyword_separator : str
        String used to join a keyword sequence.
    lowercase_keywords : bool
        Lowercase the keyword tag content after stripping markup.
    """

    image_query: str = DEFAULT_IMAGE_QUERY
    rel_strip: str = REL_STRIP_LITERAL
    separator: str = DEFAULT_SEPARATOR
    keyword_separator: str = DEFAULT_KEYWORD_SEPARATOR
    lowercase_keywords: bool = True

    def __post_init__(self) -> None:
        if self.rel_strip not in REL_STRIP_MODES:
            raise MetaTagConfigError(
                f"rel_strip must be one of {sorted(REL_STRIP_MODES)}, got {self.rel_strip!r}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> RendererConfig:
        """Create configuration from environment variables.

        Reads the optional ``PYMETATAGS_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RendererConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PYMETATAGS_IMAGE_QUERY": "image_query",
            "PYMETATAGS_REL_STRIP": "rel_strip",
            "PYMETATAGS_SEPARATOR": "separator",
            "PYMETATAGS_KEYWORD_SEPARATOR": "keyword_separator",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "rel_strip" in config_kwargs:
            config_kwargs["rel_strip"] = config_kwargs["rel_strip"].strip().lower()

        if "lowercase_keywords" not in overrides:
            config_kwargs["lowercase_keywords"] = _env_bool(
                env.get("PYMETATAGS_LOWERCASE_KEYWORDS"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
