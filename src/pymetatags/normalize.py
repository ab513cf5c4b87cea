"""Normalization helpers.

Emptiness filtering, deep merging and keyword preparation.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterable, Mapping
from typing import Any

from pymetatags._constants import DEFAULT_KEYWORD_SEPARATOR
from pymetatags.models.values import MetaList, MetaMap, MetaScalar, classify
from pymetatags.tags import to_text

# Comments, and anything that opens like a tag, up to its closing ``>`` or the end of input.
_MARKUP_RE = re.compile(r"<!--.*?(?:-->|$)|<[A-Za-z/!?][^>]*(?:>|$)", re.DOTALL)


def is_meaningful(value: Any) -> bool:
    """Return True if the value should be stored.

    ``None``, empty strings and empty containers are dropped. Zero and
    ``False`` are real values and are kept.
    """

    if value is None:
        return False
    if isinstance(value, (str, bytes)):
        return value != "" and value != b""
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) > 0
    return True


def filter_attributes(attributes: Mapping[str, Any], exclude: Iterable[str] = ()) -> dict[str, Any]:
    """Drop top-level entries that are empty or listed in *exclude*."""
    excluded = frozenset(exclude)
    return {key: value for key, value in attributes.items() if key not in excluded and is_meaningful(value)}


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a deep copy of *base* with *override* merged on top.

    Where both sides hold a mapping for the same key the two are merged
    recursively. Any other value in *override* replaces the base value,
    including a list replacing a mapping or a scalar replacing a list.
    """

    merged: dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def strip_tags(text: str) -> str:
    """Remove HTML tags and comments from *text*.

    A ``<`` followed by whitespace or a digit is not a tag and is kept.
    """
    return _MARKUP_RE.sub("", text)


def _keyword_text(value: MetaScalar | MetaList | MetaMap, separator: str) -> str:
    if isinstance(value, MetaScalar):
        return to_text(value, name="keywords")
    if isinstance(value, MetaMap):
        parts = value.entries.values()
    else:
        parts = value.items
    return separator.join(_keyword_text(part, separator) for part in parts)


def prepare_keywords(
    keywords: Any,
    *,
    separator: str = DEFAULT_KEYWORD_SEPARATOR,
    lowercase: bool = True,
) -> str | None:
    """Join a keyword sequence into one string, strip markup and lowercase it.

    Returns ``None`` for ``None`` or an empty sequence so that no keywords
    tag is rendered.
    """
    if keywords is None:
        return None
    value = classify(keywords)
    if isinstance(value, MetaList) and not value.items:
        return None

    text = strip_tags(_keyword_text(value, separator))
    return text.lower() if lowercase else text
