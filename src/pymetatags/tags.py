"""Tag string formatting.

Every name and content value is HTML-escaped before it is embedded.
Meta names are dispatched by prefix, first match wins, so ``og:`` and
``fb:`` names never fall through to the ``description``/``section``
rules even when they contain those words.
"""

from __future__ import annotations

import html
from typing import Any

from pymetatags._constants import (
    DEFAULT_IMAGE_QUERY,
    DESCRIPTION_PREFIX,
    IMAGE_SRC_PREFIX,
    OG_IMAGE,
    OG_URL,
    PROPERTY_PREFIXES,
    REL_PREFIX,
    REL_STRIP_CHARS,
    REL_STRIP_CHARSET,
    REL_STRIP_LITERAL,
    SECTION_PREFIX,
)
from pymetatags.exceptions import MetaTagConversionError
from pymetatags.models.values import MetaScalar


def to_text(value: Any, *, name: str = "") -> str:
    """Convert a scalar to tag text.

    Booleans follow the HTML attribute convention of ``"1"`` for true and
    ``""`` for false. Anything that is not a scalar raises
    :class:`MetaTagConversionError`.
    """
    if isinstance(value, MetaScalar):
        value = value.value
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float)):
        return str(value)
    raise MetaTagConversionError(
        f"Cannot render {type(value).__name__} as tag content for {name!r}",
        name=name,
        value_type=type(value).__name__,
    )


def escape(value: Any, *, name: str = "") -> str:
    return html.escape(to_text(value, name=name), quote=True)


def strip_rel_prefix(name: str, mode: str = REL_STRIP_LITERAL) -> str:
    """Remove the ``rel:`` prefix from a link name.

    ``charset`` mode left-trims every leading ``r``, ``e``, ``l`` and ``:``,
    so ``rel:license`` becomes ``icense``.
    """
    if mode == REL_STRIP_CHARSET:
        return name.lstrip(REL_STRIP_CHARS)
    if name.startswith(REL_PREFIX):
        return name[len(REL_PREFIX) :]
    return name


def meta_tag(
    name: str,
    content: Any,
    *,
    image_query: str = DEFAULT_IMAGE_QUERY,
    rel_strip: str = REL_STRIP_LITERAL,
) -> str:
    """Return a meta or link tag for *name* with *content*."""
    name = escape(name)
    content = escape(content, name=name)

    if name.startswith(PROPERTY_PREFIXES):
        if name == OG_IMAGE:
            if image_query:
                return f'<meta property="{name}" content="{content}&{image_query}"/>'
            return f'<meta property="{name}" content="{content}"/>'
        if name.startswith(OG_IMAGE):
            return f'<meta property="{name}" content="{content}"/>'
        if name.startswith(OG_URL):
            return f'<meta itemprop="url" property="{name}" content="{content}"/>'
        return f'<meta property="{name}" content="{content}"/>'
    if name.startswith(DESCRIPTION_PREFIX):
        return f'<meta itemprop="description" name="{name}" content="{content}"/>'
    if name.startswith(SECTION_PREFIX):
        return f'<meta itemprop="articleSection" name="{name}" content="{content}"/>'
    if name.startswith(IMAGE_SRC_PREFIX):
        return f'<meta itemprop="thumbnailUrl" name="{name}" content="{content}"/>'
    if name.startswith(REL_PREFIX):
        return f'<link rel="{strip_rel_prefix(name, rel_strip)}" href="{content}"/>'
    return f'<meta name="{name}" content="{content}"/>'


def title_tag(content: Any) -> str:
    """Return a ``<title>`` element for *content*."""
    return f"<title>{escape(content, name='title')}</title>"
