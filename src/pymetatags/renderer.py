"""Meta tag renderer.

:class:`TagRenderer` accumulates attributes across ``set`` calls and renders
them, merged over caller-supplied defaults, as a block of ``<meta>``,
``<link>`` and ``<title>`` tags ready to be embedded in a document head.

Example
-------
>>> renderer = TagRenderer()
>>> renderer.set({"og": {"title": "Hello"}, "keywords": ["News", "World"]})
{'og': {'title': 'Hello'}, 'keywords': ['News', 'World']}
>>> print(renderer.display())
<meta property="og:title" content="Hello"/>
<meta name="keywords" content="news, world"/>
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pymetatags._constants import KEYWORDS_KEY, TITLE_KEY
from pymetatags._redact import redact_for_log
from pymetatags.config import RendererConfig
from pymetatags.models.values import MetaList, MetaMap, MetaScalar, classify
from pymetatags.normalize import deep_merge, filter_attributes, prepare_keywords
from pymetatags.tags import meta_tag, title_tag

_logger = logging.getLogger(__name__)


class TagRenderer:
    """Accumulates meta attributes and renders them as HTML tags.

    The renderer holds mutable state and is not shared between requests;
    create one instance per page being rendered.

    Parameters
    ----------
    config : RendererConfig or None
        Formatting options. Defaults to :class:`RendererConfig` defaults.
    """

    def __init__(self, config: RendererConfig | None = None) -> None:
        self._config = config or RendererConfig()
        self._attributes: dict[str, Any] = {}

    @property
    def config(self) -> RendererConfig:
        return self._config

    def set(self, attributes: Mapping[str, Any] | None = None, exclude: Iterable[str] = ()) -> dict[str, Any]:
        """Merge *attributes* into the stored attributes.

        Top-level entries with an empty value, or whose key is listed in
        *exclude*, are dropped before merging and leave any stored value
        for that key untouched.

        Returns
        -------
        dict
            A copy of the full attribute map after the merge.
        """
        incoming = dict(attributes or {})
        accepted = filter_attributes(incoming, exclude)
        dropped = [key for key in incoming if key not in accepted]
        if dropped:
            _logger.debug("Dropped empty or excluded meta attributes: %s", dropped)

        self._attributes = deep_merge(self._attributes, accepted)
        _logger.debug("Meta attributes set: %s", redact_for_log(accepted))
        return self.get_attributes()

    def display(self, defaults: Mapping[str, Any] | None = None, display_title: bool = False) -> str:
        """Render the stored attributes merged over *defaults*.

        Stored attributes win over defaults. The ``title`` element is
        appended last, and only when *display_title* is true.
        """
        effective = deep_merge(defaults or {}, self._attributes)
        results: list[str] = []

        for name, content in effective.items():
            name = str(name)
            if name == KEYWORDS_KEY:
                keywords = prepare_keywords(
                    content,
                    separator=self._config.keyword_separator,
                    lowercase=self._config.lowercase_keywords,
                )
                if keywords is not None:
                    results.append(self._meta_tag(KEYWORDS_KEY, keywords))
                continue

            value = classify(content)
            if isinstance(value, MetaMap):
                results.extend(self.process_nested_attributes(name, value))
            else:
                results.extend(self._repeated_tags(name, value))

        if display_title and effective.get(TITLE_KEY) is not None:
            results.append(title_tag(effective[TITLE_KEY]))

        _logger.debug("Rendered %d meta tags", len(results))
        return self._config.separator.join(results)

    def clear(self) -> dict[str, Any]:
        """Drop every stored attribute."""
        self._attributes = {}
        return self.get_attributes()

    def get_attributes(self) -> dict[str, Any]:
        """Return a copy of the stored attributes."""
        return copy.deepcopy(self._attributes)

    def remove(self, key: str) -> Any:
        """Remove *key* from the stored attributes and return its value, or ``None``."""
        return self._attributes.pop(key, None)

    def process_nested_attributes(self, property_name: str, content: Any) -> list[str]:
        """Flatten nested attributes into tags.

        Associative entries extend the property path (``og`` + ``title``
        becomes ``og:title``). Sequence elements keep the current path, so a
        list of mappings renders each mapping under the same prefix.
        """
        value = classify(content)
        results: list[str] = []

        if isinstance(value, MetaMap):
            for key, item in value.entries.items():
                results.extend(self.process_nested_attributes(f"{property_name}:{key}", item))
            return results

        items = value.items if isinstance(value, MetaList) else [value]
        for item in items:
            if isinstance(item, MetaScalar):
                results.append(self._meta_tag(property_name, item))
            else:
                results.extend(self.process_nested_attributes(property_name, item))
        return results

    def _repeated_tags(self, name: str, value: MetaScalar | MetaList) -> list[str]:
        if isinstance(value, MetaScalar):
            return [self._meta_tag(name, value)]
        results: list[str] = []
        for item in value.items:
            if isinstance(item, MetaScalar):
                results.append(self._meta_tag(name, item))
            else:
                # Nested containers inside a plain list keep the parent name.
                results.extend(self.process_nested_attributes(name, item))
        return results

    def _meta_tag(self, name: str, content: Any) -> str:
        return meta_tag(
            name,
            content,
            image_query=self._config.image_query,
            rel_strip=self._config.rel_strip,
        )
