"""Tagged attribute values.

Raw attribute data (nested dicts, lists and scalars) is classified once
into one of three variants before rendering:

* :class:`MetaScalar` - a single renderable value.
* :class:`MetaList` - an ordered sequence of values. Lists, tuples and
  mappings whose keys are all integer-like end up here.
* :class:`MetaMap` - an associative mapping. Any mapping with at least one
  non-numeric key is associative; its entries are rendered as
  colon-joined property paths.

Renderers dispatch on the variant type and never re-inspect raw shapes.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

_INTEGER_KEY_RE = re.compile(r"0|-?[1-9][0-9]*")


def is_numeric_key(key: Any) -> bool:
    """Return ``True`` for keys that index a plain list (``0``, ``"1"``, ...)."""
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and _INTEGER_KEY_RE.fullmatch(key) is not None


def is_associative(value: Any) -> bool:
    """Return ``True`` when *value* is a mapping with a non-numeric key."""
    if isinstance(value, MetaMap):
        return True
    if not isinstance(value, Mapping):
        return False
    return any(not is_numeric_key(key) for key in value)


class _MetaValueModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class MetaScalar(_MetaValueModel):
    """A single value rendered as one tag."""

    kind: Literal["scalar"] = "scalar"
    value: Any


class MetaList(_MetaValueModel):
    """An ordered sequence of values, rendered as repeated tags."""

    kind: Literal["list"] = "list"
    items: list[MetaValue] = Field(default_factory=list)


class MetaMap(_MetaValueModel):
    """An associative mapping, rendered as ``parent:key`` property paths."""

    kind: Literal["map"] = "map"
    entries: dict[str, MetaValue] = Field(default_factory=dict)


MetaValue = Annotated[MetaScalar | MetaList | MetaMap, Field(discriminator="kind")]

MetaList.model_rebuild()
MetaMap.model_rebuild()


def classify(raw: Any) -> MetaScalar | MetaList | MetaMap:
    """Convert raw attribute data into its tagged variant.

    ``None`` becomes an empty :class:`MetaList` so it renders no tags.
    Strings and bytes are scalars, not sequences.
    """
    if isinstance(raw, (MetaScalar, MetaList, MetaMap)):
        return raw
    if raw is None:
        return MetaList()
    if isinstance(raw, Mapping):
        if is_associative(raw):
            return MetaMap(entries={str(key): classify(value) for key, value in raw.items()})
        return MetaList(items=[classify(value) for value in raw.values()])
    if isinstance(raw, (set, frozenset)) or (
        isinstance(raw, Sequence) and not isinstance(raw, (str, bytes, bytearray))
    ):
        return MetaList(items=[classify(item) for item in raw])
    return MetaScalar(value=raw)

