"""Attribute value models."""

from pymetatags.models.values import (
    MetaList,
    MetaMap,
    MetaScalar,
    MetaValue,
    classify,
    is_associative,
    is_numeric_key,
)

__all__ = [
    "MetaList",
    "MetaMap",
    "MetaScalar",
    "MetaValue",
    "classify",
    "is_associative",
    "is_numeric_key",
]
