"""pymetatags - Render HTML meta, link and title tags from nested attributes."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymetatags")
except PackageNotFoundError:
    __version__ = "0+local"
from pymetatags.config import RendererConfig
from pymetatags.exceptions import (
    MetaTagConfigError,
    MetaTagConversionError,
    MetaTagError,
)
from pymetatags.models import (
    MetaList,
    MetaMap,
    MetaScalar,
    classify,
)
from pymetatags.normalize import deep_merge, filter_attributes, prepare_keywords, strip_tags
from pymetatags.renderer import TagRenderer
from pymetatags.tags import meta_tag, title_tag

__all__ = [
    "__version__",
    "MetaList",
    "MetaMap",
    "MetaScalar",
    "MetaTagConfigError",
    "MetaTagConversionError",
    "MetaTagError",
    "RendererConfig",
    "TagRenderer",
    "classify",
    "deep_merge",
    "filter_attributes",
    "meta_tag",
    "prepare_keywords",
    "strip_tags",
    "title_tag",
]
