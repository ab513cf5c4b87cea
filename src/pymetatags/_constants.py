"""Tag formatting constants."""

from __future__ import annotations

KEYWORDS_KEY = "keywords"
TITLE_KEY = "title"

OG_IMAGE = "og:image"
OG_URL = "og:url"
PROPERTY_PREFIXES: tuple[str, ...] = ("og:", "fb:")

DESCRIPTION_PREFIX = "description"
SECTION_PREFIX = "section"
IMAGE_SRC_PREFIX = "image_src"
REL_PREFIX = "rel:"

# Characters removed by the legacy ``rel:`` left-trim.
REL_STRIP_CHARS = "rel:"

DEFAULT_IMAGE_QUERY = "auto=format%2Ccompress"
DEFAULT_SEPARATOR = "\n"
DEFAULT_KEYWORD_SEPARATOR = ", "

REL_STRIP_LITERAL = "literal"
REL_STRIP_CHARSET = "charset"
REL_STRIP_MODES = frozenset({REL_STRIP_LITERAL, REL_STRIP_CHARSET})
