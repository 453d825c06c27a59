"""
Property listings loaded from markdown files with front matter.

Each listing lives in ``<content_dir>/<slug>.md``. The front matter holds
the listing's metadata and the body is rendered to HTML on every load;
nothing is cached between calls.
"""
import functools
import itertools
import logging
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import frontmatter
from markdown_it import MarkdownIt

from .config import config

logger = logging.getLogger(__name__)

MARKDOWN_EXT = ".md"
EXCERPT_SUFFIX = "..."
EXCERPT_STRIP_RE = re.compile(r"[#*`]")

# Front matter key -> Property attribute
FIELD_ALIASES = {
    "title": "title",
    "location": "location",
    "featuredImage": "featured_image",
    "gallery": "gallery",
    "description": "description",
    "address": "address",
    "propertyType": "property_type",
    "status": "status",
    "yearAcquired": "year_acquired",
    "units": "units",
    "squareFootage": "square_footage",
    "date": "date",
}

# Keys always computed by the loader; front matter values are ignored.
COMPUTED_KEYS = ("slug", "contentHtml", "excerpt")

_markdown = MarkdownIt("commonmark").enable("table")


@dataclass
class Property:
    """A property listing with its rendered content."""

    slug: str
    content_html: str
    excerpt: str
    title: str = ""

    # Descriptive metadata, passed through as written in the front matter
    location: Optional[str] = None
    address: Optional[str] = None
    property_type: Optional[str] = None
    status: Optional[str] = None
    year_acquired: Optional[Any] = None
    featured_image: Optional[str] = None
    description: Optional[str] = None
    gallery: Optional[List[Any]] = None
    units: Optional[Any] = None
    square_footage: Optional[Any] = None
    date: Optional[Any] = None

    # Front matter keys without a dedicated attribute
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_metadata(cls, slug: str, metadata: Dict[str, Any],
                      content_html: str, excerpt: str) -> "Property":
        known = {}
        extra = {}
        for key, value in metadata.items():
            if key in COMPUTED_KEYS:
                continue
            attr = FIELD_ALIASES.get(key)
            if attr:
                known[attr] = value
            else:
                extra[key] = value
        if known.get("title") is None:
            known.pop("title", None)
        return cls(slug=slug, content_html=content_html, excerpt=excerpt, extra=extra, **known)


class LoadStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    PARSE_ERROR = "parse_error"
    RENDER_ERROR = "render_error"


@dataclass
class LoadResult:
    """Outcome of loading a single listing file."""
    slug: str
    status: LoadStatus
    record: Optional[Property] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.OK


_yaml_handler = frontmatter.YAMLHandler()


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a file into its YAML metadata and its raw body.

    The body starts on the line after the closing delimiter and is
    otherwise left untouched, so leading indentation and blank lines
    survive.
    """
    if not _yaml_handler.detect(text):
        return {}, text
    boundaries = list(itertools.islice(_yaml_handler.FM_BOUNDARY.finditer(text), 2))
    if len(boundaries) < 2:
        return {}, text

    metadata = _yaml_handler.load(text[boundaries[0].end():boundaries[1].start()])
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ValueError("front matter is not a mapping")
    body = text[boundaries[1].start():].partition("\n")[2]
    return metadata, body


def make_excerpt(body: str, length: int = 150) -> str:
    """First ``length`` characters of the raw body without ``#``, ``*`` or backticks."""
    return EXCERPT_STRIP_RE.sub("", body[:length]) + EXCERPT_SUFFIX


def render_markdown(body: str) -> str:
    return _markdown.render(body)


def compare_by_date(a: Property, b: Property) -> int:
    """Newest first; a pair where either side has no date compares equal."""
    if a.date and b.date:
        left, right = str(a.date), str(b.date)
        if left == right:
            return 0
        return 1 if left < right else -1
    return 0


class PropertyLoader:
    """Reads listings from a content directory."""

    def __init__(self, content_dir: str, excerpt_length: int = 150):
        self.content_dir = content_dir
        self.excerpt_length = excerpt_length

    def path_for(self, slug: str) -> Optional[str]:
        """Path of the listing file, or None if the slug escapes the directory."""
        if os.sep in slug or (os.altsep and os.altsep in slug):
            return None
        base = os.path.abspath(self.content_dir)
        full_path = os.path.abspath(os.path.join(base, f"{slug}{MARKDOWN_EXT}"))
        if os.path.dirname(full_path) != base:
            return None
        return full_path

    def load(self, slug: str) -> LoadResult:
        """Load one listing and report why it failed, if it did."""
        full_path = self.path_for(slug)
        if full_path is None:
            return LoadResult(slug, LoadStatus.NOT_FOUND, error="invalid slug")

        try:
            with open(full_path, "r", encoding="utf-8") as fh:
                file_contents = fh.read()
        except FileNotFoundError as e:
            return LoadResult(slug, LoadStatus.NOT_FOUND, error=str(e))
        except (OSError, UnicodeDecodeError) as e:
            return LoadResult(slug, LoadStatus.IO_ERROR, error=str(e))

        try:
            metadata, content = split_front_matter(file_contents)
        except Exception as e:
            return LoadResult(slug, LoadStatus.PARSE_ERROR, error=str(e))

        try:
            content_html = render_markdown(content)
        except Exception as e:
            return LoadResult(slug, LoadStatus.RENDER_ERROR, error=str(e))

        excerpt = make_excerpt(content, self.excerpt_length)
        prop = Property.from_metadata(slug, metadata, content_html, excerpt)
        return LoadResult(slug, LoadStatus.OK, record=prop)

    def get_property_by_slug(self, slug: str) -> Optional[Property]:
        result = self.load(slug)
        if result.ok:
            return result.record

        if result.status is LoadStatus.NOT_FOUND:
            logger.debug(f"Property '{slug}' not found: {result.error}")
        else:
            logger.warning(f"Property '{slug}' skipped ({result.status.value}): {result.error}")
        return None

    def get_all_properties(self) -> List[Property]:
        """All listings in the directory, newest first."""
        if not os.path.isdir(self.content_dir):
            os.makedirs(self.content_dir, exist_ok=True)
            logger.info(f"Created content directory: {self.content_dir}")
            return []

        file_names = sorted(os.listdir(self.content_dir))
        properties = []
        for file_name in file_names:
            if not file_name.endswith(MARKDOWN_EXT):
                continue
            prop = self.get_property_by_slug(file_name[:-len(MARKDOWN_EXT)])
            if prop is not None:
                properties.append(prop)

        return sorted(properties, key=functools.cmp_to_key(compare_by_date))


def default_loader() -> PropertyLoader:
    return PropertyLoader(config.CONTENT_DIR, config.EXCERPT_LENGTH)


def get_all_properties() -> List[Property]:
    """Load every listing from the configured content directory."""
    return default_loader().get_all_properties()


def get_property_by_slug(slug: str) -> Optional[Property]:
    """Load one listing from the configured content directory, or None."""
    return default_loader().get_property_by_slug(slug)
