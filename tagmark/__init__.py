"""Render HTML/XML-like tag strings."""

__version__ = '0.1.0'

from .entities import AMP, GT, LT, NBSP, QUOT, sanitize
from .errors import EmptyTagNameError, TagNameError, WhitespaceTagNameError
from .html import (
    VOID_TAGS, TagPolicy, generate_tag, is_void_tag, serialize_attributes, tag, tag_no_void,
    tag_void,
)
