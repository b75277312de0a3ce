from __future__ import annotations

import logging
import re

from enum import Enum
from typing import Callable, Mapping, Optional, Union

from .entities import sanitize
from .errors import EmptyTagNameError, WhitespaceTagNameError

logger = logging.getLogger(__name__)

AttrValue = Union[str, int, float, bool, None]
Attributes = Mapping[str, AttrValue]
AttributesOrChild = Union[Attributes, str, None]
TagFunction = Callable[..., str]

VOID_TAGS = frozenset((
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'param', 'source', 'track', 'wbr',
))

_WHITESPACE = re.compile(r'\s')


class TagPolicy(str, Enum):
    NORMAL = 'normal'
    VOID = 'void'
    NO_VOID = 'noVoid'


def is_void_tag(name: str) -> bool:
    return name in VOID_TAGS


def validate_name(name: Optional[str]) -> str:
    if not name:
        logger.debug('Rejected empty tag name')
        raise EmptyTagNameError()
    if _WHITESPACE.search(name):
        logger.debug('Rejected tag name %r', name)
        raise WhitespaceTagNameError(name)
    return name


def serialize_attributes(attributes: Optional[Attributes]) -> list[str]:
    """Render attributes as ` key="value"` fragments, in mapping order.

    `True` renders the bare key, `False` and `None` drop the attribute.
    Values are escaped for `&`, `<` and `>` only; `"` is kept as is.
    """
    fragments = []
    for key, value in (attributes or {}).items():
        if value is None or value is False:
            continue
        if value is True:
            fragments.append(f' {key}')
        else:
            fragments.append(f' {key}="{sanitize(str(value), quot=False)}"')
    return fragments


def _split_args(attributes_or_first_child: AttributesOrChild,
                children: tuple) -> tuple[Optional[Attributes], list[str]]:
    if isinstance(attributes_or_first_child, str):
        return None, [attributes_or_first_child, *children]
    return attributes_or_first_child, list(children)


def _open(name: str, attributes: Optional[Attributes]) -> str:
    return f'<{name}{"".join(serialize_attributes(attributes))}>'


def _close(name: str, children: list) -> str:
    return ''.join(str(c) for c in children) + f'</{name}>'


def tag(name: str, attributes_or_first_child: AttributesOrChild = None, *children) -> str:
    """Render a markup tag.

    >>> tag('div', {'id': 'foo', 'class': 'bar'}, 'Hello world!')
    '<div id="foo" class="bar">Hello world!</div>'
    >>> tag('meta', {'charset': 'utf-8'})
    '<meta charset="utf-8">'
    >>> tag('ul', tag('li', 'first'), tag('li', 'second'))
    '<ul><li>first</li><li>second</li></ul>'
    """
    validate_name(name)
    attributes, children = _split_args(attributes_or_first_child, children)

    if is_void_tag(name):
        return _open(name, attributes)
    return _open(name, attributes) + _close(name, children)


def tag_void(name: str, attributes: AttributesOrChild = None, *children) -> str:
    """Render only the opening tag, whether or not `name` is a void element.

    Children are ignored.
    """
    validate_name(name)
    attributes, _ = _split_args(attributes, children)
    return _open(name, attributes)


def tag_no_void(name: str, attributes_or_first_child: AttributesOrChild = None, *children) -> str:
    """Render a tag with a closing tag, even for void elements."""
    if not is_void_tag(name):
        return tag(name, attributes_or_first_child, *children)

    attributes, children = _split_args(attributes_or_first_child, children)
    return tag(name, attributes) + _close(name, children)


_POLICY_RENDERERS = {
    TagPolicy.NORMAL: tag,
    TagPolicy.VOID: tag_void,
    TagPolicy.NO_VOID: tag_no_void,
}


def generate_tag(name: str, policy: Union[TagPolicy, str] = TagPolicy.NORMAL) -> TagFunction:
    """Return a tag function bound to `name`.

    `policy` picks the renderer: ``"normal"`` for `tag`, ``"void"`` for
    `tag_void` and ``"noVoid"`` for `tag_no_void`.

    >>> li = generate_tag('li')
    >>> li({'class': 'item'}, 'first')
    '<li class="item">first</li>'
    """
    policy = TagPolicy(policy)
    render = _POLICY_RENDERERS[policy]

    def _tag(attributes_or_first_child: AttributesOrChild = None, *children) -> str:
        return render(name, attributes_or_first_child, *children)

    _tag.__name__ = _tag.__qualname__ = name
    _tag.__doc__ = f'Render a <{name}> tag ({policy.value} policy).'
    logger.debug('Generated tag function %r with %s policy', name, policy.value)
    return _tag
