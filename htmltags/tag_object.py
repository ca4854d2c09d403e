"""Object representation of a single HTML tag.

Tag objects are easier to inspect and modify than markup strings::

    element = create_html_tag_object("h1", {"class": "demo"}, "Hello World")
    html = html_tag_object_to_string(element)  # <h1 class="demo">Hello World</h1>
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .void_tags import is_void_tag

AttributeValue = Union[str, bool]


@dataclass
class HtmlTagObject:
    tag_name: str
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)
    inner_html: Optional[str] = None
    void_tag: bool = False


def create_html_tag_object(
    tag_name: str,
    attributes: Optional[Dict[str, AttributeValue]] = None,
    inner_html: Optional[str] = None,
) -> HtmlTagObject:
    """Create a tag object ready to be rendered or injected.

    ``attributes`` maps names to values, e.g. ``{"class": "example", "disabled": True}``.
    Unknown tag names are treated as regular (non-void) elements.
    """

    return HtmlTagObject(
        tag_name=tag_name,
        attributes=attributes if attributes is not None else {},
        inner_html=inner_html,
        void_tag=is_void_tag(tag_name),
    )


__all__ = ["AttributeValue", "HtmlTagObject", "create_html_tag_object"]
