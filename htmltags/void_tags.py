"""HTML void element classification."""

from __future__ import annotations

# https://www.w3.org/TR/html5/syntax.html#void-elements
VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_void_tag(tag_name: str) -> bool:
    """Return True if the tag may never have content or a closing tag."""
    return tag_name in VOID_TAGS


__all__ = ["VOID_TAGS", "is_void_tag"]
