"""Serialize tag objects into HTML markup."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .tag_object import AttributeValue, HtmlTagObject

TagPreprocessor = Callable[[HtmlTagObject], HtmlTagObject]


def _render_attrs(attrs: Optional[Dict[str, AttributeValue]], xhtml: bool) -> List[str]:
    parts: List[str] = []
    for name, value in (attrs or {}).items():
        if value is False:
            continue
        if value is True:
            parts.append(f'{name}="{name}"' if xhtml else name)
            continue
        # Values are emitted verbatim; escaping is up to the caller.
        parts.append(f'{name}="{value}"')
    return parts


def html_tag_object_to_string(
    tag: HtmlTagObject,
    xhtml: bool = False,
    preprocessor: Optional[TagPreprocessor] = None,
) -> str:
    """Turn a tag object into an HTML string.

    ``xhtml`` adds closing slashes to void tags and spells out boolean
    attributes as ``name="name"``. When ``preprocessor`` is given it runs
    first and its return value is rendered instead of ``tag``.
    """

    if preprocessor is not None:
        tag = preprocessor(tag)

    tag_name = tag.tag_name or ""
    attrs = "".join(f" {attr}" for attr in _render_attrs(tag.attributes, xhtml))
    if tag.void_tag:
        return f"<{tag_name}{attrs}{'/' if xhtml else ''}>"
    return f"<{tag_name}{attrs}>{tag.inner_html or ''}</{tag_name}>"


render = html_tag_object_to_string


__all__ = ["TagPreprocessor", "html_tag_object_to_string", "render"]
