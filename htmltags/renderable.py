"""Tags bound to an output mode so that ``str()`` yields their markup."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, Optional

from .serializer import TagPreprocessor, html_tag_object_to_string
from .tag_array import HtmlTagArray
from .tag_object import HtmlTagObject


@dataclass
class RenderableTag(HtmlTagObject):
    xhtml: bool = False
    preprocessor: Optional[TagPreprocessor] = None

    def __str__(self) -> str:
        return html_tag_object_to_string(self, self.xhtml, self.preprocessor)

    def __html__(self) -> str:
        return str(self)


def _bind(item: Any, xhtml: bool, preprocessor: Optional[TagPreprocessor]) -> Any:
    # Pre-rendered strings pass through untouched.
    if not isinstance(item, HtmlTagObject):
        return item
    values = {f.name: getattr(item, f.name) for f in fields(HtmlTagObject)}
    values["attributes"] = dict(item.attributes or {})
    return RenderableTag(**values, xhtml=xhtml, preprocessor=preprocessor)


def prepare_tags_for_rendering(
    tags: Iterable[Any],
    xhtml: bool = False,
    preprocessor: Optional[TagPreprocessor] = None,
) -> HtmlTagArray:
    """Copy ``tags`` into an array whose text form is the rendered markup.

    The input objects are left untouched, so the same tags can be prepared
    for more than one output mode. Elements that are not tag objects, such
    as already rendered strings, are kept as they are.
    """

    return HtmlTagArray(_bind(tag, xhtml, preprocessor) for tag in tags)


__all__ = ["RenderableTag", "prepare_tags_for_rendering"]
