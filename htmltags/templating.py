"""Jinja2 integration for rendering pages around tag collections."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .models import TagDocument
from .renderable import prepare_tags_for_rendering
from .tag_object import HtmlTagObject


def render_tags(tags: Iterable[Union[HtmlTagObject, str]], xhtml: bool = False) -> Markup:
    """Template filter: ``{{ head_tags | render_tags(xhtml=True) }}``."""

    return Markup(str(prepare_tags_for_rendering(tags, xhtml)))


def jinja_env(template_dirs: Sequence[Path]) -> Environment:
    """Create a Jinja environment with the ``render_tags`` filter installed."""

    env = Environment(
        loader=FileSystemLoader([str(path) for path in template_dirs]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["render_tags"] = render_tags
    return env


def render_page(template_path: Path, document: TagDocument, **context: Any) -> str:
    """Render ``template_path`` with the document's head and body tags.

    ``head_tags`` and ``body_tags`` are already bound to the document's xhtml
    flag, so ``{{ head_tags }}`` emits markup directly and slices such as
    ``{{ body_tags[:1] }}`` stay renderable.
    """

    env = jinja_env([template_path.parent])
    template = env.get_template(template_path.name)
    return template.render(
        head_tags=prepare_tags_for_rendering(document.head_tags(), document.xhtml),
        body_tags=prepare_tags_for_rendering(document.body_tags(), document.xhtml),
        xhtml=document.xhtml,
        **context,
    )


__all__ = ["jinja_env", "render_page", "render_tags"]
