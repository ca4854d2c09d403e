"""Command-line interface for htmltags."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml
from jinja2 import TemplateError
from pydantic import ValidationError

from .io_utils import load_tag_document, warn
from .models import TagDocument
from .renderable import prepare_tags_for_rendering
from .templating import render_page
from .void_tags import VOID_TAGS


def _load_document(path: Path) -> TagDocument:
    try:
        return load_tag_document(path)
    except FileNotFoundError as exc:
        raise SystemExit(f"Tag document not found: {path}") from exc
    except (ValidationError, yaml.YAMLError, ValueError) as exc:
        raise SystemExit(f"Invalid tag document {path}: {exc}") from exc


def _emit(output: str, out: Optional[Path]) -> None:
    if out is None:
        sys.stdout.write(output)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(output, encoding="utf-8")


def _handle_render(args: argparse.Namespace) -> None:
    document = _load_document(args.document)
    if args.section == "head":
        tags = document.head_tags()
    elif args.section == "body":
        tags = document.body_tags()
    else:
        tags = document.all_tags()

    if args.tag:
        wanted = set(args.tag)
        tags = tags.filter(lambda tag: tag.tag_name in wanted)
        if not tags:
            warn(f"No tags matched: {', '.join(sorted(wanted))}")

    xhtml = document.xhtml if args.xhtml is None else args.xhtml
    _emit(str(prepare_tags_for_rendering(tags, xhtml)), args.out)


def _handle_page(args: argparse.Namespace) -> None:
    document = _load_document(args.document)
    try:
        output = render_page(args.template, document)
    except TemplateError as exc:
        raise SystemExit(f"Failed to render {args.template}: {exc}") from exc
    _emit(output, args.out)


def _handle_void_tags(args: argparse.Namespace) -> None:
    _emit("".join(f"{name}\n" for name in sorted(VOID_TAGS)), None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render HTML tag documents")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render the tags of a YAML/JSON document")
    render.add_argument("document", type=Path, help="Path to the tag document")
    render.add_argument(
        "--xhtml",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override the document's xhtml setting",
    )
    render.add_argument(
        "--tag",
        action="append",
        default=[],
        help="Only render tags with this name (repeatable)",
    )
    render.add_argument(
        "--section",
        choices=["head", "body", "all"],
        default="all",
        help="Which part of the document to render",
    )
    render.add_argument("--out", type=Path, help="Write markup here instead of stdout")
    render.set_defaults(func=_handle_render)

    page = subparsers.add_parser("page", help="Render a Jinja2 template with the document's tags")
    page.add_argument("template", type=Path, help="Path to the Jinja2 template")
    page.add_argument("document", type=Path, help="Path to the tag document")
    page.add_argument("--out", type=Path, help="Write the page here instead of stdout")
    page.set_defaults(func=_handle_page)

    void_tags = subparsers.add_parser("void-tags", help="List the tag names treated as void")
    void_tags.set_defaults(func=_handle_void_tags)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
