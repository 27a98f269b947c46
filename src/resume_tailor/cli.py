from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from resume_tailor.config import get_settings
from resume_tailor.services.document_generator import (
    DocumentGenerationError,
    DocumentKind,
    InvalidRenderRequestError,
    OutputFormat,
    RenderRequest,
    generate_document,
)
from resume_tailor.templates import describe_templates


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-tailor",
        description="Render resumes and cover letters to PDF or DOCX.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a JSON payload to a document")
    render.add_argument("input", type=Path, help="JSON file with a 'parsed' profile")
    render.add_argument(
        "--format",
        dest="fmt",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.PDF.value,
    )
    render.add_argument(
        "--kind",
        choices=[k.value for k in DocumentKind],
        default=DocumentKind.RESUME.value,
    )
    render.add_argument("--template", help="Template key (overrides the payload)")
    render.add_argument("--one-page", action="store_true", help="Apply the one-page policy")
    render.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output path (defaults to the conventional filename)",
    )

    sub.add_parser("templates", help="List available templates")
    sub.add_parser("serve", help="Run the HTTP API")
    return parser


def _load_payload(path: Path) -> dict:
    """Read a render payload; a bare profile object is treated as ``parsed``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "parsed" not in data:
        return {"parsed": data}
    if not isinstance(data, dict):
        return {}
    return data


def _render(args: argparse.Namespace) -> int:
    try:
        payload = _load_payload(args.input)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"❌ Could not read {args.input}: {exc}", file=sys.stderr)
        return 1

    if args.template:
        payload["templateKey"] = args.template
    if args.one_page:
        payload["limitToOnePage"] = True

    try:
        request = RenderRequest.from_payload(payload, args.kind)
        document = generate_document(request, args.fmt, pagesize=get_settings().page_size)
    except (InvalidRenderRequestError, DocumentGenerationError) as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    output = args.output or Path(document.filename)
    output.write_bytes(document.content)
    print(f"✅ Wrote {output} ({len(document.content)} bytes)")
    return 0


def _list_templates() -> int:
    for entry in describe_templates():
        print(f"{entry['key']:<16}{entry['label']:<20}{entry['layout']}")
    return 0


def _serve() -> int:
    from resume_tailor.api.main import main as serve

    serve()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "render":
        return _render(args)
    if args.command == "templates":
        return _list_templates()
    return _serve()


if __name__ == "__main__":
    sys.exit(main())
