"""Command-line interface for htmlbuild."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from .io_utils import warn
from .models import PageSpec, load_page_spec
from .util_fs import SaveError


def _load_page(path: Path) -> PageSpec:
    try:
        return load_page_spec(path)
    except OSError as exc:
        raise SystemExit(f"Cannot read page spec {path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid page spec in {path}: {exc}") from exc


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a YAML page description to HTML.")
    parser.add_argument("--page", required=True, type=Path, help="Path to the page YAML file")
    output = parser.add_mutually_exclusive_group(required=True)
    output.add_argument("--out", type=Path, help="Destination HTML file")
    output.add_argument(
        "--stdout",
        action="store_true",
        help="Print the rendered document instead of writing a file.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    page = _load_page(args.page)
    if not page.body:
        warn(f"[render] {args.page} has no body elements")

    document = page.to_document()
    if args.stdout:
        sys.stdout.write(document.render() + "\n")
        return

    try:
        written = document.save(args.out)
    except SaveError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"Wrote {written} ({written.stat().st_size} bytes)")


if __name__ == "__main__":
    main()
