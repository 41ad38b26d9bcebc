"""Inspect how a JSON payload decodes into sections."""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any

import httpx

from json2sections import DecodingOptions, Section, decode, format_sections
from json2sections.utils.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Decode a JSON payload and print its section outline.")
    parser.add_argument("--url", help="URL returning a JSON payload")
    parser.add_argument("--file", help="Local JSON file path")
    parser.add_argument("--max-depth", type=int, default=None, help="Override the maximum nesting level")
    parser.add_argument("--skip", action="append", default=[], help="Key to render verbatim (repeatable)")
    parser.add_argument("--debug", action="store_true", help="Trace decoding steps to stderr")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    configure_logging("DEBUG" if args.debug else "INFO")
    options = DecodingOptions(
        skip_decoding_for_elements=args.skip,
        enable_debug_logging=args.debug,
        logger=logging.getLogger("inspect_payload"),
    )
    if args.max_depth is not None:
        options.max_nesting_level = args.max_depth

    payload = load_payload(url=args.url, file_path=args.file)
    sections = decode(payload, options)
    result = format_sections(sections)

    print(result.outline)
    print()
    print(result.summary)

    print("\nFragment styles:")
    for name, count in collect_styles(sections).most_common():
        print(f"{name}: {count}")


def load_payload(*, url: str | None, file_path: str | None) -> Any:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.json()

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"JSON file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def collect_styles(sections: list[Section]) -> Counter:
    styles = Counter()
    for section in sections:
        for fragment in section.content:
            styles[fragment.style.value] += 1
    return styles


if __name__ == "__main__":
    main()
