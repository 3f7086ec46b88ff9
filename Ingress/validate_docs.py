#!/usr/bin/env python3
"""
Check that every markdown file in the docs directory can be read.

Unlike the registry build, this pass never stops at the first problem: it
lists every file, then reports all unreadable or empty files together.

Usage:
    python Ingress/validate_docs.py
    python Ingress/validate_docs.py --docs-dir ../docs
"""

import argparse
import sys
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / ".env")

# Add parent directory to path
sys.path.insert(0, str(BASE_DIR))
from registry.config import DOCS_DIR, HREF_PREFIX
from registry.errors import MissingDirectoryError
from registry.scanner import scan_markdown_files


def validate_files(md_files: List[Path]) -> Tuple[int, List[str]]:
    """Read each file and collect problems.

    Args:
        md_files: Markdown files to check

    Returns:
        Tuple of (number of valid files, list of "<name>: <problem>" strings)
    """
    valid_files = 0
    issues: List[str] = []

    for md_file in md_files:
        try:
            content = md_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            issues.append(f"{md_file.name}: {exc}")
            continue

        if content:
            valid_files += 1
        else:
            issues.append(f"{md_file.name}: Empty file")

    return valid_files, issues


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate markdown files in the docs directory")
    parser.add_argument(
        "--docs-dir",
        type=Path,
        default=DOCS_DIR,
        help=f"Directory with markdown sources (default: {DOCS_DIR})"
    )
    args = parser.parse_args(argv)

    try:
        md_files = scan_markdown_files(args.docs_dir)
    except MissingDirectoryError as e:
        print(f"✗ Error: {e}")
        return 1

    print(f"Found {len(md_files)} markdown files in {args.docs_dir}")
    if md_files:
        print("Files:")
        for md_file in md_files:
            print(f"  - {md_file.name}")

    valid_files, issues = validate_files(md_files)

    print(f"\n✓ {valid_files} valid markdown files")

    if issues:
        print(f"✗ {len(issues)} files with issues:")
        for issue in issues:
            print(f"  - {issue}")

    print("\nRun Ingress/build_registry.py to regenerate the docs registry.")
    print(f"All markdown files will be available at {HREF_PREFIX}{{filename}}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
