#!/usr/bin/env python3
"""
Build the docs registry from markdown files.

This script:
1. Reads every .md file in the docs directory (non-recursive)
2. Extracts a title and description for each file
3. Sorts and categorizes the resulting doc items
4. Writes the registry artifact (docs-generated.json)
5. Optionally writes the artifact's JSON Schema

Usage:
    python Ingress/build_registry.py
    python Ingress/build_registry.py --docs-dir ../docs --output website/lib/docs-generated.json
    python Ingress/build_registry.py --schema-output website/lib/docs-registry.schema.json
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / ".env")

# Add parent directory to path
sys.path.insert(0, str(BASE_DIR))
from registry.builder import RegistryBuilder
from registry.config import DOCS_DIR, REGISTRY_PATH
from registry.errors import MissingDirectoryError, RegistryBuildError
from registry.scanner import scan_markdown_files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build the docs registry from markdown files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Build from the configured docs directory
    python Ingress/build_registry.py

    # Build from a specific directory
    python Ingress/build_registry.py --docs-dir ../docs

    # Also export the artifact schema
    python Ingress/build_registry.py --schema-output output/docs-registry.schema.json
        """
    )

    parser.add_argument(
        "--docs-dir",
        type=Path,
        default=DOCS_DIR,
        help=f"Directory with markdown sources (default: {DOCS_DIR})"
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=REGISTRY_PATH,
        help=f"Registry artifact path (default: {REGISTRY_PATH})"
    )

    parser.add_argument(
        "--schema-output",
        type=Path,
        help="Also write the artifact JSON Schema to this path"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed output"
    )

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("Generating docs registry...")
    print(f"Reading from: {args.docs_dir}")
    print(f"Writing to: {args.output}")

    if not args.docs_dir.is_dir():
        print(f"\n✗ Error: Docs directory not found: {args.docs_dir}")
        return 1

    builder = RegistryBuilder(args.docs_dir, args.output)

    def report(md_file: Path, item) -> None:
        print(f"  ✓ Processed: {md_file.name} -> \"{item.title}\"")

    try:
        md_files = scan_markdown_files(args.docs_dir)
        print(f"Found {len(md_files)} markdown files")
        if not md_files:
            print("⚠ WARNING: No markdown files found in docs directory")

        result = builder.build(on_item=report)
    except MissingDirectoryError as e:
        print(f"\n✗ Error: {e}")
        return 1
    except RegistryBuildError as e:
        print(f"\n✗ Error generating docs registry: {e}")
        return 1

    if result.errors:
        print(f"✗ {len(result.errors)} files could not be read:")
        for error in result.errors:
            print(f"  - {error}")

    try:
        result.output_path = builder.write(result.registry)
        if args.schema_output:
            builder.write_schema(args.schema_output)
    except RegistryBuildError as e:
        print(f"\n✗ Error writing docs registry: {e}")
        return 1

    stats = result.stats()
    print(f"\nSuccessfully generated docs registry with {stats['items_count']} items")
    print(f"Categories: {', '.join(stats['categories'])}")
    if args.verbose:
        for name, count in stats["by_category"].items():
            print(f"    {name}: {count}")
    print(f"Registry saved: {result.output_path}")
    if args.schema_output:
        print(f"Schema saved: {args.schema_output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
