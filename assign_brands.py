#!/usr/bin/env python3
"""
Assign known brands to pharmacy products by title.

Builds brand equivalence classes from the brand relations file, then
scans every unassigned product title for a known brand and writes one
JSON result file per source and country.

Usage:
    # Assign brands for one source and country
    python3 assign_brands.py --source benu --country bg

    # Several countries, mapping built once
    python3 assign_brands.py --source benu --country bg --country ro

    # Custom input files
    python3 assign_brands.py --source benu --country bg \\
        --relations data/brand_connections.csv --products data/benu_bg.json

    # Inspect the equivalence classes
    python3 assign_brands.py --list-clusters
"""

import argparse
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(__file__))

from src.brands import (
    MalformedRelationError,
    ResultsWriteError,
    assign_brands,
    load_brand_mapping,
    load_word_lists,
)
from src.brands.pipeline import resolve_products_path
from src.common.config_loader import get_known_countries, get_known_sources, load_matching_settings
from src.common.log_config import setup_logging

logger = logging.getLogger("src.assign_brands")


def print_clusters(mapping: dict, show_all: bool = False) -> None:
    """Print equivalence classes, largest first."""
    classes = sorted(mapping.items(), key=lambda item: len(item[1]), reverse=True)
    limit = len(classes) if show_all else 50

    print("=" * 70)
    print("Brand Equivalence Classes")
    print("=" * 70)
    print(f"Total classes: {len(classes)}")
    print(f"Total brands:  {sum(len(members) for _, members in classes)}")
    print("-" * 70)
    for key, members in classes[:limit]:
        print(f"{key[:30]:<30} {len(members):>4}  {', '.join(members)[:120]}")
    if not show_all and len(classes) > limit:
        print(f"\n... and {len(classes) - limit} more classes (use --all)")
    print("=" * 70)


def print_summary(summaries: list) -> None:
    """Print per-run counts."""
    print("\n" + "=" * 70)
    print("Brand Assignment Summary")
    print("=" * 70)
    print(f"{'Source':<14} {'Country':<8} {'Products':>9} {'Skipped':>8} {'Matched':>8} {'Unmatched':>10}")
    print("-" * 70)
    for s in summaries:
        print(f"{s.source:<14} {s.country:<8} {s.total:>9} {s.skipped:>8} {s.matched:>8} {s.unmatched:>10}")
    print("-" * 70)
    for s in summaries:
        print(f"  {s.output_path}")
        top = ', '.join(f"{brand} ({count})" for brand, count in s.brands.most_common(5))
        if top:
            print(f"    Top brands: {top}")
    print("=" * 70)


def main():
    settings = load_matching_settings()
    known_sources = get_known_sources(settings) or None
    known_countries = get_known_countries(settings) or None

    parser = argparse.ArgumentParser(
        description="Assign known brands to pharmacy products by title",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--source', '-s', choices=known_sources,
                        help='Product source identifier')
    parser.add_argument('--country', '-c', action='append', choices=known_countries,
                        help='Country code (repeatable)')
    parser.add_argument('--relations', '-r', type=str, default=settings['relations_file'],
                        help=f"Brand relations file (default: {settings['relations_file']})")
    parser.add_argument('--products', '-p', type=str, default=None,
                        help=f"Products file (default: {settings['products_file']})")
    parser.add_argument('--output-dir', '-o', type=str, default=settings.get('output_dir', 'output'),
                        help='Directory for result files')
    parser.add_argument('--strict', action='store_true',
                        help='Fail on malformed relation records instead of skipping them')
    parser.add_argument('--list-clusters', '-l', action='store_true',
                        help='Print brand equivalence classes and exit')
    parser.add_argument('--all', '-a', action='store_true',
                        help='Show all classes (with --list-clusters)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log records to this file')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose (debug) logging')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress info messages, show only warnings and errors')

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    try:
        mapping = load_brand_mapping(args.relations, strict=args.strict)
    except (OSError, ValueError) as e:
        if isinstance(e, MalformedRelationError):
            logger.error("Strict build failed: %s", e)
        else:
            logger.error("Cannot load brand relations: %s", e)
        sys.exit(1)

    if args.list_clusters:
        print_clusters(mapping, show_all=args.all)
        return

    if not args.source or not args.country:
        parser.error("--source and --country are required unless --list-clusters is given")

    try:
        word_lists = load_word_lists()
    except ValueError as e:
        logger.error("Invalid word lists: %s", e)
        sys.exit(1)

    summaries = []
    for country in args.country:
        try:
            summaries.append(assign_brands(
                source=args.source,
                country=country,
                relations_path=args.relations,
                products_path=args.products or resolve_products_path(
                    settings['products_file'], args.source, country),
                output_dir=args.output_dir,
                mapping=mapping,
                word_lists=word_lists,
            ))
        except ResultsWriteError as e:
            logger.error("%s/%s: cannot write results: %s", args.source, country, e)
            sys.exit(1)
        except (OSError, ValueError) as e:
            logger.error("%s/%s: cannot load products: %s", args.source, country, e)
            sys.exit(1)

    print_summary(summaries)


if __name__ == "__main__":
    main()
