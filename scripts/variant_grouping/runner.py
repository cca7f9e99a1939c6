"""
Catalog Variant Grouping Runner

Options:
    --input FILE        Catalog CSV feed (default: $VARIANT_FEED_PATH)
    --output-dir DIR    Output directory (default: outputs/variant_grouping)
    --query TEXT        Only group items matching every word of TEXT
    --dry-run           Analyze only, no file output (default)
    --confirm           Actually generate output files
    --verbose           Show detailed output
    --detect DESC ...   Detect the common pattern of the given descriptions and exit
    --serve             Run the HTTP API
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import config
from .analyzer import FeedAnalyzer
from .detector import detect_common_pattern
from .generator import GeneratorConfig, ProductPayloadGenerator

log = logging.getLogger("variant_grouping")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Group supplier catalog items into products with variants"
    )
    parser.add_argument(
        "--input", "-i",
        default=config.FEED_PATH,
        help="Catalog CSV feed file",
    )
    parser.add_argument(
        "--output-dir", "-o",
        default=str(config.OUTPUT_DIR),
        help="Output directory for generated files",
    )
    parser.add_argument(
        "--query", "-q",
        default=None,
        help="Only group items whose SKU/description contain every word",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=True,
        help="Analyze only, no file output (default)",
    )
    parser.add_argument(
        "--confirm",
        action="store_true",
        help="Actually generate output files",
    )
    parser.add_argument(
        "--families-only",
        action="store_true",
        help="Leave standalone products out of the generated files",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed output",
    )
    parser.add_argument(
        "--detect",
        nargs="+",
        metavar="DESCRIPTION",
        help="Detect the common pattern of these descriptions, print JSON and exit",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API instead of processing a feed",
    )
    parser.add_argument("--host", default=config.API_HOST)
    parser.add_argument("--port", type=int, default=config.API_PORT)
    return parser


def run_detect(descriptions) -> int:
    result = detect_common_pattern(descriptions)
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


def run_serve(host: str, port: int) -> int:
    from .api import create_app

    log.info(f"Serving variant API on http://{host}:{port}")
    create_app().run(host=host, port=port, debug=False, threaded=True)
    return 0


def run_feed(args) -> int:
    if not args.input:
        print("ERROR: No input file. Pass --input or set VARIANT_FEED_PATH.")
        return 1

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"ERROR: Input file not found: {input_path}")
        return 1

    print("=" * 70)
    print("Catalog Variant Grouping")
    print("=" * 70)
    print(f"Input:  {input_path}")
    print(f"Output: {args.output_dir}")
    print(f"Mode:   {'DRY-RUN (analysis only)' if args.dry_run else 'CONFIRM (will generate files)'}")
    print()

    analyzer = FeedAnalyzer()
    try:
        item_count = analyzer.load_csv(input_path)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1
    print(f"Loaded {item_count} items")
    print()

    result = analyzer.analyze(query=args.query)

    print("-" * 70)
    print("ANALYSIS RESULTS")
    print("-" * 70)
    print()
    if args.query:
        print(f"Query '{args.query}': {result.matched_items} matching items")
    print(f"Variant Families: {len(result.families)} ({result.grouped_item_count} items)")
    print(f"Single Products:  {len(result.singles)}")
    print()

    families = result.families if args.verbose else result.families[:20]
    print(f"(Showing {len(families)} of {len(result.families)} families)")
    print()
    for i, family in enumerate(families, 1):
        print(f"{i:2}. {family.title}")
        print(f"    Option: {family.option_name}, Variants: {len(family.variants)}")
        if args.verbose:
            for variant in family.variants:
                print(f"      - {variant.option_value}: {variant.sku or 'no-sku'} "
                      f"(${variant.price:.2f}, stock {variant.stock})")
        else:
            values_preview = ", ".join(family.option_values[:5])
            if len(family.option_values) > 5:
                values_preview += f", +{len(family.option_values) - 5} more"
            print(f"    Values: {values_preview}")
        print()

    if args.dry_run:
        print("=" * 70)
        print("DRY-RUN COMPLETE")
        print("=" * 70)
        print()
        print("To generate output files, run with --confirm")
        return 0

    output_dir = Path(args.output_dir)
    generator = ProductPayloadGenerator(GeneratorConfig(
        output_dir=output_dir,
        families_only=args.families_only,
    ))

    payload_path, product_count = generator.write_payloads(result.entries)
    print(f"  Created: {payload_path} ({product_count} products)")

    csv_path, row_count = generator.write_variants_csv(result.entries)
    print(f"  Created: {csv_path} ({row_count} variant rows)")

    report_path = output_dir / "analysis_report.md"
    with open(report_path, 'w', encoding='utf-8') as f:
        f.write(analyzer.generate_report(result))
    print(f"  Created: {report_path}")
    print()

    print("=" * 70)
    print("GENERATION COMPLETE")
    print("=" * 70)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config.setup_logging(args.verbose)

    # If --confirm specified, disable dry-run
    if args.confirm:
        args.dry_run = False

    if args.detect:
        return run_detect(args.detect)
    if args.serve:
        return run_serve(args.host, args.port)
    return run_feed(args)


if __name__ == "__main__":
    sys.exit(main())
