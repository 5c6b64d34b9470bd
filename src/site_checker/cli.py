"""Command-line interface for SiteChecker."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from site_checker.company import extract_company_name
from site_checker.config import STRATEGIES, Settings
from site_checker.crawler import diagnose


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="site-checker",
        description="Crawl a business website and score its content, trust, "
                    "machine readability and technical quality.",
    )
    parser.add_argument("url", help="Site to check (https:// is assumed if missing)")
    parser.add_argument(
        "-s", "--strategy",
        choices=STRATEGIES,
        default=None,
        help="Subpage selection: 'broad' ranks all links by keyword weight (9 pages), "
             "'targeted' picks one page per category (4 pages). Default: from .env CRAWL_STRATEGY",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-page fetch timeout in seconds (default: 15)",
    )
    parser.add_argument(
        "--self-host",
        action="append",
        default=None,
        help="Host served from --asset-dir instead of the network (repeatable)",
    )
    parser.add_argument(
        "--asset-dir",
        default=None,
        help="Local directory holding the static files of the self hosts",
    )
    parser.add_argument(
        "--no-score",
        action="store_true",
        help="Only crawl; skip scoring",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = Settings.from_env()

    # Apply CLI overrides
    overrides: dict = {"show_progress": True}
    if args.timeout is not None:
        overrides["fetch_timeout"] = args.timeout
    if args.self_host:
        overrides["self_hosts"] = tuple(h.lower() for h in args.self_host)
    if args.asset_dir:
        overrides["asset_dir"] = args.asset_dir
    settings = replace(settings, **overrides)

    result, score = diagnose(args.url, strategy=args.strategy, settings=settings)

    document: dict = {"crawl": result.model_dump(by_alias=True)}
    if result.success:
        document["companyName"] = extract_company_name(result)
        if score is not None and not args.no_score:
            document["score"] = score.model_dump(by_alias=True)

    output = json.dumps(document, indent=2, ensure_ascii=False)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Output written to {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
