#!/usr/bin/env python3
"""
Command-line interface for recipe-extractor.
Extracts a recipe from a URL or a saved HTML file, or parses ingredient lines,
and prints the result as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .fetcher import RecipeFetcher
from .pipeline import extract_recipe
from .services.ingredient_parser import parse_ingredients


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    # Set default log level for all loggers
    logging.getLogger().setLevel(log_level)

    # Reduce verbosity of external libraries
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def extract_from_url(url: str) -> int:
    async with RecipeFetcher() as fetcher:
        result = await fetcher.scrape_recipe(url)

    if not result.success:
        logging.error(f"Could not extract a recipe from {url}: {result.failureReason}")
        return 1

    _print_json(result.recipe.model_dump())
    return 0


def extract_from_file(path: Path) -> int:
    try:
        html = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logging.error(f"Failed to read {path}: {e}")
        return 1

    recipe = extract_recipe(html)
    if recipe is None:
        logging.error(f"No recipe data found in {path}")
        return 1

    _print_json(recipe.model_dump())
    return 0


def parse_lines(lines: List[str]) -> int:
    _print_json([ingredient.model_dump() for ingredient in parse_ingredients(lines)])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-extract",
        description="Extract structured recipe data from web pages."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="Fetch a page and extract its recipe")
    url_parser.add_argument("url", help="URL of the recipe page")

    file_parser = subparsers.add_parser("file", help="Extract the recipe from a saved HTML file")
    file_parser.add_argument("path", type=Path, help="Path to the HTML file")

    ingredient_parser = subparsers.add_parser("ingredient", help="Parse raw ingredient lines")
    ingredient_parser.add_argument("lines", nargs="+", help="Ingredient lines, one per argument")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "url":
        return asyncio.run(extract_from_url(args.url))
    if args.command == "file":
        return extract_from_file(args.path)
    return parse_lines(args.lines)


if __name__ == "__main__":
    sys.exit(main())
