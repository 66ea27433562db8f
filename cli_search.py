"""Terminal client that reuses the in-process search logic."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from time import perf_counter
from typing import Iterable

from catalog_search.catalog_loader import load_catalog
from catalog_search.config import settings
from catalog_search.search_service import SearchService, display_name, select

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


def perform_query(service: SearchService, query: str) -> dict:
    started = perf_counter()
    ranked = service.rank(query)
    return {
        "results": ranked,
        "took_ms": (perf_counter() - started) * 1000,
    }


def interactive_shell(service: SearchService) -> None:
    print("Interactive product search. Type 'exit' to quit.")
    while True:
        try:
            query = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if query.strip().lower() in {"exit", "quit"}:
            return
        pretty_print_response(service, query, perform_query(service, query))


def pretty_print_response(service: SearchService, query: str, payload: dict) -> None:
    results = payload.get("results", [])
    eta = float(payload.get("took_ms", 0))
    color = GREEN if eta < 50 else RED
    eta_label = f"{color}{eta:.1f} ms{RESET}"
    print(f"Query: {query} | results: {len(results)} | ETA: {eta_label}")
    for idx, (score, product) in enumerate(results, start=1):
        product_id = select(product)
        print(
            f"  {idx:02d}. score={score:.2f} | {display_name(product)} | "
            f"{service.display_details(product)} | {service.product_path(product_id)}"
        )


def batch_mode(service: SearchService, file_path: Path) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            query = line.rstrip("\n")
            if not query:
                continue
            pretty_print_response(service, query, perform_query(service, query))


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the catalog search")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--catalog", type=Path, default=Path(settings.catalog_path), help="JSON catalog snapshot")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(level=logging.getLevelName(settings.log_level.upper()))
    if not args.catalog.exists():
        print(f"Catalog file not found: {args.catalog}")
        return 1
    service = SearchService(load_catalog(args.catalog))

    if args.batch:
        batch_mode(service, args.batch)
        return 0
    if args.query:
        pretty_print_response(service, args.query, perform_query(service, args.query))
        return 0
    interactive_shell(service)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
