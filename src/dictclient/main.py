#!/usr/bin/env python
"""Command-line front end for the DICT client.

Usage:
    dictclient define parrot
    dictclient define parrot -d wn
    dictclient match parr -s prefix
    dictclient databases
    dictclient strategies
    dictclient info wn
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (DICT_HOST, ...)
load_dotenv()

from adapter.dictd.client import connect
from domain.model.dictionary import MatchingStrategy
from domain.model.errors import DomainError
from services.dictionary_service import DictionaryService
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dictclient", description="Query a DICT server.")
    parser.add_argument("--host", help="Server host (default: $DICT_HOST or dict.org)")
    parser.add_argument("--port", type=int, help="Server port (default: $DICT_PORT or 2628)")
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Log level for JSON logs on stderr",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    define = commands.add_parser("define", help="Show definitions of a word")
    define.add_argument("word")
    define.add_argument("-d", "--database", default="*")
    define.add_argument("-s", "--strategy", default="prefix",
                        help="Strategy for suggestions when nothing is found")

    match = commands.add_parser("match", help="List headwords matching a word")
    match.add_argument("word")
    match.add_argument("-d", "--database", default="*")
    match.add_argument("-s", "--strategy", default="prefix")

    commands.add_parser("databases", help="List databases")
    commands.add_parser("strategies", help="List matching strategies")

    info = commands.add_parser("info", help="Show information about a database")
    info.add_argument("database")

    return parser


def run(args: argparse.Namespace, service: DictionaryService) -> None:
    """Execute one parsed command and print its result to stdout."""
    if args.command == "define":
        database = service.resolve_database(args.database)
        # Only used if DEFINE finds nothing; not checked against SHOW STRAT
        result = service.lookup(args.word, database, MatchingStrategy(args.strategy))
        if result.found:
            for definition in result.definitions:
                print(f"From {definition.source_database}:")
                print(definition.text)
                print()
        elif result.suggestions:
            print(f"No definitions for {result.word!r}. Did you mean:")
            for suggestion in result.suggestions:
                print(f"  {suggestion}")
        else:
            print(f"No definitions for {result.word!r}.")

    elif args.command == "match":
        database = service.resolve_database(args.database)
        strategy = service.resolve_strategy(args.strategy)
        for word in service.match(args.word, database, strategy):
            print(word)

    elif args.command == "databases":
        for database in service.dictionary.list_databases().values():
            print(f"{database.name:<20} {database.description}")

    elif args.command == "strategies":
        for strategy in service.dictionary.list_strategies():
            print(f"{strategy.name:<20} {strategy.description}")

    elif args.command == "info":
        print(service.describe_database(args.database), end="")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the dictclient command."""
    args = build_parser().parse_args(argv)
    setup_structured_logging(args.log_level)

    try:
        client = connect(args.host, args.port)
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        run(args, DictionaryService(client))
    except DomainError as e:
        logger.debug("Command failed", extra={"command": args.command, "error": str(e)})
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
