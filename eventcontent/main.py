#!/usr/bin/env python3
import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config.settings import get_settings
from .errors import ContentError
from .services.dataset_service import DatasetService
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: eventcontent [translate|build|dump] [--input file] [--output file]"
COMMANDS = ("translate", "build", "dump")


class UsageError(Exception):
    """Command line could not be parsed."""


class CommandParser(argparse.ArgumentParser):
    """Reports parse failures as UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def _read_payload(input_path: Optional[str]) -> str:
    if input_path:
        with open(input_path, "r", encoding="utf-8-sig") as f:
            return f.read()
    return sys.stdin.read()


def run_command(service: DatasetService, command: str, args: argparse.Namespace) -> None:
    """Run one command and print its confirmation (or the dataset for a bare dump)."""
    if command == "translate":
        result = service.apply_translation(_read_payload(args.input))
        print(result["message"])
    elif command == "build":
        result = service.build_final_dataset(args.output)
        print(result["message"])
    elif command == "dump":
        result = service.export_for_translation(args.output)
        if args.output:
            print(f"Source dataset written to {args.output}")
        else:
            print(json.dumps(result["dataset"], indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = CommandParser(
        prog="eventcontent",
        description="Bilingual event content pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dump the source dataset for translation
  %(prog)s dump --output /tmp/source.json

  # Apply a translated payload
  %(prog)s translate --input translated.json

  # Merge both languages into the final dataset
  %(prog)s build
        """
    )
    parser.add_argument('command', nargs='?', help='One of: translate, build, dump')
    parser.add_argument('--input', help='Translation payload file (translate; defaults to stdin)')
    parser.add_argument('--output', help='Output file (dump, build)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        print(f"{USAGE}\n{e}", file=sys.stderr)
        return 1
    if args.command not in COMMANDS:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        # Load environment variables from .env file
        load_dotenv()
        settings = get_settings()
        setup_logging("DEBUG" if args.verbose else settings.log_level)
        run_command(DatasetService(settings), args.command, args)
    except ContentError as e:
        logger.debug("Command failed: %s", e.to_dict())
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
