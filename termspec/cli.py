#!/usr/bin/env python3
import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termspec",
        description="termspec: grammar-driven tab completion for shell command lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  termspec                          # Start the interactive playground
  termspec --query "git comm"       # Show suggestions for a line
  termspec --query "git commit -m " --json
  termspec --list-specs             # List known commands
        """,
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version information",
    )

    parser.add_argument(
        "--query", "-q",
        metavar="LINE",
        help="Resolve suggestions for LINE and exit",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print --query results as JSON",
    )

    parser.add_argument(
        "--list-specs",
        action="store_true",
        help="List the commands that have a grammar and exit",
    )

    parser.add_argument(
        "--config-reload",
        action="store_true",
        help="Reload configuration and exit",
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.version:
        from termspec import __version__

        print(f"termspec version {__version__}")
        return 0

    from rich.console import Console

    from termspec.config import Config
    from termspec.log import init_logger

    init_logger()

    if args.config_reload:
        if Config.reload():
            print("Configuration reloaded successfully")
        else:
            print("Failed to reload configuration")
        return 0

    from termspec.core import SuggestionEngine
    from termspec.ui import UIManager

    if args.list_specs or args.query is not None:
        engine = SuggestionEngine()
        ui = UIManager(Console())

        if args.list_specs:
            ui.display_specs(engine.registry.specs())
            return 0

        suggestions, argument_description, char_count = engine.resolve(args.query)
        if args.json:
            ui.display_json(args.query, suggestions, argument_description, char_count)
        else:
            ui.display_suggestions(
                args.query, suggestions, argument_description, char_count
            )
        return 0

    try:
        from termspec import app

        app.main()
        return 0
    except KeyboardInterrupt:
        print("\nBye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
