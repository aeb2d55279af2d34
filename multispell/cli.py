"""Command-line interface."""

import argparse

from multispell.engines import list_engines


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="multispell",
        description="Manage spellchecking dictionaries and check words against all enabled ones",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show available and enabled dictionaries
  %(prog)s list

  # Install a Hunspell dictionary (both halves of the pair)
  %(prog)s install ~/Downloads/de_DE.aff ~/Downloads/de_DE.dic

  # Enable dictionaries (the most recently enabled one is primary)
  %(prog)s enable en-US
  %(prog)s enable pt_BR

  # Check a word
  %(prog)s check colr

Example config.json:
{
  "install_directory": "~/.config/multispell/enchant/hunspell",
  "preferences_file": "~/.config/multispell/preferences.json",
  "engine": "enchant",
  "enabled_dictionaries": ["en_US"],
  "jobs": 2,
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument(
        "--install-directory", type=str, help="Directory holding installed dictionaries"
    )
    parser.add_argument(
        "--preferences-file", type=str, help="File storing the enabled dictionaries"
    )
    parser.add_argument(
        "--engine", type=str, choices=list_engines(), help="Spell engine backend"
    )
    parser.add_argument(
        "--enabled-dictionaries",
        type=str,
        help="Comma-separated dictionaries to enable when none are stored",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help="Number of parallel workers for installation (default: 1)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List available and enabled dictionaries")

    install = subparsers.add_parser("install", help="Install dictionary files")
    install.add_argument("files", nargs="+", help="Dictionary files (.aff and .dic)")

    enable = subparsers.add_parser("enable", help="Enable a dictionary")
    enable.add_argument("dictionary", help="Dictionary identifier, e.g. en_US")

    disable = subparsers.add_parser("disable", help="Disable a dictionary")
    disable.add_argument("dictionary", help="Dictionary identifier, e.g. en_US")

    check = subparsers.add_parser("check", help="Check a word and print corrections")
    check.add_argument("word", help="Word to check")

    return parser
