"""Main entry point for multispell package."""

import sys

from loguru import logger

from multispell.cli import create_parser
from multispell.core import load_config
from multispell.events import DictionaryInstallFailed
from multispell.service import SpellcheckService
from multispell.utils.logging import add_log_file_handler, setup_logger


def _print_catalog(service: SpellcheckService) -> None:
    catalog, active_set = service.state.snapshot()
    mode = "multiple" if catalog.supports_multiple else "single"
    print(f"Installation directory: {catalog.install_directory}")
    print(f"Active dictionaries ({mode}): {', '.join(active_set) or '(none)'}")
    print("Available dictionaries:")
    for dictionary in catalog.available_dictionaries:
        marker = "*" if dictionary in active_set else " "
        print(f"  {marker} {dictionary}")


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)
    if args.log_file:
        add_log_file_handler(args.log_file, verbose=config.verbose, debug=config.debug)

    service = SpellcheckService(config)

    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Engine: {service.engine.get_name()}")
        logger.info(f"  Install directory: {config.install_directory}")
        logger.info(f"  Preferences: {config.preferences_file}")
        logger.info("")

    service.load_configuration()

    if args.command == "list":
        _print_catalog(service)
        return 0

    if args.command == "install":
        results = service.install(args.files)
        failed = [r for r in results if isinstance(r, DictionaryInstallFailed)]
        for result in results:
            status = "✗" if isinstance(result, DictionaryInstallFailed) else "✓"
            print(f"{status} {result.source.name} ({result.dictionary_id})")
        return 1 if failed else 0

    if args.command in ("enable", "disable"):
        active_set = service.toggle(args.dictionary, enabled=args.command == "enable")
        print(f"Active dictionaries: {', '.join(active_set) or '(none)'}")
        return 0

    result = service.update_corrections(args.word)
    if result is None:
        print(f"{args.word.strip()!r} is spelled correctly")
        return 0
    print(f"{result.word!r} is misspelled")
    for suggestion in sorted(result.suggestions):
        print(f"  {suggestion}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
