"""Thesaurus entry point."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

import coloredlogs

from thesaurus.config import (
    THESAURUS_DEFAULT_DIRECTORY,
    InterfaceType,
    ThesaurusConfig,
)
from thesaurus.run import Thesaurus
from thesaurus.ui import Interface, get_interface
from thesaurus.util import ThesaurusError

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

LOGGING_FORMAT: str = "%(levelname)s %(message)s"


def main() -> None:
    """Thesaurus entry point."""

    parser: ArgumentParser = ArgumentParser("Thesaurus")
    parser.add_argument("--data", help="path to data directory")
    parser.add_argument(
        "--config",
        help="path to configuration file, `config.json` in data directory by "
        "default",
    )
    parser.add_argument(
        "--file",
        help="path to synonym file, overrides the one from configuration",
    )
    parser.add_argument(
        "--interface",
        help="interface type",
        choices=[x.value for x in InterfaceType],
    )
    parser.add_argument(
        "--use-input",
        help="use `input()` function instead of `getchar()`",
        action="store_true",
    )
    parser.add_argument(
        "--verbose", "-v", help="print debug messages", action="store_true"
    )

    subparser = parser.add_subparsers(dest="command", required=False)

    # Command `execute`.
    execute_parser: ArgumentParser = subparser.add_parser(
        "execute", help="run single Thesaurus command"
    )
    execute_parser.add_argument("single_command")

    arguments: Namespace = parser.parse_args(sys.argv[1:])

    coloredlogs.install(
        level=logging.DEBUG if arguments.verbose else logging.INFO,
        fmt=LOGGING_FORMAT,
    )

    data_path: Path = (
        Path.home() / THESAURUS_DEFAULT_DIRECTORY
        if arguments.data is None
        else Path(arguments.data)
    )
    data_path.mkdir(parents=True, exist_ok=True)

    try:
        config: ThesaurusConfig = (
            ThesaurusConfig.from_file(Path(arguments.config))
            if arguments.config is not None
            else ThesaurusConfig.from_directory(data_path)
        )
        if arguments.interface is not None:
            config.interface = InterfaceType(arguments.interface)

        interface: Interface = get_interface(
            config.interface, arguments.use_input
        )
        file_path: Path = (
            Path(arguments.file)
            if arguments.file is not None
            else config.get_file_path(data_path)
        )
        thesaurus: Thesaurus = Thesaurus(file_path, interface, config)

        match arguments.command:
            case "execute":
                thesaurus.execute(arguments.single_command)
            case _:
                thesaurus.run()

    except ThesaurusError as error:
        logging.error(error)
        sys.exit(1)


if __name__ == "__main__":
    main()
