"""Command processor for the synonym dictionary."""

import argparse
import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from thesaurus.config import ThesaurusConfig
from thesaurus.core import Record, SynonymDictionary
from thesaurus.ui import HEADWORD_STYLE, Interface, Styled, Table, Text, Title
from thesaurus.util import ThesaurusError

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

HELP: list[list[str]] = [
    ["show <word>", "print synonyms of the word"],
    ["list", "print all words and synonyms"],
    ["add <word>|<synonym>,...", "add a word with its synonyms"],
    ["remove <word>", "remove all records of the word"],
    ["add-synonym <word> <synonym>", "add a synonym of the word"],
    ["remove-synonym <word> <synonym>", "remove a synonym of the word"],
    ["sort", "sort words and synonyms ignoring case"],
    ["save [<path>]", "write the dictionary to the file"],
    ["load [<path>]", "read the dictionary from the file"],
    ["help", "print this message"],
    ["exit / quit", "close Thesaurus"],
]

# Commands that change the dictionary.
CHANGING_COMMANDS: set[str] = {
    "add",
    "remove",
    "add-synonym",
    "remove-synonym",
    "sort",
}


@dataclass
class CommandError(ThesaurusError):
    """User command cannot be parsed."""

    message: str

    def __str__(self) -> str:
        return self.message


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise CommandError(message)


class Thesaurus:
    """Synonym dictionary bound to its file and user interface."""

    file_path: Path
    """Path to the synonym file."""

    interface: Interface
    """Interface to interact with the user."""

    config: ThesaurusConfig
    """Configuration of the dictionary."""

    dictionary: SynonymDictionary
    """Current dictionary."""

    is_modified: bool
    """Whether the dictionary has changes not written to the file."""

    def __init__(
        self, file_path: Path, interface: Interface, config: ThesaurusConfig
    ) -> None:
        self.file_path: Path = file_path
        self.interface: Interface = interface
        self.config: ThesaurusConfig = config
        self.is_modified: bool = False

        if file_path.exists():
            self.dictionary = SynonymDictionary.from_file(file_path)
        else:
            logging.info(
                "File `%s` does not exist, starting with empty dictionary.",
                file_path,
            )
            self.dictionary = SynonymDictionary()

    def run(self) -> None:
        """Run the main loop."""

        self.interface.print(Title("Thesaurus"))
        self.interface.print(
            f"{len(self.dictionary)} words in `{self.file_path}`.\n"
            'Print "help" to see commands or "exit" to quit.'
        )

        while True:
            command: str = self.interface.input("Thesaurus > ").strip()

            if command in ("q", "quit", "exit"):
                break
            if not command:
                continue

            try:
                self.process_command(command)
            except ThesaurusError as error:
                self.interface.error(str(error))

        if self.is_modified and self.interface.confirm(
            f"Save changes to `{self.file_path}`?"
        ):
            self.save(self.file_path)

    def execute(self, command: str) -> None:
        """Process a single command and save changes if needed."""

        self.process_command(command)
        if self.is_modified and self.config.autosave:
            self.save(self.file_path)

    def process_command(self, command: str) -> None:
        """Process the user command.

        :raises ThesaurusError: if the command cannot be parsed or fails, the
            dictionary is not changed then
        """
        try:
            arguments: argparse.Namespace = self.create_parser().parse_args(
                shlex.split(command)
            )
        except ValueError as error:
            raise CommandError(str(error)) from error
        except argparse.ArgumentError as error:
            raise CommandError(str(error)) from error

        logging.debug("Processing command `%s`.", arguments.command)

        match arguments.command:
            case "show":
                self.show(self.dictionary.get_record(arguments.word))
            case "list":
                self.print_records()
            case "add":
                record: Record = Record.decode(" ".join(arguments.line))
                self.dictionary.add_record(record)
                self.interface.print(f"Added `{record.headword}`.")
            case "remove":
                removed: int = self.dictionary.remove_record(arguments.word)
                self.interface.print(
                    f"Removed {removed} record"
                    + ("s" if removed > 1 else "")
                    + f" of `{arguments.word}`."
                )
            case "add-synonym":
                self.dictionary.add_synonym(arguments.word, arguments.synonym)
                self.interface.print(
                    f"Added synonym `{arguments.synonym}` to "
                    f"`{arguments.word}`."
                )
            case "remove-synonym":
                self.dictionary.remove_synonym(
                    arguments.word, arguments.synonym
                )
                self.interface.print(
                    f"Removed synonym `{arguments.synonym}` from "
                    f"`{arguments.word}`."
                )
            case "sort":
                self.dictionary.sort()
                self.interface.print("Dictionary is sorted.")
            case "save":
                self.save(
                    Path(arguments.path) if arguments.path else self.file_path
                )
            case "load":
                path: Path = (
                    Path(arguments.path) if arguments.path else self.file_path
                )
                self.dictionary = SynonymDictionary.from_file(path)
                # Dictionary differs from the main file unless loaded from it.
                self.is_modified = path != self.file_path
                self.interface.print(
                    f"Loaded {len(self.dictionary)} words from `{path}`."
                )
            case "help":
                self.interface.print(Table(["Command", "Description"], HELP))

        if arguments.command in CHANGING_COMMANDS:
            self.is_modified = True

    @staticmethod
    def create_parser() -> ArgumentParser:
        """Create parser for user commands."""

        parser: ArgumentParser = ArgumentParser(
            prog="", exit_on_error=False, add_help=False
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        show_parser = subparsers.add_parser("show", add_help=False)
        show_parser.add_argument("word")

        subparsers.add_parser("list", add_help=False)

        add_parser = subparsers.add_parser("add", add_help=False)
        add_parser.add_argument("line", nargs="+")

        remove_parser = subparsers.add_parser("remove", add_help=False)
        remove_parser.add_argument("word")

        for name in "add-synonym", "remove-synonym":
            synonym_parser = subparsers.add_parser(name, add_help=False)
            synonym_parser.add_argument("word")
            synonym_parser.add_argument("synonym")

        subparsers.add_parser("sort", add_help=False)

        for name in "save", "load":
            file_parser = subparsers.add_parser(name, add_help=False)
            file_parser.add_argument("path", nargs="?")

        subparsers.add_parser("help", add_help=False)

        return parser

    def show(self, record: Record) -> None:
        """Print the record."""
        self.interface.print(
            Text()
            .add(Styled(record.headword, HEADWORD_STYLE))
            .add(": ")
            .add(", ".join(record.synonyms))
        )

    def print_records(self) -> None:
        """Print all records."""

        if not len(self.dictionary):
            self.interface.print("Dictionary is empty.")
            return

        self.interface.print(
            Table(
                ["Word", "Synonyms"],
                [
                    [
                        Styled(record.headword, HEADWORD_STYLE),
                        ", ".join(record.synonyms),
                    ]
                    for record in self.dictionary
                ],
            )
        )

    def save(self, path: Path) -> None:
        """Write the dictionary to the file."""

        if self.config.sort_on_save:
            self.dictionary.sort()
        self.dictionary.to_file(path)
        if path == self.file_path:
            self.is_modified = False
        self.interface.print(f"Saved {len(self.dictionary)} words to `{path}`.")
