"""Thesaurus console user interface.

Commands print elements: plain strings, styled text, titles, and tables.  The
terminal interface prints them as plain text, the rich interface draws them
with Rich.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Self, override

import readchar
from rich import box
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text as RichText

from thesaurus.config import InterfaceType

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

ERROR_STYLE: str = "red"
HEADWORD_STYLE: str = "bold cyan"

YES_KEYS: set[str] = {"", "y", "Y"}


class Element:
    """Printable interface element."""


@dataclass
class Styled(Element):
    """Text with Rich style, e.g. `bold cyan`."""

    text: str
    style: str


@dataclass
class Text(Element):
    """Sequence of strings and styled strings printed in one line."""

    parts: list[Styled | str] = field(default_factory=list)

    def add(self, part: Styled | str) -> Self:
        """Chainable method to add a part to the text."""
        self.parts.append(part)
        return self


@dataclass
class Title(Element):
    """Title of the program."""

    text: str


@dataclass
class Table(Element):
    """Table with a header row."""

    columns: list[str]
    rows: list[list[Styled | str]]


def format_table(columns: list[str], rows: list[list[str]]) -> str:
    """Align table cells with spaces."""

    widths: list[int] = [
        max(len(row[index]) for row in [columns] + rows)
        for index in range(len(columns))
    ]
    return "\n".join(
        " ".join(cell.ljust(width) for cell, width in zip(row, widths))
        for row in [columns] + rows
    )


class Interface(ABC):
    """User input/output interface."""

    def __init__(self, use_input: bool) -> None:
        self.use_input: bool = use_input

    @abstractmethod
    def print(self, element: Element | str) -> None:
        """Print an element."""
        raise NotImplementedError()

    def error(self, message: str) -> None:
        """Print error message."""
        self.print(Styled(message, ERROR_STYLE))

    def input(self, prompt: str) -> str:
        """Return user input line."""
        return input(prompt)

    def get_char(self) -> str:
        """Return user input character."""
        return input() if self.use_input else readchar.readkey()

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question, <Enter> means yes."""
        self.print(Text([question, " ", Styled("[Y/n]", "bold")]))
        return self.get_char() in YES_KEYS


class TerminalInterface(Interface):
    """Plain text interface without styles."""

    @override
    def print(self, element: Element | str) -> None:
        print(self.construct(element))

    def construct(self, element: Element | str) -> str:
        """Convert element to plain text."""

        match element:
            case str():
                return element
            case Styled() | Title():
                return element.text
            case Text():
                return "".join(self.construct(x) for x in element.parts)
            case Table():
                return format_table(
                    element.columns,
                    [[self.construct(x) for x in row] for row in element.rows],
                )
        raise ValueError(f"Unsupported element `{type(element)}`.")


class RichInterface(Interface):
    """Interface with colors, panels, and tables drawn with Rich."""

    def __init__(self, use_input: bool) -> None:
        super().__init__(use_input)
        self.console: Console = Console(highlight=False)

    @override
    def print(self, element: Element | str) -> None:
        self.console.print(self.construct(element))

    def construct(self, element: Element | str) -> RenderableType:
        """Convert element to Rich renderable."""

        match element:
            case str():
                return RichText(element)
            case Styled():
                return RichText(element.text, style=element.style)
            case Text():
                text: RichText = RichText()
                for part in element.parts:
                    text.append_text(self.construct(part))
                return text
            case Title():
                return Panel(element.text)
            case Table():
                table: RichTable = RichTable(box=box.ROUNDED)
                for column in element.columns:
                    table.add_column(column)
                for row in element.rows:
                    table.add_row(*[self.construct(x) for x in row])
                return table
        raise ValueError(f"Unsupported element `{type(element)}`.")


def get_interface(interface: InterfaceType, use_input: bool) -> Interface:
    """Get interface by its type."""

    match interface:
        case InterfaceType.TERMINAL:
            return TerminalInterface(use_input)
        case InterfaceType.RICH:
            return RichInterface(use_input)
    raise ValueError(f"Unsupported interface: `{interface}`.")
