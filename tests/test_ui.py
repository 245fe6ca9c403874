"""Test for console interfaces."""

from unittest.mock import patch

from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text as RichText

from thesaurus.config import InterfaceType
from thesaurus.ui import (
    RichInterface,
    Styled,
    Table,
    TerminalInterface,
    Text,
    Title,
    get_interface,
)


def test_terminal_text() -> None:
    """Test that terminal interface drops styles."""
    interface: TerminalInterface = TerminalInterface(use_input=True)
    text: Text = Text().add(Styled("big", "bold cyan")).add(": large")
    assert interface.construct(text) == "big: large"
    assert interface.construct(Title("Thesaurus")) == "Thesaurus"


def test_terminal_table() -> None:
    """Test plain text table."""
    interface: TerminalInterface = TerminalInterface(use_input=True)
    assert interface.construct(
        Table(["Word", "Synonyms"], [["big", "large"], ["small", "tiny"]])
    ) == ("Word  Synonyms\nbig   large   \nsmall tiny    ")


def test_rich_text() -> None:
    """Test that rich interface keeps styles."""
    interface: RichInterface = RichInterface(use_input=True)
    text = interface.construct(Text().add(Styled("big", "bold")).add("!"))
    assert isinstance(text, RichText)
    assert text.plain == "big!"
    assert text.spans[0].style == "bold"
    assert isinstance(interface.construct(Title("Thesaurus")), Panel)


def test_rich_table() -> None:
    """Test rich table construction."""
    interface: RichInterface = RichInterface(use_input=True)
    rich_table = interface.construct(Table(["Word"], [["big"]]))
    assert isinstance(rich_table, RichTable)
    assert rich_table.row_count == 1


def test_confirm() -> None:
    """Test yes/no question, <Enter> means yes."""
    interface: TerminalInterface = TerminalInterface(use_input=True)
    with patch("builtins.input", side_effect=["", "y", "n"]):
        assert interface.confirm("Save?") is True
        assert interface.confirm("Save?") is True
        assert interface.confirm("Save?") is False


def test_get_interface() -> None:
    """Test interface selection."""
    assert isinstance(
        get_interface(InterfaceType.RICH, use_input=True), RichInterface
    )
    assert isinstance(
        get_interface(InterfaceType.TERMINAL, use_input=False),
        TerminalInterface,
    )
