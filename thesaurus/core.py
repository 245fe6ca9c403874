"""Synonym dictionary: headwords and their ordered synonym lists.

Dictionary: ordered collection of records.
  - Record: headword and its synonyms, stored as one line
    `headword|synonym,synonym,...`.

Headwords are matched case-insensitively, but stored with their original
casing.  There is no escaping: `|` and `,` inside a headword or a synonym are
not supported.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from thesaurus.util import ThesaurusError, read_lines, write_lines

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

HEADWORD_DELIMITER: str = "|"
SYNONYM_DELIMITER: str = ","


@dataclass
class MalformedRecord(ThesaurusError):
    """Line cannot be parsed as a record."""

    line: str
    line_number: int | None = None
    reason: str = f"no `{HEADWORD_DELIMITER}` delimiter"

    def __str__(self) -> str:
        place: str = ""
        if self.line_number is not None:
            place = f" at line {self.line_number}"
        return f"Malformed record `{self.line}`{place}: {self.reason}."


@dataclass
class WordNotFound(ThesaurusError):
    """No record for the word."""

    word: str

    def __str__(self) -> str:
        return f"Word `{self.word}` is not present."


@dataclass
class SynonymNotFound(ThesaurusError):
    """Record for the word has no such synonym."""

    word: str
    synonym: str

    def __str__(self) -> str:
        return f"Word `{self.word}` has no synonym `{self.synonym}`."


@dataclass
class EmptySynonym(ThesaurusError):
    """Synonym is empty or whitespace-only."""

    word: str

    def __str__(self) -> str:
        return f"Cannot add empty synonym to `{self.word}`."


@dataclass
class LastSynonymRemoval(ThesaurusError):
    """Removal would leave the record without synonyms."""

    word: str
    synonym: str

    def __str__(self) -> str:
        return (
            f"Cannot remove `{self.synonym}`: it is the only synonym of "
            f"`{self.word}`."
        )


def normalize(text: str) -> str:
    """Get the comparison form of a headword or a synonym."""
    return text.strip().casefold()


def sort_ignore_case(strings: Iterable[str]) -> list[str]:
    """Sort strings ignoring case and surrounding whitespace.

    The sort is stable: strings that are equal ignoring case keep their
    relative order.
    """
    return sorted(strings, key=normalize)


@dataclass
class Record:
    """Headword with its synonyms.

    E.g. for the line `big|large,huge` the headword is "big" and the synonyms
    are "large" and "huge".
    """

    headword: str
    """Word the synonyms are recorded for, with original casing."""

    synonyms: list[str] = field(default_factory=list)
    """Synonyms in insertion order, duplicates are allowed."""

    @classmethod
    def decode(cls, line: str, line_number: int | None = None) -> Self:
        """Parse a record from the line `headword|synonym,synonym,...`.

        :param line: text line, trailing line break is ignored
        :param line_number: 1-based number of the line in its file, used only
            for error reporting
        :raises MalformedRecord: if the line has no `|` delimiter
        """
        line = line.rstrip("\r\n")
        headword, delimiter, synonyms = line.partition(HEADWORD_DELIMITER)
        if not delimiter:
            raise MalformedRecord(line, line_number)

        return cls(
            headword.strip(),
            [x.strip() for x in synonyms.split(SYNONYM_DELIMITER)],
        )

    def encode(self) -> str:
        """Serialize the record into one line without padding."""
        return self.headword + HEADWORD_DELIMITER + SYNONYM_DELIMITER.join(
            self.synonyms
        )

    def matches(self, word: str) -> bool:
        """Check whether the headword is the word, ignoring case."""
        return normalize(self.headword) == normalize(word)

    def copy(self) -> Self:
        """Get a copy that does not share the synonym list."""
        return type(self)(self.headword, list(self.synonyms))

    def sorted(self) -> Self:
        """Get a copy with synonyms sorted ignoring case."""
        return type(self)(self.headword, sort_ignore_case(self.synonyms))

    def __str__(self) -> str:
        return self.encode()


def decode(line: str) -> Record:
    """Parse a line into a record."""
    return Record.decode(line)


def encode(record: Record) -> str:
    """Serialize a record into a line."""
    return record.encode()


def sort_record(record: Record) -> Record:
    """Get a copy of the record with its synonyms sorted."""
    return record.sorted()


@dataclass
class SynonymDictionary:
    """Ordered collection of synonym records.

    Order is insertion order until `sort` is called.  Several records may share
    a headword; lookup always returns the first one.
    """

    records: list[Record] = field(default_factory=list)

    @classmethod
    def load(cls, lines: Iterable[str]) -> Self:
        """Construct a dictionary from lines, keeping their order.

        Blank lines are skipped.

        :raises MalformedRecord: if some line is not a record
        """
        records: list[Record] = [
            Record.decode(line, index)
            for index, line in enumerate(lines, start=1)
            if line.strip()
        ]
        logging.debug("Loaded %d records.", len(records))
        return cls(records)

    def store(self) -> list[str]:
        """Serialize all records into lines in current order."""
        return [record.encode() for record in self.records]

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Read the dictionary from a file.

        :raises IOFailure: if the file cannot be read
        :raises MalformedRecord: if some line is not a record
        """
        logging.debug("Loading synonym dictionary from `%s`.", path)
        return cls.load(read_lines(path))

    def to_file(self, path: Path) -> None:
        """Write the dictionary to a file, replacing its content."""
        write_lines(path, self.store())

    def find_index(self, word: str) -> int:
        """Get the index of the first record for the word.

        :raises WordNotFound: if there is no such record
        """
        for index, record in enumerate(self.records):
            if record.matches(word):
                return index
        raise WordNotFound(word)

    def get_record(self, word: str) -> Record:
        """Get a copy of the first record for the word.

        :raises WordNotFound: if there is no such record
        """
        return self.records[self.find_index(word)].copy()

    def get_line(self, word: str) -> str:
        """Get the encoded line of the first record for the word."""
        return self.records[self.find_index(word)].encode()

    def has(self, word: str) -> bool:
        """Check whether the dictionary has a record for the word."""
        return any(record.matches(word) for record in self.records)

    def add_record(self, record: Record | str) -> None:
        """Append a record at the end.

        Existing records with the same headword are kept.

        :param record: record or its encoded line
        :raises MalformedRecord: if the line cannot be parsed, the record has
            no synonyms, or some synonym is empty
        """
        if isinstance(record, str):
            record = Record.decode(record)
        if not record.synonyms:
            raise MalformedRecord(record.encode(), reason="no synonyms")
        if not all(x.strip() for x in record.synonyms):
            raise MalformedRecord(record.encode(), reason="empty synonym")

        self.records.append(record.copy())
        logging.debug("Added record `%s`.", record)

    def remove_record(self, word: str) -> int:
        """Remove all records for the word.

        :return: number of removed records
        :raises WordNotFound: if there is no record for the word
        """
        remaining: list[Record] = [
            record for record in self.records if not record.matches(word)
        ]
        removed: int = len(self.records) - len(remaining)
        if not removed:
            raise WordNotFound(word)

        self.records = remaining
        logging.debug("Removed %d records for `%s`.", removed, word)
        return removed

    def add_synonym(self, word: str, synonym: str) -> None:
        """Append a synonym to the first record for the word.

        The synonym is added even if the record already has it.

        :raises WordNotFound: if there is no record for the word
        :raises EmptySynonym: if the synonym is empty
        """
        record: Record = self.records[self.find_index(word)]
        if not synonym.strip():
            raise EmptySynonym(record.headword)
        record.synonyms.append(synonym.strip())
        logging.debug("Added synonym `%s` to `%s`.", synonym, record.headword)

    def remove_synonym(self, word: str, synonym: str) -> None:
        """Remove all occurrences of the synonym from the first record.

        Synonyms are compared ignoring case and surrounding whitespace.

        :raises WordNotFound: if there is no record for the word
        :raises SynonymNotFound: if the record has no such synonym
        :raises LastSynonymRemoval: if no synonyms would be left
        """
        record: Record = self.records[self.find_index(word)]
        remaining: list[str] = [
            x for x in record.synonyms if normalize(x) != normalize(synonym)
        ]
        if len(remaining) == len(record.synonyms):
            raise SynonymNotFound(record.headword, synonym)
        if not remaining:
            raise LastSynonymRemoval(record.headword, synonym)

        record.synonyms = remaining
        logging.debug(
            "Removed synonym `%s` from `%s`.", synonym, record.headword
        )

    def sort(self) -> None:
        """Sort records by headword and synonyms inside every record.

        Both sorts ignore case and are stable.  Synonyms never affect the order
        of records.
        """
        self.records = [
            record.sorted()
            for record in sorted(
                self.records, key=lambda x: normalize(x.headword)
            )
        ]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)


def load(lines: Iterable[str]) -> SynonymDictionary:
    """Construct a dictionary from lines."""
    return SynonymDictionary.load(lines)


def store(dictionary: SynonymDictionary) -> list[str]:
    """Serialize a dictionary into lines."""
    return dictionary.store()


def sort_dictionary(dictionary: SynonymDictionary) -> SynonymDictionary:
    """Get a sorted copy of the dictionary."""
    result: SynonymDictionary = SynonymDictionary(
        [record.copy() for record in dictionary.records]
    )
    result.sort()
    return result
