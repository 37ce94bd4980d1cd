import dataclasses
import logging
import re
from typing import Self

from .exceptions import UnrecognizedLineError

log = logging.getLogger(__name__)

COMMENT_CHAR = "#"

RE_PROPERTY = re.compile(
    r"""
    # The property name cannot contain an equals sign or whitespace (including a BOM)...
    (?P<property>[^=\s\ufeff]+)
    # so the first equals sign always separates it from the value.
    =
    # The value may contain equals signs, but no whitespace.
    (?P<value>[^\s\ufeff]+)
    """,
    flags=re.VERBOSE,
)

RE_FILTER = re.compile(
    r"""
    # A filter name between a single pair of brackets (no nesting).
    \[(?P<filter>[^\[\]]+)\]
    """,
    flags=re.VERBOSE,
)


@dataclasses.dataclass(frozen=True, slots=True)
class Empty:
    """A blank line. Whitespace-only lines are not blank."""

    text: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class Comment:
    """A comment line, i.e. # comment."""

    text: str

    @classmethod
    def of(cls, body: str) -> Self:
        """Create a comment line from its body (the text after the comment character)."""

        return cls(f"{COMMENT_CHAR}{body}")


@dataclasses.dataclass(frozen=True, slots=True)
class Property:
    """A property line, i.e. key=value.

    Attributes:
        text: The line as it appeared in the source.
        property: The property name.
        value: The property value.
    """

    text: str
    property: str
    value: str

    @classmethod
    def of(cls, property: str, value: str) -> Self:
        """Create a property line, generating its text.

        Args:
            property: The property name.
            value: The property value.

        Returns:
            The property line.
        """

        return cls(f"{property}={value}", property, value)


@dataclasses.dataclass(frozen=True, slots=True)
class Filter:
    """A filter header, i.e. [name].

    Headers only select the section subsequent lines belong to,
    so they are never stored as section members.
    """

    text: str
    filter: str

    @classmethod
    def of(cls, name: str) -> Self:
        """Create a filter header for the name, generating its text."""

        return cls(f"[{name}]", name)


# Lines that can be members of a section.
ConfigLine = Empty | Comment | Property

Line = Empty | Comment | Property | Filter


def classify(line: str, index: int = 0) -> Line:
    """Classify a single config line.

    The kinds are tried in order: empty, comment, property and filter header.

    Args:
        line: The line to classify, without its newline.
        index: The 0-based line number, used when reporting errors.
            Defaults to 0.

    Returns:
        The classified line.

    Raises:
        UnrecognizedLineError: The line is not of any kind.
    """

    if not line:
        return Empty(line)

    if line.startswith(COMMENT_CHAR):
        return Comment(line)

    if m := RE_PROPERTY.fullmatch(line):
        return Property(line, m["property"], m["value"])

    if m := RE_FILTER.fullmatch(line):
        return Filter(line, m["filter"])

    log.debug("unrecognized line %d: %r", index, line)
    raise UnrecognizedLineError(line, index)
