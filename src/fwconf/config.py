"""Firmware configs: property lines grouped under filter sections.

A firmware config looks like this:

    # Lines before the first filter header are global.
    arm_freq=1800

    [pi4]
    dtoverlay=vc4-kms-v3d

    [all]
    enable_uart=1

Lines before any header go into the global section and lines under `[all]` go into
the universal section. Every other header starts (or continues) a named filter section.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Self

import attrs

from ._conv import converter
from .line import ConfigLine, Filter, Line, classify

log = logging.getLogger(__name__)

GLOBAL = "__global"
ALL = "all"


@attrs.define
class Section:
    """A named filter section.

    Attributes:
        name: The filter name, as written between the header brackets.
        lines: The section's member lines in source order.
    """

    name: str
    lines: list[ConfigLine] = attrs.Factory(list)


@attrs.define
class FirmwareConfig:
    """A parsed firmware config.

    Attributes:
        global_lines: Lines before any filter header.
        all_lines: Lines under `[all]` headers.
        filters: Named filter sections in the order their headers first appeared.
        all_header: Whether an `[all]` header appeared in the source.
            The `[all]` section is written out if this is true or it has any lines.
    """

    global_lines: list[ConfigLine] = attrs.Factory(list)
    all_lines: list[ConfigLine] = attrs.Factory(list)
    filters: list[Section] = attrs.Factory(list)
    all_header: bool = False

    def get(self, name: str) -> list[ConfigLine] | None:
        """Get the lines of a section.

        Args:
            name: The section name. `__global` and `all` refer to the universal sections.

        Returns:
            The section's lines, or None if there is no such section.
        """

        if name == GLOBAL:
            return self.global_lines

        if name == ALL:
            return self.all_lines

        for section in self.filters:
            if section.name == name:
                return section.lines

        return None

    def section(self, name: str) -> list[ConfigLine]:
        """Get the lines of a section, appending a new filter section if it does not exist."""

        lines = self.get(name)
        if lines is None:
            section = Section(name)
            self.filters.append(section)
            lines = section.lines

        return lines

    def names(self) -> Iterator[str]:
        """Iterate over the section names in the order they are written out."""

        yield GLOBAL
        yield from (s.name for s in self.filters)
        yield ALL

    def __getitem__(self, name: str) -> list[ConfigLine]:
        lines = self.get(name)
        if lines is None:
            raise KeyError(name)

        return lines

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def to_dict(self) -> dict[str, list[str]]:
        """Serialize the config to a dict of section names mapped to line texts.
        The `all` key is always present, so an empty `[all]` section does not
        survive a trip through from_dict().

        Returns:
            The dict. Global lines come first, then filter sections, then the universal section.
        """

        return (
            {GLOBAL: converter.unstructure(self.global_lines)}
            | {s.name: converter.unstructure(s.lines) for s in self.filters}
            | {ALL: converter.unstructure(self.all_lines)}
        )

    @classmethod
    def from_dict(cls, config: dict[str, list[str]]) -> Self:
        """Parse a config from a dict of section names mapped to line texts.
        An empty `all` section is not written out by stringify().

        Args:
            config: The dict to parse from.

        Returns:
            The config.

        Raises:
            UnrecognizedLineError: A line could not be classified.
                The line number is relative to the start of its section.
            ValueError: A filter header was given as a section member.
        """

        fw = cls()

        for name, texts in config.items():
            fw.section(name).extend(converter.structure(texts, list[ConfigLine]))

        return fw


def bucketize(lines: Iterable[Line]) -> FirmwareConfig:
    """Group classified lines into sections.

    Args:
        lines: The lines in source order.

    Returns:
        The config. Filter headers select the section for the lines that follow them
        and are not stored.
    """

    config = FirmwareConfig()
    current: list[ConfigLine] = config.global_lines

    for line in lines:
        if isinstance(line, Filter):
            if line.filter == ALL:
                config.all_header = True

            # Repeated headers continue the same section.
            current = config.section(line.filter)
            continue

        current.append(line)

    return config


def parse(text: str) -> FirmwareConfig:
    """Parse a firmware config.

    Args:
        text: The config text. Trailing newlines are ignored.

    Returns:
        The parsed config.

    Raises:
        UnrecognizedLineError: A line could not be classified.
    """

    lines = text.rstrip("\n").split("\n")
    config = bucketize(classify(line, i) for i, line in enumerate(lines))

    log.debug(
        "parsed %d lines into %d filter sections", len(lines), len(config.filters)
    )

    return config


def stringify(config: FirmwareConfig) -> str:
    """Serialize a firmware config.

    Each line's text is written verbatim, so lines whose fields were edited
    must be recreated (e.g. with Property.of()) for the edits to show up.

    Args:
        config: The config to serialize.

    Returns:
        The config text, ending with a single newline.
    """

    lines: list[Line] = [*config.global_lines]

    for section in config.filters:
        lines.append(Filter.of(section.name))
        lines.extend(section.lines)

    # The universal section is always last.
    if config.all_header or config.all_lines:
        lines.append(Filter.of(ALL))
        lines.extend(config.all_lines)

    log.debug("writing %d lines", len(lines))

    return "\n".join(line.text for line in lines) + "\n"


loads = parse
dumps = stringify
