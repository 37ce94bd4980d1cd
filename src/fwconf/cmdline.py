"""This module provides functions for reading firmware command lines.

A command line is a single line of space-separated parameters, each either `name` or `name=value`.
"""

import dataclasses


@dataclasses.dataclass(slots=True)
class CmdlineParam:
    """A command line parameter, i.e. name=value.

    Attributes:
        name: The parameter name.
        value: The parameter value, which is empty for a bare name.
    """

    name: str
    value: str = ""


def parse(text: str) -> list[CmdlineParam]:
    """Parse a command line.

    Args:
        text: The command line. Parameters are separated by single spaces.

    Returns:
        The parameters in order. Only the first equals sign of a parameter separates its name from its value.
    """

    params = []

    for param in text.split(" "):
        name, _, value = param.partition("=")
        params.append(CmdlineParam(name, value))

    return params


def stringify(params: list[CmdlineParam]) -> str:
    """Serialize parameters as a command line.

    Parameters with an empty value are written as just their name.
    """

    return " ".join(f"{p.name}={p.value}" if p.value else p.name for p in params)
