class FwconfError(Exception):
    pass


class UnrecognizedLineError(FwconfError, ValueError):
    """A config line did not match any known line kind.

    Attributes:
        line: The offending line, verbatim.
        index: The 0-based line number of the offending line.
    """

    line: str
    index: int

    def __init__(self, line: str, index: int):
        self.line = line
        self.index = index

        super().__init__(f"invalid config on line {index}: '{line}'")
