"""Read and write firmware configs and command lines."""

from . import cmdline
from .config import (
    ALL,
    GLOBAL,
    FirmwareConfig,
    Section,
    bucketize,
    dumps,
    loads,
    parse,
    stringify,
)
from .exceptions import FwconfError, UnrecognizedLineError
from .line import Comment, ConfigLine, Empty, Filter, Line, Property, classify

__version__ = "0.1.0"
