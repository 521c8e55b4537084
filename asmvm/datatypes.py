"""
Operand data types.

A DataType bounds the integer values an operand (or register) may hold and
parses operand text into those values. OperandSpec pairs a data type with
the placeholder name shown in help text and examples.

Enumerated instances:
  WORD         — unsigned 16-bit value [0 - 65535]
  register(n)  — register index [0 - n-1]
"""

from __future__ import annotations
from dataclasses import dataclass
import re

from .errors import InvalidInputType, InputOutsideRange

__all__ = ['DataType', 'OperandSpec', 'WORD', 'WORD_MAX', 'register']

WORD_MAX = 0xFFFF

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class DataType:
    """A named, inclusive integer range."""
    name: str
    min: int
    max: int

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"DataType {self.name}: min {self.min} > max {self.max}")

    @property
    def help_text(self) -> str:
        return f"{self.name} [{self.min} - {self.max}]"

    def parse(self, text) -> int:
        """Parse operand text as a base-10 integer within [min, max].

        Only ASCII digits with an optional sign are accepted. Raises
        InvalidInputType if the text is not an integer and InputOutsideRange
        if the value falls outside the bounds.
        """
        if text is None:
            raise InvalidInputType()
        text = str(text).strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidInputType()
        sign = "-" if text[0] == "-" else ""
        digits = text.lstrip("+-").lstrip("0") or "0"
        try:
            value = int(sign + digits)
        except ValueError:
            # Well-formed but past the interpreter's int-string digit limit
            raise InputOutsideRange() from None
        if value < self.min or value > self.max:
            raise InputOutsideRange()
        return value


@dataclass(frozen=True)
class OperandSpec:
    """Placeholder name + data type for one instruction operand."""
    placeholder: str
    data_type: DataType

    @property
    def help_text(self) -> str:
        return f"{self.placeholder}: {self.data_type.help_text}"


def register(count: int) -> DataType:
    """Data type for a register index on a machine with `count` registers."""
    return DataType("register", 0, count - 1)


WORD = DataType("word", 0, WORD_MAX)
