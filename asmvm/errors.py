"""
Machine error taxonomy.

Every failure the assembler or the machine can report is a MachineError
subclass. Errors are raised at assembly time, before any microcode runs,
so catching one never leaves a Machine half-updated.
"""

from __future__ import annotations
from typing import Optional

__all__ = [
    'MachineError', 'UnknownInstruction', 'InvalidInputType',
    'InputOutsideRange', 'InvalidInstructionFormat',
]


class MachineError(Exception):
    """Base class for assembly and execution errors."""

    message = "Machine error"

    def __init__(self, message: Optional[str] = None, line_num: int = 0, line_text: str = ""):
        self.line_num = line_num
        self.line_text = line_text
        self.detail = message or self.message
        super().__init__(f"Line {line_num}: {self.detail}" if line_num else self.detail)

    def at_line(self, line_num: int, line_text: str = "") -> "MachineError":
        """Return a copy of this error tagged with a source line number."""
        return type(self)(self.detail, line_num=line_num, line_text=line_text)


class UnknownInstruction(MachineError):
    """Keyword does not name a registered instruction."""
    message = "Unknown instruction"


class InvalidInputType(MachineError):
    """Operand token is not a well-formed integer."""
    message = "Invalid input type"


class InputOutsideRange(MachineError):
    """Operand value is outside its data type's bounds."""
    message = "Input outside valid range"


class InvalidInstructionFormat(MachineError):
    """Wrong number of operands for the instruction."""
    message = "Invalid instruction format"
