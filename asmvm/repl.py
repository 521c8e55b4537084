"""
Interactive REPL.

Maintains a single Machine on which lines are assembled and run one at a
time. State persists between calls; a failing line is reported and leaves
the machine untouched.
"""

from __future__ import annotations
from typing import Optional
import logging

from .errors import MachineError
from .machine import Machine, WORD_BITS

__all__ = ['REPL', 'HELP_KEYWORD']

log = logging.getLogger(__name__)

HELP_KEYWORD = "HELP"


class REPL:

    def __init__(self, machine: Optional[Machine] = None):
        self.machine = machine or Machine()

    @property
    def help_text(self) -> str:
        lines = [
            f"I am running on a {WORD_BITS}-bit virtual machine. Instructions:",
        ]
        for instruction in self.machine.assembly_language.instruction_specs:
            for index, line in enumerate(instruction.help_text):
                lines.append(("# " if index == 0 else "") + line)
        return "\n".join(lines)

    @staticmethod
    def error_message(error) -> str:
        return f"ERROR: {error}."

    def run(self, text: str) -> str:
        """Run one line and return the register summary, help, or an error."""
        language = self.machine.assembly_language
        if language.syntax.tokenize_line(text).keyword == HELP_KEYWORD:
            return self.help_text

        try:
            statement = language.assemble_statement(text)
        except MachineError as e:
            log.debug("REPL rejected %r: %s", text, e)
            return self.error_message(e)

        if statement is not None:
            self.machine.append([statement])
            self.machine.run()
        return self.machine.state_summary
