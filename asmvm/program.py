"""
One-shot program execution.

A Program creates a fresh Machine, then assembles and runs the given text
line by line on it. The machine is left in its final state afterwards.

Output log:
  - one register summary per non-blank line executed
  - "ERROR: <message>" on the first failing line, after which nothing runs
  - "HALT" when every line ran
"""

from __future__ import annotations
from typing import List, Optional
import logging

from .errors import MachineError
from .machine import Machine

__all__ = ['Program']

log = logging.getLogger(__name__)


class Program:
    """A single execution of a block of code."""

    def __init__(self, text: str, trace: bool = False):
        self.machine = Machine()
        self.input: List[str] = text.split('\n')
        self.output: List[str] = []
        self.error: Optional[MachineError] = None
        if trace:
            self.machine.enable_trace()
        self.run()

    @property
    def halted(self) -> bool:
        """True when every line ran without error."""
        return self.error is None

    def run(self):
        language = self.machine.assembly_language
        for line_num, line in enumerate(self.input, 1):
            try:
                statement = language.assemble_statement(line)
            except MachineError as e:
                self.error = e.at_line(line_num, line)
                log.warning("Program stopped at line %d: %s", line_num, e)
                self.append_output(f"ERROR: {e}")
                return
            if statement is None:
                continue
            self.machine.append([statement])
            self.machine.run()
            self.append_output(self.machine.state_summary)

        log.info("Program halted after %d statement(s): %s",
                 self.machine.instruction_count, self.machine.state_summary)
        self.append_output("HALT")

    def append_output(self, text: str):
        self.output.append(text)
