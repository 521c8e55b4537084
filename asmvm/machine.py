"""
asmvm Machine: register file + stored program + program counter.

Execution model:
  1. Fetch the statement at PC
  2. Advance PC by one
  3. Execute the statement's microcode (no-op statements do nothing)

Microcode runs after the increment, so an instruction that calls set_pc()
overrides the default advance. Neither built-in instruction does this yet;
it is the hook for jumps and branches.

States:
  ready    — 0 <= PC < instruction_count
  halting  — any other PC value (including the empty machine at PC 0)

Halting is a terminal state, not an error: setting PC out of range is how
execution stops. run() has no cycle limit.
"""

from __future__ import annotations
from typing import List, Optional
import logging

from .assembly import AssemblyLanguage, AssemblyStatement
from .datatypes import WORD_MAX
from .instructions import ADD_REGISTERS, set_register

__all__ = ['Machine', 'NUM_REGISTERS', 'WORD_SIZE', 'WORD_BITS', 'WORD_MAX']

log = logging.getLogger(__name__)

WORD_SIZE = 2                # bytes per word
WORD_BITS = WORD_SIZE * 8    # 16
NUM_REGISTERS = 2


class Machine:
    """A virtual machine running assembled statements.

    Usage:
        m = Machine()
        m.append(m.assembly_language.assemble("SET 1 10\\nADD"))
        m.run()
        print(m.state_summary)  # [10] [10]
    """

    def __init__(self, register_count: int = NUM_REGISTERS):
        self.registers: List[int] = [0] * register_count
        self.statements: List[AssemblyStatement] = []
        self.pc: int = 0
        self.assembly_language = AssemblyLanguage([
            set_register(register_count),
            ADD_REGISTERS,
        ])

        self._trace = False
        self._trace_output: List[str] = []

    # ══════════════════════════════════════════════
    # State
    # ══════════════════════════════════════════════

    @property
    def instruction_count(self) -> int:
        return len(self.statements)

    @property
    def halting(self) -> bool:
        return self.pc < 0 or self.pc >= len(self.statements)

    @property
    def next_instruction(self) -> Optional[AssemblyStatement]:
        """Statement at PC, or None when halting."""
        if self.halting:
            return None
        return self.statements[self.pc]

    @property
    def state_summary(self) -> str:
        return " ".join(f"[{r}]" for r in self.registers)

    def set_pc(self, value: int):
        """Set PC. Out-of-range values are allowed and mean halt."""
        self.pc = value

    def set_register(self, index: int, value: int):
        self.registers[index] = value

    # ══════════════════════════════════════════════
    # Loading
    # ══════════════════════════════════════════════

    def append(self, statements):
        """Add statements to the end of the program. PC is not touched."""
        if not isinstance(statements, (list, tuple)):
            log.debug("append ignored: %r is not a statement sequence", statements)
            return
        self.statements.extend(statements)
        log.debug("Appended %d statement(s), count=%d pc=%d",
                  len(statements), len(self.statements), self.pc)

    # ══════════════════════════════════════════════
    # Execution
    # ══════════════════════════════════════════════

    def step(self):
        """Execute one statement. No-op while halting."""
        if self.halting:
            return
        pc = self.pc
        statement = self.statements[pc]
        self.pc = pc + 1
        statement.execute(self)

        log.debug("%04d: %-20s %s", pc, statement.text.strip(), self.state_summary)
        if self._trace:
            self._trace_output.append(
                f"{pc:04d}: {statement.text.strip()} -> {self.state_summary}"
            )

    def run(self):
        """Step until halting."""
        while not self.halting:
            self.step()

    # ══════════════════════════════════════════════
    # Trace / Debug
    # ══════════════════════════════════════════════

    def enable_trace(self, enable: bool = True):
        """Record one line per executed statement."""
        self._trace = enable

    def get_trace(self) -> str:
        return '\n'.join(self._trace_output)

    def clear_trace(self):
        self._trace_output.clear()
