"""
Instruction set.

An Instruction is the static description of one opcode: its keyword, the
operand signature, and the microcode function that mutates machine state.
Microcode is called as ``microcode(machine, *values)`` with operand values
that have already been parsed and range-checked.

Built-in instructions:
  SET n i   — $Rn = i              (set_register(count))
  ADD       — $R0 = $R0 + $R1      (ADD_REGISTERS)

To add an instruction: write a microcode function taking the machine plus
one argument per operand, then register an Instruction for it in the
machine's AssemblyLanguage.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .datatypes import OperandSpec, WORD, register
from .errors import InvalidInstructionFormat

__all__ = ['Instruction', 'set_register', 'ADD_REGISTERS']


@dataclass(frozen=True)
class Instruction:
    """One opcode of the assembly language."""
    keyword: str
    operands: Tuple[OperandSpec, ...]
    microcode: Callable
    description: str = ""

    def parse_operands(self, tokens: Sequence[str]) -> Tuple[int, ...]:
        """Check arity and parse every operand token, in order.

        Nothing is executed; the first bad token raises.
        """
        if len(tokens) != len(self.operands):
            raise InvalidInstructionFormat()
        return tuple(spec.data_type.parse(token)
                     for spec, token in zip(self.operands, tokens))

    def execute(self, tokens: Sequence[str], machine) -> None:
        """Parse `tokens` and run this instruction's microcode on `machine`."""
        values = self.parse_operands(tokens)
        self.microcode(machine, *values)

    @property
    def example(self) -> str:
        return " ".join([self.keyword] + [spec.placeholder for spec in self.operands])

    @property
    def help_text(self) -> List[str]:
        lines = [
            f"{self.keyword}: {self.description}",
            f"Example: {self.example}",
        ]
        lines.extend(spec.help_text for spec in self.operands)
        return lines


# ──────────────────────────────────────────────
# Microcode
# ──────────────────────────────────────────────

def _set_register(machine, index: int, value: int):
    machine.set_register(index, value)


def _add_registers(machine):
    # TODO: wrap or flag results above WORD_MAX once the machine has a carry flag
    machine.set_register(0, machine.registers[0] + machine.registers[1])


# ──────────────────────────────────────────────
# Enumerated instructions
# ──────────────────────────────────────────────

def set_register(register_count: int) -> Instruction:
    """SET n i for a machine with `register_count` registers."""
    return Instruction(
        keyword="SET",
        operands=(
            OperandSpec("n", register(register_count)),
            OperandSpec("i", WORD),
        ),
        microcode=_set_register,
        description="Sets $Rn to integer value i",
    )


ADD_REGISTERS = Instruction(
    keyword="ADD",
    operands=(),
    microcode=_add_registers,
    description="Sets $R0 = $R0 + $R1",
)
