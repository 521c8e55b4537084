"""
asmvm — a minimal register virtual machine
==========================================
Interprets a tiny assembly language (SET, ADD) over a fixed register file,
either as a one-shot Program or interactively through a REPL.

Architecture:
    ┌──────────┐    ┌──────────┐    ┌────────────┐    ┌───────────┐    ┌─────────┐
    │ Source   │───>│  Syntax  │───>│  Language  │───>│ Statement │───>│ Machine │
    │ (line)   │    │ (tokens) │    │ (validate) │    │ (bound)   │    │ step/run│
    └──────────┘    └──────────┘    └────────────┘    └───────────┘    └─────────┘

    - datatypes.py:    DataType / OperandSpec, operand bounds and parsing
    - instructions.py: Instruction + microcode for SET and ADD
    - assembly.py:     AssemblySyntax, AssemblyStatement, AssemblyLanguage
    - machine.py:      registers, stored statements, PC, step/run
    - program.py:      one-shot execution with an output log
    - repl.py:         line-at-a-time execution on a persistent machine
"""

__version__ = "0.1.0"

from .errors import (
    MachineError, UnknownInstruction, InvalidInputType,
    InputOutsideRange, InvalidInstructionFormat,
)
from .datatypes import DataType, OperandSpec, WORD, register
from .instructions import Instruction, set_register, ADD_REGISTERS
from .assembly import AssemblySyntax, TokenizedLine, AssemblyStatement, AssemblyLanguage
from .machine import Machine, NUM_REGISTERS, WORD_SIZE, WORD_BITS, WORD_MAX
from .program import Program
from .repl import REPL


def run_source(source: str, trace: bool = False) -> Program:
    """Run a block of source text on a fresh machine and return the Program."""
    return Program(source, trace=trace)
