"""
Line assembler.

Turns source text into AssemblyStatements, one line at a time:

    "set 1 10 # init"
        │  AssemblySyntax.tokenize_line
        ▼
    TokenizedLine(keyword='SET', operands=['1', '10'], comment='init')
        │  AssemblyLanguage.get_instruction + Instruction.parse_operands
        ▼
    AssemblyStatement(instruction=SET, operands=(1, 10), text=..., comment='init')

Line grammar:
    line     := [ws] [keyword ws operand (ws operand)*] [ws] [comment] [ws]
    comment  := '#' text-to-end-of-line
    keyword  := case-insensitive token, normalized to uppercase

Assembly is the only validation gate. A statement that exists is executable
without further checks.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging

from .errors import MachineError, UnknownInstruction
from .instructions import Instruction

__all__ = ['AssemblySyntax', 'TokenizedLine', 'AssemblyStatement', 'AssemblyLanguage']

log = logging.getLogger(__name__)

COMMENT_CHAR = '#'


@dataclass
class TokenizedLine:
    """Lexical split of one source line."""
    keyword: Optional[str] = None
    operands: List[str] = field(default_factory=list)
    comment: Optional[str] = None


class AssemblySyntax:
    """Purely lexical tokenizer; only the keyword is case-normalized."""

    comment_char = COMMENT_CHAR

    def tokenize_line(self, text: str) -> TokenizedLine:
        result = TokenizedLine()
        text = text or ""

        comment_pos = text.find(self.comment_char)
        if comment_pos >= 0:
            result.comment = text[comment_pos + 1:].strip()
            text = text[:comment_pos]

        tokens = text.split()
        if tokens:
            result.keyword = tokens[0].upper()
            result.operands = tokens[1:]
        return result


@dataclass(frozen=True)
class AssemblyStatement:
    """An assembled instruction invocation, or a no-op when instruction is None."""
    instruction: Optional[Instruction]
    operands: Tuple[int, ...] = ()
    text: str = ""
    comment: Optional[str] = None

    @property
    def is_noop(self) -> bool:
        return self.instruction is None

    def execute(self, machine) -> None:
        """Run the bound microcode. Operands were validated at assembly time."""
        if self.instruction is not None:
            self.instruction.microcode(machine, *self.operands)

    def __str__(self) -> str:
        return self.text


class AssemblyLanguage:
    """Registry of the instructions a machine understands."""

    def __init__(self, instruction_specs: Sequence[Instruction], syntax: Optional[AssemblySyntax] = None):
        self.instruction_specs: Tuple[Instruction, ...] = tuple(instruction_specs)
        self.syntax = syntax or AssemblySyntax()

    def get_instruction(self, keyword: Optional[str]) -> Instruction:
        """Exact, case-sensitive keyword lookup. First registered match wins."""
        if keyword:
            for instruction in self.instruction_specs:
                if instruction.keyword == keyword:
                    return instruction
        raise UnknownInstruction()

    def assemble_statement(self, text: str) -> Optional[AssemblyStatement]:
        """Assemble one line.

        Returns None for a blank line, a no-op statement for a comment-only
        line, and a fully validated statement otherwise.
        """
        tokens = self.syntax.tokenize_line(text)
        if tokens.keyword is None:
            if tokens.comment is None:
                return None
            return AssemblyStatement(None, (), text, tokens.comment)

        instruction = self.get_instruction(tokens.keyword)
        values = instruction.parse_operands(tokens.operands)
        return AssemblyStatement(instruction, values, text, tokens.comment)

    def assemble(self, source: str) -> List[AssemblyStatement]:
        """Assemble a block of text, skipping blank lines.

        The first failing line raises with its 1-based line number attached.
        """
        statements = []
        for line_num, line in enumerate(source.split('\n'), 1):
            try:
                statement = self.assemble_statement(line)
            except MachineError as e:
                log.debug("Assembly failed at line %d: %s", line_num, e)
                raise e.at_line(line_num, line) from e
            if statement is not None:
                statements.append(statement)
        return statements

    @property
    def help_text(self) -> List[str]:
        lines = []
        for instruction in self.instruction_specs:
            lines.extend(instruction.help_text)
        return lines
