import logging as lg
from pathlib import Path

import pyparsing as pp

from hrmvm.common.ops import Instruction, MNEMONICS, NO_OPERAND, Program
import hrmvm.sasm.grammar as grammar
from hrmvm.sasm.errors import InstructionNotFound, InvalidOperand, InvalidSyntax


def explain(line: str, line_number: int):
    ''' Turns a line rejected by the grammar into the matching ParseError '''

    try:
        words = grammar.loose_line.parse_string(line, parse_all=True).as_list()
    except pp.ParseException:
        return InvalidSyntax('unreadable line', line_number, line)

    if not words or words[0] not in MNEMONICS:
        mnemonic = words[0] if words else line.strip()
        return InstructionNotFound(mnemonic, line_number, line)

    if len(words) > 2:
        return InvalidSyntax(f'expected at most one operand, got {len(words) - 1}', line_number, line)

    op = MNEMONICS[words[0]]

    if op in NO_OPERAND:
        return InvalidOperand(f'{op.value} takes no operand', line_number, line)

    if len(words) == 1:
        return InvalidOperand(f'{op.value} requires an operand', line_number, line)

    return InvalidOperand(f'cannot parse {words[1]!r} as unsigned number', line_number, line)


def parse_line(line: str, line_number: int) -> Instruction | None:
    try:
        result = grammar.line.parse_string(line, parse_all=True)
    except pp.ParseException:
        raise explain(line, line_number) from None

    if not result:
        return None

    return result[0]


def parse_program(source: str) -> Program:
    instructions: Program = []

    for line_number, line in enumerate(source.splitlines(), start=1):
        ins = parse_line(line, line_number)

        if ins is None:
            continue

        lg.debug(f'{line_number}: {ins}')
        instructions.append(ins)

    lg.debug(f'Parsed {len(instructions)} instructions')
    return instructions


def parse_file(path: str | Path) -> Program:
    if isinstance(path, str):
        path = Path(path)

    lg.debug(f'Parsing file {path}')
    return parse_program(path.read_text())
