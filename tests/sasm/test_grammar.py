import pytest

import hrmvm.common.ops as ops
import hrmvm.sasm.asm as asm
from hrmvm.sasm.errors import ParseError, InstructionNotFound, InvalidOperand, InvalidSyntax

from unit_utils import find_file, load_file


def test_triangular():
    program = asm.parse_program(load_file('testdata/programs/triangular.hrm'))
    assert len(program) == 17
    assert program[0] == ops.copyfrom(9)
    assert program[3] == ops.bump_plus(1)
    assert program[12] == ops.jump_zero(2)
    assert program[13] == ops.jump(1)
    assert program[-1] == ops.outbox()


def test_every_mnemonic():
    source = '''
inbox
outbox
copyfrom 1
copyto 2
add 3
sub 4
mul 5
bump+ 6
bump- 7
label 8
jump 9
jumpzero 10
jumpnegative 11
'''
    assert asm.parse_program(source) == [
        ops.inbox(),
        ops.outbox(),
        ops.copyfrom(1),
        ops.copyto(2),
        ops.add(3),
        ops.sub(4),
        ops.mul(5),
        ops.bump_plus(6),
        ops.bump_minus(7),
        ops.label(8),
        ops.jump(9),
        ops.jump_zero(10),
        ops.jump_negative(11)
    ]


def test_comments_and_whitespace():
    source = '''
    // heading comment
  inbox   # read
# whole line
\tcopyto    0
'''
    assert asm.parse_program(source) == [ops.inbox(), ops.copyto(0)]


def test_empty_source():
    assert asm.parse_program('') == []
    assert asm.parse_program('\n\n// nothing\n') == []


def test_unknown_instruction():
    with pytest.raises(InstructionNotFound) as e:
        asm.parse_program('inbox\n\nshuffle 3\n')

    assert e.value.line_number == 3
    assert e.value.mnemonic == 'shuffle'


def test_mnemonic_is_case_sensitive():
    with pytest.raises(InstructionNotFound):
        asm.parse_program('INBOX')


@pytest.mark.parametrize('line', [
    'copyfrom',
    'copyfrom x',
    'copyfrom -1',
    'copyfrom 1x',
    'inbox 1',
    'outbox 0',
    'jump'
])
def test_invalid_operand(line):
    with pytest.raises(InvalidOperand) as e:
        asm.parse_program(f'inbox\n{line}\n')

    assert e.value.line_number == 2
    assert e.value.line == line


def test_too_many_operands():
    with pytest.raises(InvalidSyntax) as e:
        asm.parse_program('copyfrom 1 2')

    assert e.value.line_number == 1


def test_parse_errors_share_base():
    with pytest.raises(ParseError):
        asm.parse_program('nope')


def test_parse_file():
    program = asm.parse_file(find_file('testdata/programs/countdown.hrm'))
    assert program[0] == ops.inbox()
    assert program[-1] == ops.label(2)


def test_broken_file():
    with pytest.raises(InstructionNotFound) as e:
        asm.parse_file(str(find_file('testdata/programs/broken.hrm')))

    assert e.value.line_number == 3
