''' Line grammar '''

import pyparsing as pp

from hrmvm.common.ops import Instruction, Op, NO_OPERAND


def g_cmd_0(op: Op):
    return pp.Keyword(op.value).set_parse_action(lambda _: Instruction(op))


def g_cmd_1(op: Op):
    return (pp.Keyword(op.value) + u_const).set_parse_action(lambda r: Instruction(op, r[1]))


def g_cmd(op: Op):
    if op in NO_OPERAND:
        return g_cmd_0(op)

    return g_cmd_1(op)


u_const = pp.Regex('[0-9]+').set_parse_action(lambda r: int(r[0]))

line_comment = pp.Suppress(pp.Literal('//') + pp.rest_of_line)
comment = pp.Suppress(pp.Literal('#') + pp.rest_of_line)

# I/O
inbox_cmd = g_cmd(Op.INBOX)
outbox_cmd = g_cmd(Op.OUTBOX)

# Registers
copyfrom_cmd = g_cmd(Op.COPYFROM)
copyto_cmd = g_cmd(Op.COPYTO)

# Arithmetic
add_cmd = g_cmd(Op.ADD)
sub_cmd = g_cmd(Op.SUB)
mul_cmd = g_cmd(Op.MUL)
bump_plus_cmd = g_cmd(Op.BUMPPLUS)
bump_minus_cmd = g_cmd(Op.BUMPMINUS)

# Flow
label_cmd = g_cmd(Op.LABEL)
jump_cmd = g_cmd(Op.JUMP)
jumpzero_cmd = g_cmd(Op.JUMPZERO)
jumpnegative_cmd = g_cmd(Op.JUMPNEGATIVE)

cmd = inbox_cmd \
    ^ outbox_cmd \
    ^ copyfrom_cmd \
    ^ copyto_cmd \
    ^ add_cmd \
    ^ sub_cmd \
    ^ mul_cmd \
    ^ bump_plus_cmd \
    ^ bump_minus_cmd \
    ^ label_cmd \
    ^ jump_cmd \
    ^ jumpzero_cmd \
    ^ jumpnegative_cmd

statement = pp.Optional(cmd) + pp.Optional(comment)
line = line_comment | statement

# Used to explain a line the strict grammar rejects
word = pp.Word(pp.printables, exclude_chars='#')
loose_line = pp.ZeroOrMore(word) + pp.Optional(comment)
