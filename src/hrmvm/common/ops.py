from dataclasses import dataclass
from enum import Enum


class Op(Enum):
    # I/O
    INBOX = 'inbox'                 # next(Inbox) -> B
    OUTBOX = 'outbox'               # B -> Outbox; B := None

    # Registers
    COPYFROM = 'copyfrom'           # R1 -> B
    COPYTO = 'copyto'               # B -> R1

    # Arithmetic
    ADD = 'add'                     # R1 + B -> B
    SUB = 'sub'                     # B - R1 -> B
    MUL = 'mul'                     # R1 * B -> B
    BUMPPLUS = 'bump+'              # R1 + 1 -> R1 -> B
    BUMPMINUS = 'bump-'             # R1 - 1 -> R1 -> B

    # Flow
    LABEL = 'label'                 # L1 marker
    JUMP = 'jump'                   # jmp L1
    JUMPZERO = 'jumpzero'           # if B .eq 0 jmp L1
    JUMPNEGATIVE = 'jumpnegative'   # if B .lt 0 jmp L1


NO_OPERAND = frozenset([Op.INBOX, Op.OUTBOX])

REGISTER_OPERAND = frozenset([
    Op.COPYFROM,
    Op.COPYTO,
    Op.ADD,
    Op.SUB,
    Op.MUL,
    Op.BUMPPLUS,
    Op.BUMPMINUS
])

LABEL_OPERAND = frozenset([
    Op.LABEL,
    Op.JUMP,
    Op.JUMPZERO,
    Op.JUMPNEGATIVE
])

MNEMONICS = {op.value: op for op in Op}


@dataclass(frozen=True)
class Instruction:
    op: Op
    arg: int | None = None

    def __post_init__(self):
        if self.op in NO_OPERAND:
            if self.arg is not None:
                raise ValueError(f'{self.op.value} takes no operand')
            return

        if self.arg is None:
            raise ValueError(f'{self.op.value} requires an operand')

        if self.arg < 0:
            raise ValueError(f'{self.op.value} operand must be unsigned, got {self.arg}')

    @property
    def has_register(self) -> bool:
        return self.op in REGISTER_OPERAND

    @property
    def has_label(self) -> bool:
        return self.op in LABEL_OPERAND

    def __str__(self) -> str:
        if self.arg is None:
            return self.op.value

        return f'{self.op.value} {self.arg}'


def inbox():
    return Instruction(Op.INBOX)


def outbox():
    return Instruction(Op.OUTBOX)


def copyfrom(register: int):
    return Instruction(Op.COPYFROM, register)


def copyto(register: int):
    return Instruction(Op.COPYTO, register)


def add(register: int):
    return Instruction(Op.ADD, register)


def sub(register: int):
    return Instruction(Op.SUB, register)


def mul(register: int):
    return Instruction(Op.MUL, register)


def bump_plus(register: int):
    return Instruction(Op.BUMPPLUS, register)


def bump_minus(register: int):
    return Instruction(Op.BUMPMINUS, register)


def label(label_id: int):
    return Instruction(Op.LABEL, label_id)


def jump(label_id: int):
    return Instruction(Op.JUMP, label_id)


def jump_zero(label_id: int):
    return Instruction(Op.JUMPZERO, label_id)


def jump_negative(label_id: int):
    return Instruction(Op.JUMPNEGATIVE, label_id)


Program = list[Instruction]
