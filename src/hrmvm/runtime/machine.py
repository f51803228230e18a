import logging as lg
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from hrmvm.common.hwconf import DEFAULT_REGISTER_COUNT, CONST_ZERO, INITIAL_BUFFER
from hrmvm.common.ops import Instruction, Op
from hrmvm.common.settings import MachineSettings
import hrmvm.sasm.asm as asm
from hrmvm.runtime.labels import LabelTable
from hrmvm.runtime.errors import (
    RuntimeFault,
    EmptyInbox,
    EmptyBuffer,
    EmptyRegister,
    RegisterIndexOutOfBounds
)


@dataclass(frozen=True)
class Halted:
    outbox: list[int]
    instruction_count: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> list[int]:
        return self.outbox


@dataclass(frozen=True)
class Failed:
    error: RuntimeFault
    instruction_count: int

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> list[int]:
        raise self.error


RunResult = Halted | Failed


class Machine:
    instructions: tuple[Instruction, ...]
    register: list[int | None]  # Floor tiles
    buffer: int | None          # Hands
    program_counter: int
    instruction_count: int
    labels: LabelTable
    enable_logging: bool

    inbox: deque[int]
    outbox: list[int]

    def __init__(
        self,
        instructions: Iterable[Instruction],
        register_count: int = DEFAULT_REGISTER_COUNT,
        enable_logging: bool = False
    ):
        if register_count < 1:
            raise ValueError(f'Machine needs at least one register, got {register_count}')

        self.instructions = tuple(instructions)
        self.enable_logging = enable_logging

        # Not cleared between runs
        self.register = [None] * register_count
        self.register[-1] = CONST_ZERO

        self.labels = LabelTable(self.instructions)

        self.inbox = deque()
        self.outbox = []
        self.reset()

    @classmethod
    def from_source(cls, source: str, settings: MachineSettings | None = None):
        if settings is None:
            settings = MachineSettings()

        return cls(asm.parse_program(source), settings.register_count, settings.enable_logging)

    @classmethod
    def from_file(cls, path: str | Path, settings: MachineSettings | None = None):
        if isinstance(path, str):
            path = Path(path)

        lg.debug(f'Loading program {path}')
        return cls.from_source(path.read_text(), settings)

    @property
    def register_count(self) -> int:
        return len(self.register)

    @property
    def registers(self) -> list[int | None]:
        return list(self.register)

    # - Helpers - #

    def reset(self):
        self.buffer = INITIAL_BUFFER
        self.program_counter = 0
        self.instruction_count = 0

    def debug_dump(self, ins: Instruction):
        lg.debug(
            f'count: {self.instruction_count}, instruction: {ins}, '
            f'counter: {self.program_counter}, register: {self.register}, '
            f'buffer: {self.buffer}'
        )

    def check_register(self, arg: int | None) -> int:
        assert arg is not None

        if arg >= len(self.register):
            raise RegisterIndexOutOfBounds(arg, len(self.register))

        return arg

    def get_register(self, arg: int | None) -> int:
        r = self.check_register(arg)
        val = self.register[r]

        if val is None:
            raise EmptyRegister(r)

        return val

    def get_buffer(self) -> int:
        if self.buffer is None:
            raise EmptyBuffer()

        return self.buffer

    def jump_to(self, arg: int | None) -> int:
        assert arg is not None
        return self.labels.resolve(arg)

    def bump(self, arg: int | None, delta: int):
        r = self.check_register(arg)
        val = self.get_register(r) + delta
        self.register[r] = val
        self.buffer = val

    # - Operations - #
    # A handler returns the new program counter when it jumps, None otherwise

    def op_inbox(self, _):
        if not self.inbox:
            raise EmptyInbox()

        self.buffer = self.inbox.popleft()

    def op_outbox(self, _):
        self.outbox.append(self.get_buffer())
        self.buffer = None

    def op_copyfrom(self, arg: int | None):
        self.buffer = self.get_register(arg)

    def op_copyto(self, arg: int | None):
        r = self.check_register(arg)
        self.register[r] = self.get_buffer()

    def op_add(self, arg: int | None):
        a = self.get_register(arg)
        b = self.get_buffer()
        self.buffer = a + b

    def op_sub(self, arg: int | None):
        a = self.get_buffer()
        b = self.get_register(arg)
        self.buffer = a - b

    def op_mul(self, arg: int | None):
        a = self.get_buffer()
        b = self.get_register(arg)
        self.buffer = b * a

    def op_bump_plus(self, arg: int | None):
        self.bump(arg, 1)

    def op_bump_minus(self, arg: int | None):
        self.bump(arg, -1)

    def op_label(self, _):
        pass

    def op_jump(self, arg: int | None):
        return self.jump_to(arg)

    def op_jump_zero(self, arg: int | None):
        if self.get_buffer() == 0:
            return self.jump_to(arg)

    def op_jump_negative(self, arg: int | None):
        if self.get_buffer() < 0:
            return self.jump_to(arg)

    HANDLERS: dict[Op, Callable[['Machine', int | None], int | None]] = {
        Op.INBOX: op_inbox,
        Op.OUTBOX: op_outbox,
        Op.COPYFROM: op_copyfrom,
        Op.COPYTO: op_copyto,
        Op.ADD: op_add,
        Op.SUB: op_sub,
        Op.MUL: op_mul,
        Op.BUMPPLUS: op_bump_plus,
        Op.BUMPMINUS: op_bump_minus,
        Op.LABEL: op_label,
        Op.JUMP: op_jump,
        Op.JUMPZERO: op_jump_zero,
        Op.JUMPNEGATIVE: op_jump_negative
    }

    # -- Implementation -- #

    def exec_next(self):
        ins = self.instructions[self.program_counter]
        self.instruction_count += 1

        if self.enable_logging:
            self.debug_dump(ins)

        handler = self.HANDLERS[ins.op]

        try:
            target = handler(self, ins.arg)
        except RuntimeFault as e:
            raise e.at(self.program_counter, ins)

        if target is None:
            self.program_counter += 1
        else:
            self.program_counter = target

    def execute(self, inbox: Sequence[int]) -> list[int]:
        ''' Runs to completion, raising RuntimeFault on the first failure '''
        self.reset()
        self.inbox = deque(inbox)
        self.outbox = []

        if self.enable_logging:
            lg.debug(f'program: {[str(ins) for ins in self.instructions]}')
            lg.debug(f'inbox: {list(self.inbox)}')

        while self.program_counter < len(self.instructions):
            self.exec_next()

        return self.outbox

    def run(self, inbox: Sequence[int]) -> RunResult:
        try:
            outbox = self.execute(inbox)
        except RuntimeFault as e:
            if self.enable_logging:
                lg.debug(f'Execution failed: {e}')

            self.outbox = []
            return Failed(e, self.instruction_count)

        return Halted(list(outbox), self.instruction_count)
