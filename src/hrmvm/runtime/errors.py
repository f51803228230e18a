''' Run-time faults reported by the machine '''

from hrmvm.common.ops import Instruction


class RuntimeFault(Exception):
    program_counter: int | None
    instruction: Instruction | None

    def __init__(self, message: str):
        super().__init__(message)
        self.program_counter = None
        self.instruction = None

    def at(self, program_counter: int, instruction: Instruction):
        self.program_counter = program_counter
        self.instruction = instruction
        return self

    def __str__(self) -> str:
        message = super().__str__()

        if self.instruction is None:
            return message

        return f'{message} (at {self.program_counter}: {self.instruction})'


class EmptyInbox(RuntimeFault):
    def __init__(self):
        super().__init__('Inbox is empty')


class EmptyBuffer(RuntimeFault):
    def __init__(self):
        super().__init__('Buffer is empty')


class EmptyRegister(RuntimeFault):
    register: int

    def __init__(self, register: int):
        super().__init__(f'Register {register} is empty')
        self.register = register


class InvalidJumpAddress(RuntimeFault):
    label: int

    def __init__(self, label: int):
        super().__init__(f'Label {label} is not defined')
        self.label = label


class RegisterIndexOutOfBounds(RuntimeFault):
    register: int
    register_count: int

    def __init__(self, register: int, register_count: int):
        super().__init__(f'Register {register} out of range 0..{register_count - 1}')
        self.register = register
        self.register_count = register_count
