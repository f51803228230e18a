class ParseError(Exception):
    line_number: int
    line: str

    def __init__(self, message: str, line_number: int, line: str):
        super().__init__(f'{line_number}: {message}')
        self.line_number = line_number
        self.line = line


class InstructionNotFound(ParseError):
    def __init__(self, mnemonic: str, line_number: int, line: str):
        super().__init__(f'instruction {mnemonic!r} not found', line_number, line)
        self.mnemonic = mnemonic


class InvalidOperand(ParseError):
    pass


class InvalidSyntax(ParseError):
    pass
