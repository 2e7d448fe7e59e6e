''' Machine error kinds '''


class ScramError(Exception):
    pass


class OutOfRange(ScramError):
    def __init__(self, addr: int):
        super().__init__(f'Bad address: {addr}')
        self.addr = addr


class InvalidValue(ScramError):
    def __init__(self, value: int):
        super().__init__(f'Bad value: {value}')
        self.value = value


class IllegalOpcode(ScramError):
    def __init__(self, opcode: int, addr: int | None = None):
        message = f'Illegal instruction code: {opcode}'

        if addr is not None:
            message += f' at 0x{addr:X}'

        super().__init__(message)
        self.opcode = opcode
        self.addr = addr


class AlreadyHalted(ScramError):
    def __init__(self):
        super().__init__('SCRAM is halted')


class Faulted(ScramError):
    def __init__(self, reason: ScramError):
        super().__init__(f'SCRAM is faulted ({reason})')
        self.reason = reason
