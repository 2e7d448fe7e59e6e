import logging as lg

import scram.common.isa as isa
from scram.common.hwconf import MEMORY_SIZE, WORD_MASK, ADDR_MASK
from scram.common.errors import (  # noqa: F401
    ScramError,
    OutOfRange,
    InvalidValue,
    IllegalOpcode,
    AlreadyHalted,
    Faulted
)


class CPU():
    memory: bytearray  # 16 cells of 8 bits
    _pc: int  # Program counter
    _accumulator: int
    halted: bool
    fault: ScramError | None  # Set once a step fails

    def __init__(self):
        self.memory = bytearray(MEMORY_SIZE)
        self._pc = 0
        self._accumulator = 0
        self.halted = False
        self.fault = None

    # - Registers - #

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def accumulator(self) -> int:
        return self._accumulator

    # - Helpers - #

    def debug_dump(self):
        cells = ' '.join(f'{v:02X}' for v in self.memory)
        lg.debug(f'A:{self._accumulator:X} PC:{self._pc:X} HLT:{self.halted} [{cells}]')

    def check_addr(self, addr: int):
        if addr < 0 or addr >= MEMORY_SIZE:
            raise OutOfRange(addr)

    def read_memory(self, addr: int) -> int:
        self.check_addr(addr)
        return self.memory[addr]

    def write_memory(self, addr: int, value: int):
        self.check_addr(addr)

        if value < 0 or value > WORD_MASK:
            raise InvalidValue(value)

        self.memory[addr] = value

    def snapshot(self) -> list[int]:
        return list(self.memory)

    def indirect(self, data: int) -> int:
        return self.memory[data] & ADDR_MASK

    def fetch(self) -> isa.Instruction:
        byte = self.read_memory(self._pc)

        try:
            return isa.decode(byte)
        except IllegalOpcode as e:
            raise IllegalOpcode(e.opcode, self._pc) from None

    # - Operations - #

    def hlt(self, _: isa.Instruction):
        self.halted = True

    def lda(self, instr: isa.Instruction):
        self._accumulator = self.memory[instr.data]

    def ldi(self, instr: isa.Instruction):
        self._accumulator = self.memory[self.indirect(instr.data)]

    def sta(self, instr: isa.Instruction):
        self.memory[instr.data] = self._accumulator

    def sti(self, instr: isa.Instruction):
        self.memory[self.indirect(instr.data)] = self._accumulator

    def add(self, instr: isa.Instruction):
        self._accumulator = (self._accumulator + self.memory[instr.data]) & WORD_MASK

    def sub(self, instr: isa.Instruction):
        self._accumulator = (self._accumulator - self.memory[instr.data]) & WORD_MASK

    def jmp(self, instr: isa.Instruction):
        self._pc = instr.data

    def jmz(self, instr: isa.Instruction):
        if self._accumulator == 0:
            self._pc = instr.data

    HANDLERS = {
        isa.Hlt: hlt,
        isa.Lda: lda,
        isa.Ldi: ldi,
        isa.Sta: sta,
        isa.Sti: sti,
        isa.Add: add,
        isa.Sub: sub,
        isa.Jmp: jmp,
        isa.Jmz: jmz
    }

    # -- Implementation -- #

    def step(self) -> isa.Instruction:
        if self.fault is not None:
            raise Faulted(self.fault)

        if self.halted:
            raise AlreadyHalted()

        # Fetch and decode touch nothing, so a failure leaves the state intact
        try:
            instr = self.fetch()
        except ScramError as e:
            lg.debug(f'Fault at PC:{self._pc:X}: {e}')
            self.fault = e
            raise

        lg.debug(f'{self._pc:X}: {instr}')
        self._pc += 1

        handler = self.HANDLERS[type(instr)]
        handler(self, instr)
        self.debug_dump()
        return instr
