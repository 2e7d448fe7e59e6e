''' Instruction decoding '''

from dataclasses import dataclass

import scram.common.ops as ops
from scram.common.hwconf import ADDR_MASK, OPCODE_SHIFT, WORD_MASK
from scram.common.errors import IllegalOpcode, InvalidValue


@dataclass(frozen=True)
class Instruction:
    data: int = 0

    OPCODE = -1

    def mnemonic(self) -> str:
        return ops.MNEMONICS[self.OPCODE]

    def __str__(self):
        return f'{self.mnemonic()} {self.data}'


@dataclass(frozen=True)
class Hlt(Instruction):
    OPCODE = ops.HLT

    def __str__(self):
        return self.mnemonic()


@dataclass(frozen=True)
class Lda(Instruction):
    OPCODE = ops.LDA


@dataclass(frozen=True)
class Ldi(Instruction):
    OPCODE = ops.LDI


@dataclass(frozen=True)
class Sta(Instruction):
    OPCODE = ops.STA


@dataclass(frozen=True)
class Sti(Instruction):
    OPCODE = ops.STI


@dataclass(frozen=True)
class Add(Instruction):
    OPCODE = ops.ADD


@dataclass(frozen=True)
class Sub(Instruction):
    OPCODE = ops.SUB


@dataclass(frozen=True)
class Jmp(Instruction):
    OPCODE = ops.JMP


@dataclass(frozen=True)
class Jmz(Instruction):
    OPCODE = ops.JMZ


VARIANTS: dict[int, type[Instruction]] = {
    cls.OPCODE: cls for cls in [Hlt, Lda, Ldi, Sta, Sti, Add, Sub, Jmp, Jmz]
}


def decode(byte: int) -> Instruction:
    if byte < 0 or byte > WORD_MASK:
        raise InvalidValue(byte)

    opcode = (byte >> OPCODE_SHIFT) & ADDR_MASK
    data = byte & ADDR_MASK

    if opcode not in VARIANTS:
        raise IllegalOpcode(opcode)

    return VARIANTS[opcode](data)


def encode(instr: Instruction) -> int:
    return (instr.OPCODE << OPCODE_SHIFT) | (instr.data & ADDR_MASK)
