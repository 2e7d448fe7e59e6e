# type: ignore
''' Assembler grammar '''

from dataclasses import dataclass

import pyparsing as pp

import scram.common.isa as isa


@dataclass
class Label:
    name: str


@dataclass
class Op:
    variant: type[isa.Instruction]
    operand: int | str = 0  # Number or label name


@dataclass
class Byte:
    value: int | str  # Number or label name


def to_int(literal: str) -> int:
    if literal.lower().startswith('0x'):
        return int(literal, 16)

    return int(literal, 10)


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
number = pp.Regex('0[xX][0-9A-Fa-f]+|[0-9]+').set_parse_action(lambda r: to_int(r[0]))

mnemonics = pp.MatchFirst([
    pp.CaselessKeyword(variant().mnemonic()) for variant in isa.VARIANTS.values()
])

label = (id + pp.Suppress(':')).set_parse_action(lambda r: Label(r[0]))
ref = ~mnemonics + id
operand = number | ref


def g_cmd(variant):
    return pp.CaselessKeyword(variant().mnemonic())


def g_cmd_1(variant):
    return (g_cmd(variant) + operand).set_parse_action(lambda r: Op(variant, r[1]))


hlt_cmd = g_cmd(isa.Hlt).set_parse_action(lambda _: Op(isa.Hlt))
lda_cmd = g_cmd_1(isa.Lda)
ldi_cmd = g_cmd_1(isa.Ldi)
sta_cmd = g_cmd_1(isa.Sta)
sti_cmd = g_cmd_1(isa.Sti)
add_cmd = g_cmd_1(isa.Add)
sub_cmd = g_cmd_1(isa.Sub)
jmp_cmd = g_cmd_1(isa.Jmp)
jmz_cmd = g_cmd_1(isa.Jmz)

byte_cmd = (pp.Suppress('.byte') + operand).set_parse_action(lambda r: Byte(r[0]))

asm_cmd = hlt_cmd \
    | lda_cmd \
    | ldi_cmd \
    | sta_cmd \
    | sti_cmd \
    | add_cmd \
    | sub_cmd \
    | jmp_cmd \
    | jmz_cmd \
    | byte_cmd

program = pp.ZeroOrMore(label | asm_cmd)
program.ignore(pp.dbl_slash_comment)
