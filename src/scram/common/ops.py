# Memory
HLT = 0x0  # halt
LDA = 0x1  # M[D] -> A
LDI = 0x2  # M[M[D] & 0xF] -> A
STA = 0x3  # A -> M[D]
STI = 0x4  # A -> M[M[D] & 0xF]

# Arithmetic
ADD = 0x5  # A + M[D] -> A
SUB = 0x6  # A - M[D] -> A

# Flow
JMP = 0x7  # D -> PC
JMZ = 0x8  # if A .eq 0 D -> PC

MNEMONICS = {
    HLT: 'hlt',
    LDA: 'lda',
    LDI: 'ldi',
    STA: 'sta',
    STI: 'sti',
    ADD: 'add',
    SUB: 'sub',
    JMP: 'jmp',
    JMZ: 'jmz'
}
