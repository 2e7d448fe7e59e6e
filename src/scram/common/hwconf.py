MEMORY_SIZE = 16    # Cells

WORD_MASK = 0xFF    # Cell and accumulator width
ADDR_MASK = 0x0F    # Data field / address width
OPCODE_SHIFT = 4    # Opcode lives in the high nibble
