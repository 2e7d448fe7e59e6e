''' Hex memory image '''

import logging as lg

import pyparsing as pp

from scram.common.errors import ScramError
from scram.runtime.cpu import CPU


class ImageParseError(ScramError):
    def __init__(self, token: str, col: int):
        super().__init__(f'Bad hex token "{token}" at column {col}')
        self.token = token
        self.col = col


# A token is a run of hex digits followed by whitespace or the end of input
hex_cell = pp.Regex(r'[0-9A-Fa-f]+(?!\S)').set_parse_action(lambda r: int(r[0], 16))
image = pp.ZeroOrMore(hex_cell)


def parse_image(text: str) -> list[int]:
    try:
        return list(image.parse_string(text, parse_all=True))
    except pp.ParseBaseException as e:
        rest = e.pstr[e.loc:].split()
        token = rest[0] if rest else e.pstr[e.loc:]
        raise ImageParseError(token, e.col) from None


def load_image(proc: CPU, text: str) -> int:
    values = parse_image(text)

    for addr, value in enumerate(values):
        proc.write_memory(addr, value)

    lg.debug(f'Loaded {len(values)} cells')
    return len(values)


def format_image(cells: list[int]) -> str:
    return ' '.join(f'{v:02x}' for v in cells)
