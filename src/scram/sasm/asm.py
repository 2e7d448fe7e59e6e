''' Two-pass assembler '''

import logging as lg
from pathlib import Path

import click
import pyparsing as pp

import scram.common.isa as isa
from scram.common.hwconf import MEMORY_SIZE, ADDR_MASK, WORD_MASK
from scram.common.errors import ScramError
from scram.sasm.grammar import Label, Op, Byte, program
from scram.sasm.image import format_image


class AssemblyError(ScramError):
    pass


class FPP:
    ''' First pass processor '''
    cells: list[Op | Byte]
    label_dict: dict[str, int]

    def __init__(self):
        self.cells = list()
        self.label_dict = dict()

    @property
    def offset(self) -> int:
        return len(self.cells)

    def on_label(self, label: Label):
        if label.name in self.label_dict:
            raise AssemblyError(f'Duplicate label {label.name}')

        self.label_dict[label.name] = self.offset
        lg.debug(f'Label {label.name} @ 0x{self.offset:X}')

    def issue(self, cell: Op | Byte):
        if self.offset >= MEMORY_SIZE:
            raise AssemblyError(f'Program does not fit into {MEMORY_SIZE} cells')

        self.cells.append(cell)

    def resolve(self, operand: int | str, mask: int) -> int:
        if isinstance(operand, str):
            if operand not in self.label_dict:
                raise AssemblyError(f'Undefined label {operand}')

            operand = self.label_dict[operand]

        if operand > mask:
            raise AssemblyError(f'Value {operand} does not fit into {mask.bit_length()} bits')

        return operand

    def emit(self, cell: Op | Byte) -> int:
        if isinstance(cell, Byte):
            return self.resolve(cell.value, WORD_MASK)

        instr = cell.variant(self.resolve(cell.operand, ADDR_MASK))
        lg.debug(f'Issuing {instr}')
        return isa.encode(instr)


def assemble(text: str) -> list[int]:
    # First pass
    first_pass = FPP()

    try:
        statements = program.parse_string(text, parse_all=True)
    except pp.ParseBaseException as e:
        raise AssemblyError(f'Syntax error at line {e.lineno}, column {e.col}') from None

    for statement in statements:
        if isinstance(statement, Label):
            first_pass.on_label(statement)
        else:
            first_pass.issue(statement)

    # Second pass
    return [first_pass.emit(cell) for cell in first_pass.cells]


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-o', '--output', type=Path, help='Write the memory image here instead of stdout')
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def compile(verbose: bool, output: Path | None, source: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("SCRAM ASM")

    try:
        cells = assemble(source.read_text())
    except AssemblyError as e:
        raise click.ClickException(f'{source}: {e}')

    memory_image = format_image(cells)

    if output is None:
        click.echo(memory_image)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(memory_image + '\n')
    lg.info(f'{len(cells)} cells written to {output}')


if __name__ == "__main__":
    compile()
