import sys
import logging as lg
from dataclasses import dataclass
from typing import Callable

import click

from scram.common.hwconf import MEMORY_SIZE
from scram.common.errors import ScramError
import scram.runtime.cpu as cpu
import scram.sasm.image as image


EXIT_HALT = 0
EXIT_CYCLE_LIMIT = 0
EXIT_EXEC_ERROR = 100

HALTED = 'halted'
CYCLE_LIMIT = 'cycle-limit'
INTERRUPTED = 'interrupted'

Output = Callable[[str], None]


@dataclass
class RunResult:
    outcome: str
    cycles: int
    error: ScramError | None = None

    def report(self) -> str:
        if self.outcome == INTERRUPTED:
            return f'Interrupted after {self.cycles} cycles'

        if self.outcome == HALTED:
            return f'Halted after {self.cycles} cycles'

        return f'Reached cycle limit after {self.cycles} cycles'

    def exit_code(self) -> int:
        return {
            HALTED: EXIT_HALT,
            CYCLE_LIMIT: EXIT_CYCLE_LIMIT,
            INTERRUPTED: EXIT_EXEC_ERROR
        }[self.outcome]


def format_state(label: str, proc: cpu.CPU) -> str:
    cells = ''.join(f' {proc.read_memory(i):02x}' for i in range(MEMORY_SIZE))
    return f'{label}:{cells} A={proc.accumulator:02x} PC={proc.pc:x}'


def cycle_label(cycle: int) -> str:
    return f'{cycle:04d} '


def execute(proc: cpu.CPU, max_cycles: int | None = None, out: Output = print) -> RunResult:
    cycle = 0
    error = None

    out(format_state('Start', proc))

    try:
        while not proc.halted and (max_cycles is None or cycle < max_cycles):
            proc.step()
            out(format_state(cycle_label(cycle), proc))
            cycle += 1

    except ScramError as e:
        out(f'Runtime error: {e}')
        error = e

    if error is not None:
        result = RunResult(INTERRUPTED, cycle, error)
    elif proc.halted:
        result = RunResult(HALTED, cycle)
    else:
        result = RunResult(CYCLE_LIMIT, cycle)

    out(result.report())
    lg.info(f'Execution finished: {result.outcome}')
    return result


def load(ctx: click.Context, param: click.Parameter, value: str) -> cpu.CPU:
    proc = cpu.CPU()

    try:
        image.load_image(proc, value)
    except ScramError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)

    return proc


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option(
    '-n', '--max-cycles',
    type=click.IntRange(min=0),
    envvar='SCRAM_MAX_CYCLES',
    default=None,
    help='Stop after this many cycles (unbounded by default)'
)
@click.argument('memory', callback=load, metavar='MEMORY_CONTENTS')
def run(verbose: bool, max_cycles: int | None, memory: cpu.CPU):
    ''' Runs SCRAM on a memory image of whitespace-separated hex values '''
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("SCRAM")

    result = execute(memory, max_cycles, click.echo)
    sys.exit(result.exit_code())


if __name__ == '__main__':
    run()
