import pytest
from click.testing import CliRunner

import scram.sasm.asm as asm
import scram.runtime.emulator as emulator

from unit_utils import find_file, load_file, make_cpu

COUNTDOWN = [0x16, 0x85, 0x67, 0x36, 0x70, 0x00, 0x03, 0x01]


def test_countdown():
    assert asm.assemble(load_file('testdata/countdown.sasm')) == COUNTDOWN


def test_countdown_runs():
    lines = []
    proc = make_cpu(asm.format_image(COUNTDOWN))
    result = emulator.execute(proc, out=lines.append)

    assert result.outcome == emulator.HALTED
    assert result.cycles == 18
    assert proc.read_memory(6) == 0


def test_numbers_and_case():
    assert asm.assemble('LDA 0x0F\nadd 2\nHlt') == [0x1F, 0x52, 0x00]


def test_byte_label():
    assert asm.assemble('ldi ptr\nhlt\nptr: .byte value\nvalue: .byte 0xff') == [0x22, 0x00, 0x03, 0xFF]


def test_comments_only():
    assert asm.assemble('// nothing here\n') == []


@pytest.mark.parametrize('source,message', [
    ('lda 16', 'does not fit'),
    ('.byte 256', 'does not fit'),
    ('jmp nowhere', 'Undefined label nowhere'),
    ('a: hlt\na: hlt', 'Duplicate label a'),
    ('mul 1', 'Syntax error'),
    ('\n'.join(['hlt'] * 17), 'does not fit into 16 cells'),
])
def test_errors(source, message):
    with pytest.raises(asm.AssemblyError) as e:
        asm.assemble(source)

    assert message in str(e.value)


def test_cli_stdout():
    runner = CliRunner()
    result = runner.invoke(asm.compile, [str(find_file('testdata/countdown.sasm'))])

    assert result.exit_code == 0
    assert '16 85 67 36 70 00 03 01' in result.stdout


def test_cli_output_file(tmp_path):
    target = tmp_path / 'out' / 'countdown.hex'
    runner = CliRunner()
    result = runner.invoke(asm.compile, [str(find_file('testdata/countdown.sasm')), '-o', str(target)])

    assert result.exit_code == 0
    assert target.read_text() == '16 85 67 36 70 00 03 01\n'


def test_cli_error(tmp_path):
    source = tmp_path / 'bad.sasm'
    source.write_text('jmp nowhere\n')
    runner = CliRunner()
    result = runner.invoke(asm.compile, [str(source)])

    assert result.exit_code == 1
    assert 'Undefined label nowhere' in result.output
