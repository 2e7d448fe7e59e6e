import pytest

import scram.runtime.cpu as cpu
import scram.sasm.image as image


def test_parse():
    assert image.parse_image('51 05 00') == [0x51, 0x05, 0x00]
    assert image.parse_image('  ff\tA0\n1 ') == [0xFF, 0xA0, 0x01]
    assert image.parse_image('') == []


def test_load_sequential():
    proc = cpu.CPU()
    count = image.load_image(proc, '01 02 03')

    assert count == 3
    assert proc.snapshot()[:4] == [1, 2, 3, 0]


def test_load_full_memory():
    proc = cpu.CPU()
    image.load_image(proc, ' '.join(['AB'] * 16))

    assert proc.snapshot() == [0xAB] * 16


def test_seventeen_tokens():
    proc = cpu.CPU()

    with pytest.raises(cpu.OutOfRange) as e:
        image.load_image(proc, ' '.join(['01'] * 17))

    assert e.value.addr == 16


def test_value_too_large():
    proc = cpu.CPU()

    with pytest.raises(cpu.InvalidValue) as e:
        image.load_image(proc, '01 100')

    assert e.value.value == 0x100


@pytest.mark.parametrize('text,token', [
    ('01 zz 02', 'zz'),
    ('0x10', '0x10'),
    ('51 5g', '5g'),
    ('-1', '-1'),
])
def test_bad_token(text, token):
    proc = cpu.CPU()

    with pytest.raises(image.ImageParseError) as e:
        image.load_image(proc, text)

    assert e.value.token == token
    assert proc.snapshot() == [0] * 16


def test_format_image():
    assert image.format_image([0x16, 0x85, 0x03]) == '16 85 03'
