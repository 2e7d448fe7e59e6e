from pathlib import Path

import scram.runtime.cpu as cpu
import scram.sasm.image as image


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def make_cpu(memory_image: str) -> cpu.CPU:
    proc = cpu.CPU()
    image.load_image(proc, memory_image)
    return proc
