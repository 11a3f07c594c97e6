from itertools import islice

import numpy as np

DOT = ord(".")
# printable ASCII is PRINTABLE_START <= byte < PRINTABLE_END
PRINTABLE_START = 0x20
PRINTABLE_END = 0x7f


def batched(iterable, n):
    """Like itertools.batched in Python 3.12"""
    if n < 1:
        raise ValueError('n must be at least one')
    it = iter(iterable)
    while batch := tuple(islice(it, n)):
        yield batch


def is_printable(byte: int) -> bool:
    return PRINTABLE_START <= byte < PRINTABLE_END


def sanitize_byte(byte: int) -> str:
    """Sanitizes a byte for safe output.

    Any printable ASCII character is returned verbatim (including the space
    character), for all other bytes an ASCII dot is returned.
    """
    if not 0 <= byte <= 0xff:
        raise ValueError(f"Not a byte value: {byte}")
    return chr(byte) if is_printable(byte) else "."


def sanitize_bytes(data: bytes | np.ndarray) -> str:
    """Vectorized sanitize_byte for a whole chunk"""
    arr = data if isinstance(data, np.ndarray) else np.frombuffer(data, dtype=np.uint8)
    mask = (arr >= PRINTABLE_START) & (arr < PRINTABLE_END)
    return np.where(mask, arr, DOT).astype(np.uint8).tobytes().decode("ascii")
