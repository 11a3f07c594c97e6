from typing import Self

import numpy as np


def as_byte_array(data) -> np.ndarray:
    """Return the raw bytes of data as a flat uint8 array, without copying when possible."""
    if isinstance(data, str):
        raise TypeError("Cannot dump str, encode it to bytes first")
    if not isinstance(data, np.ndarray):
        data = np.asarray(memoryview(data))
    # copies only strided buffers
    return np.ascontiguousarray(data).reshape(-1).view(np.uint8)


class ByteView:
    """Read-only byte view that keeps track of its offset relative to the original buffer on which it is based.
    Needed because hexdump lines show absolute offsets even when chunks are taken from either end."""

    def __init__(self, data, _abspos: int = 0) -> None:
        self._arr = as_byte_array(data)
        self._abspos = _abspos  # offset of self._arr in the original buffer

    def __getitem__(self, key) -> Self:
        if isinstance(key, slice) and key.step in (None, 1):
            newpos = self._abspos + key.indices(len(self._arr))[0]
            return self.__class__(self._arr[key], newpos)
        else:
            raise KeyError("Only contiguous slices allowed")

    def __len__(self) -> int:
        return len(self._arr)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(abspos={self._abspos}, len={len(self)})"

    def split_at_absolute(self, abs_pos: int) -> tuple[Self, Self]:
        rel_pos = abs_pos - self._abspos
        assert 0 <= rel_pos <= len(self)
        return (self.__class__(self._arr[:rel_pos], self._abspos),
                self.__class__(self._arr[rel_pos:], self._abspos + rel_pos))

    @property
    def data(self) -> np.ndarray:
        return self._arr

    @property
    def abspos(self) -> int:
        return self._abspos

    @property
    def endpos(self) -> int:
        """Absolute position one past the last byte"""
        return self._abspos + len(self._arr)
