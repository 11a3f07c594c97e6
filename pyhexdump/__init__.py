from .hexdump import Hexdump, hexdump, hexdump_iter
from .memview import ByteView
from .util import sanitize_byte, sanitize_bytes

__all__ = ["ByteView", "Hexdump", "hexdump", "hexdump_iter", "sanitize_byte", "sanitize_bytes"]
