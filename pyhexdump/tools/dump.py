import logging
import sys
from pathlib import Path

from pyhexdump import hexdump

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if len(sys.argv) < 2 or sys.argv[1] == "-":
        logger.info("Reading stdin")
        data = sys.stdin.buffer.read()
    else:
        path = Path(sys.argv[1])
        if not path.is_file():
            print(f"File not found: {path}")
            return 1
        logger.info(f"Reading {path}")
        data = path.read_bytes()

    hexdump(data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
