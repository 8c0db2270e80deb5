import logging
import struct
from typing import Iterator, NamedTuple, Tuple, Union
from rat_maze.core.grid import render_cells

logger = logging.getLogger(__name__)

MAGIC = b"RATLOG"

# Event Types
EVT_FRAME = 0x01
EVT_RESULT = 0x02

class Frame(NamedTuple):
    """A recorded snapshot of a grid's cells."""
    width: int
    height: int
    cells: bytes

    def __str__(self) -> str:
        return render_cells(self.width, self.cells)

class EventWriter:
    """
    Records every frame the solver emits. Pass an instance straight to
    Solver.solve as the listener.
    """
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")
        self.header_written = False
        self.frame_count = 0

    def write_header(self, width: int, height: int):
        # Header: Magic "RATLOG" + Width (4b) + Height (4b)
        self.file.write(MAGIC)
        self.file.write(struct.pack(">II", width, height))
        self.header_written = True

    def log_frame(self, grid):
        if not self.header_written:
            self.write_header(grid.width, grid.height)
        # 1 byte type + width*height cell bytes
        self.file.write(struct.pack(">B", EVT_FRAME))
        self.file.write(bytes(grid.cells))
        self.frame_count += 1

    def log_result(self, solved: bool):
        self.file.write(struct.pack(">BB", EVT_RESULT, 1 if solved else 0))

    def __call__(self, grid):
        self.log_frame(grid)

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
            logger.info(f"Saved {self.frame_count} frames to {self.filename}")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.width = 0
        self.height = 0

    def read_header(self) -> Tuple[int, int]:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError("Invalid event log file")
        data = self.file.read(8)
        if len(data) != 8:
            raise ValueError("Truncated event log header")
        self.width, self.height = struct.unpack(">II", data)
        return self.width, self.height

    def stream_events(self) -> Iterator[Tuple[int, Union[Frame, bool]]]:
        frame_size = self.width * self.height
        while True:
            type_byte = self.file.read(1)
            if not type_byte:
                break

            type_code = ord(type_byte)

            if type_code == EVT_FRAME:
                data = self.file.read(frame_size)
                if len(data) != frame_size:
                    raise ValueError("Truncated frame in event log")
                yield (type_code, Frame(self.width, self.height, data))

            elif type_code == EVT_RESULT:
                data = self.file.read(1)
                if len(data) != 1:
                    raise ValueError("Truncated result in event log")
                yield (type_code, data == b"\x01")

            else:
                raise ValueError(f"Unknown event type 0x{type_code:02x}")

    def close(self):
        if self.file:
            self.file.close()
            self.file = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
