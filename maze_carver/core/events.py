import struct
from typing import Iterator, NamedTuple, Tuple

Cell = Tuple[int, int]

# Event Types
EVT_CARVE = 0x03

MAGIC = b"MAZELOG"
HEADER = struct.Struct(">II")
# 1 byte type + 4 unsigned shorts (current row/col, previous row/col)
CARVE = struct.Struct(">BHHHH")
CARVE_BODY = struct.Struct(">HHHH")


class WallRemoval(NamedTuple):
    """A passage carved from `previous` into the newly visited `current` cell."""
    current: Cell
    previous: Cell

    def is_adjacent(self) -> bool:
        (r1, c1), (r2, c2) = self.current, self.previous
        return abs(r1 - r2) + abs(c1 - c2) == 1


class EventWriter:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")
        self.count = 0

    def write_header(self, rows: int, cols: int):
        # Header: Magic "MAZELOG" + Rows (4b) + Cols (4b)
        self.file.write(MAGIC)
        self.file.write(HEADER.pack(rows, cols))

    def log_carve(self, event: WallRemoval):
        # 'H' caps coordinates at 65535, far beyond any renderable maze
        (cr, cc), (pr, pc) = event
        self.file.write(CARVE.pack(EVT_CARVE, cr, cc, pr, pc))
        self.count += 1

    __call__ = log_carve

    def close(self):
        if self.file:
            self.file.close()
            self.file = None


class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.rows = 0
        self.cols = 0

    def read_header(self) -> Tuple[int, int]:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError(f"Invalid event log file: {self.filename}")
        data = self.file.read(HEADER.size)
        if len(data) != HEADER.size:
            raise ValueError(f"Truncated event log header: {self.filename}")
        self.rows, self.cols = HEADER.unpack(data)
        return self.rows, self.cols

    def stream_events(self) -> Iterator[WallRemoval]:
        while True:
            type_byte = self.file.read(1)
            if not type_byte:
                break

            type_code = ord(type_byte)
            if type_code != EVT_CARVE:
                raise ValueError(f"Unknown event type 0x{type_code:02x} in {self.filename}")

            data = self.file.read(CARVE_BODY.size)
            if len(data) != CARVE_BODY.size:
                raise ValueError(f"Truncated carve record in {self.filename}")
            cr, cc, pr, pc = CARVE_BODY.unpack(data)
            yield WallRemoval((cr, cc), (pr, pc))

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
