# ydict/store.py
"""
Reads definition blobs out of the .dat file.

Each definition is stored as:
    uint32 length L (little-endian)
    L bytes of markup

Every problem (offset past EOF, zero/oversized length, short read, missing
file) comes back as b"" so callers only have one "not available" case.
"""

import os
import struct

MAX_DEF_SIZE = 4 * 1024 * 1024  # 4 MiB sanity limit per definition
_U32 = struct.Struct("<I")


class DefinitionStore:
    """
    Stateless reader over a .dat file. Every read_blob() call opens its own
    handle, so one store can serve several threads.
    """

    def __init__(self, dat_path: str):
        self.dat_path = dat_path

    def read_blob(self, offset: int) -> bytes:
        try:
            with open(self.dat_path, "rb") as f:
                size = os.fstat(f.fileno()).st_size
                if size <= 0 or offset < 0 or offset + 4 > size:
                    return b""

                f.seek(offset)
                head = f.read(4)
                if len(head) != 4:
                    return b""
                length = _U32.unpack(head)[0]

                if length == 0 or length > MAX_DEF_SIZE:
                    return b""
                if offset + 4 + length > size:
                    return b""

                blob = f.read(length)
        except OSError:
            return b""

        if len(blob) != length:
            return b""
        return blob
