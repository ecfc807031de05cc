""" Construction of in-memory record batches, the opaque ``records`` bytes
    carried by each partition of a Produce request. Only the magic v2
    (RecordBatch) layout is produced, uncompressed, with no producer id.
"""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple


MAGIC = 2
NO_PRODUCER_ID = -1
NO_PRODUCER_EPOCH = -1
NO_SEQUENCE = -1
NO_PARTITION_LEADER_EPOCH = -1


def _crc32c_table():
    table = list()
    for index in range(256):
        crc = index
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ 0x82F63B78
            else:
                crc = crc >> 1
        table.append(crc & 0xFFFFFFFF)

    return tuple(table)

_crc32c = _crc32c_table()


def crc32c(data: bytes) -> int:
    """ Castagnoli CRC, as used for the v2 record batch checksum.
    """

    crc = 0xFFFFFFFF
    for byte in data:
        crc = _crc32c[(crc ^ byte) & 0xFF] ^ (crc >> 8)

    return crc ^ 0xFFFFFFFF


def varint(value: int) -> bytes:
    """ Zigzag-encode a signed integer as a variable length quantity.
    """

    value = (value << 1) ^ (value >> 63)
    value &= 0xFFFFFFFFFFFFFFFF

    encoded = bytearray()
    while value > 0x7F:
        encoded.append((value & 0x7F) | 0x80)
        value >>= 7
    encoded.append(value)

    return bytes(encoded)


def _sized(blob: Optional[bytes]) -> bytes:
    if blob is None:
        return varint(-1)
    return varint(len(blob)) + blob


@dataclass
class Record:
    key: Optional[bytes] = None
    value: Optional[bytes] = None

    # Header keys may repeat and header values may be null.
    headers: List[Tuple[str, Optional[bytes]]] = field(default_factory=list)


def record(value, key=None, headers=None) -> Record:
    """ Convenience constructor; str arguments are UTF-8 encoded. The
        *headers* may be a sequence of (name, value) pairs or a dict.
    """

    if isinstance(value, str):
        value = value.encode()
    if isinstance(key, str):
        key = key.encode()
    if headers is None:
        headers = list()
    elif isinstance(headers, dict):
        headers = list(headers.items())
    else:
        headers = list(headers)

    return Record(key=key, value=value, headers=headers)


def memory_records(records: Iterable[Record], base_offset: int = 0, timestamp: Optional[int] = None) -> bytes:
    """ Encode the supplied *records* as a single uncompressed record batch.
        The *timestamp*, in milliseconds, defaults to the current time and
        is applied to every record in the batch.
    """

    if timestamp is None:
        timestamp = int(time.time() * 1000)

    records = list(records)
    if not records:
        raise ValueError('a record batch must contain at least one record')

    body = bytearray()

    for offset_delta, entry in enumerate(records):
        encoded = bytearray()
        encoded += struct.pack('>b', 0)             # attributes
        encoded += varint(0)                        # timestamp delta
        encoded += varint(offset_delta)
        encoded += _sized(entry.key)
        encoded += _sized(entry.value)
        encoded += varint(len(entry.headers))

        for name, value in entry.headers:
            encoded += _sized(name.encode())
            encoded += _sized(value)

        body += varint(len(encoded))
        body += encoded

    # Everything from the attributes onward is covered by the checksum.

    checked = struct.pack('>hiqqqhii',
                          0,                        # attributes
                          len(records) - 1,         # last offset delta
                          timestamp,                # base timestamp
                          timestamp,                # max timestamp
                          NO_PRODUCER_ID,
                          NO_PRODUCER_EPOCH,
                          NO_SEQUENCE,
                          len(records))
    checked += bytes(body)

    # The batch length counts everything after the length field itself:
    # partition leader epoch, magic, crc, then the checked section.

    length = 4 + 1 + 4 + len(checked)

    header = struct.pack('>qiibI',
                         base_offset,
                         length,
                         NO_PARTITION_LEADER_EPOCH,
                         MAGIC,
                         crc32c(checked))

    return header + checked


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
