"""SAUCE record parsing."""

import logging
from datetime import datetime
from pathlib import Path

from bbs_irc_art.sauce.record import DataType, FileType, SauceRecord

logger = logging.getLogger(__name__)

SAUCE_ID = b"SAUCE"
COMNT_ID = b"COMNT"
SAUCE_RECORD_SIZE = 128
COMMENT_LINE_SIZE = 64
MAX_TRAILER_SIZE = SAUCE_RECORD_SIZE + len(COMNT_ID) + 255 * COMMENT_LINE_SIZE


def parse_sauce(path: str | Path) -> SauceRecord | None:
    """Parse the SAUCE record at the end of a file, if it has one."""
    with open(path, "rb") as f:
        f.seek(0, 2)  # End of file
        file_size = f.tell()
        f.seek(max(0, file_size - MAX_TRAILER_SIZE))
        return parse_sauce_bytes(f.read())


def _text(raw: bytes) -> str:
    return raw.rstrip(b'\x00 ').decode('cp437', errors='replace')


def parse_sauce_bytes(data: bytes) -> SauceRecord | None:
    """
    Parse a SAUCE record from the tail of a file's contents.

    ``data`` must end where the file ends; it may include the art itself.
    Returns None when there is no SAUCE signature.
    """
    if len(data) < SAUCE_RECORD_SIZE:
        return None

    record = data[-SAUCE_RECORD_SIZE:]
    if record[0:5] != SAUCE_ID:
        return None

    # Parse date (YYYYMMDD format)
    date = None
    date_str = record[82:90].decode('ascii', errors='replace')
    if date_str.isdigit():
        try:
            date = datetime.strptime(date_str, "%Y%m%d")
        except ValueError:
            logger.debug("Ignoring malformed SAUCE date %r", date_str)

    data_type = DataType(record[94]) if record[94] < len(DataType) else DataType.NONE
    file_type = FileType(record[95]) if record[95] < len(FileType) else FileType.ASCII
    num_comments = record[104]

    # Comment block sits directly in front of the record
    comments: list[str] = []
    if num_comments:
        start = len(data) - SAUCE_RECORD_SIZE - len(COMNT_ID) - num_comments * COMMENT_LINE_SIZE
        if start >= 0 and data[start:start + len(COMNT_ID)] == COMNT_ID:
            offset = start + len(COMNT_ID)
            for i in range(num_comments):
                line = data[offset + i * COMMENT_LINE_SIZE:offset + (i + 1) * COMMENT_LINE_SIZE]
                comments.append(_text(line))

    return SauceRecord(
        version=record[5:7].decode('ascii', errors='replace'),
        title=_text(record[7:42]),
        author=_text(record[42:62]),
        group=_text(record[62:82]),
        date=date,
        file_size=int.from_bytes(record[90:94], 'little'),
        data_type=data_type,
        file_type=file_type,
        tinfo1=int.from_bytes(record[96:98], 'little'),
        tinfo2=int.from_bytes(record[98:100], 'little'),
        tinfo3=int.from_bytes(record[100:102], 'little'),
        tinfo4=int.from_bytes(record[102:104], 'little'),
        comments=comments,
        tflags=record[105],
        tinfos=record[106:128].rstrip(b'\x00').decode('cp437', errors='replace'),
    )
