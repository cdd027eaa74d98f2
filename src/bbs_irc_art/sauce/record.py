"""SAUCE record data structure."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class DataType(IntEnum):
    """SAUCE data types."""
    NONE = 0
    CHARACTER = 1
    BITMAP = 2
    VECTOR = 3
    AUDIO = 4
    BINARYTEXT = 5
    XBIN = 6
    ARCHIVE = 7
    EXECUTABLE = 8


class FileType(IntEnum):
    """SAUCE file types for CHARACTER data type."""
    ASCII = 0
    ANSI = 1
    ANSIMATION = 2
    RIP = 3
    PCBOARD = 4
    AVATAR = 5
    HTML = 6
    SOURCE = 7
    TUNDRA = 8


@dataclass
class SauceRecord:
    """
    SAUCE (Standard Architecture for Universal Comment Extensions) record.

    Trailing metadata appended to BBS art files. For conversion only two
    fields matter: ``tinfo1`` (canvas width of character art) and
    ``file_size`` (length of the art before the metadata).
    See: https://www.acid.org/info/sauce/sauce.htm
    """
    version: str = "00"
    title: str = ""
    author: str = ""
    group: str = ""
    date: datetime | None = None
    file_size: int = 0
    data_type: DataType = DataType.CHARACTER
    file_type: FileType = FileType.ANSI
    tinfo1: int = 0  # Width for character data
    tinfo2: int = 0  # Height for character data
    tinfo3: int = 0
    tinfo4: int = 0
    comments: list[str] = field(default_factory=list)
    tflags: int = 0
    tinfos: str = ""

    @property
    def width(self) -> int | None:
        """Canvas width, if the record declares one."""
        return self.tinfo1 or None

    @property
    def height(self) -> int:
        return self.tinfo2

    @property
    def data_size(self) -> int | None:
        """Byte length of the art content, if the record declares one."""
        return self.file_size or None
