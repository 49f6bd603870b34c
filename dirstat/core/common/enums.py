# File: dirstat/core/common/enums.py

from enum import Enum, unique

@unique
class EntryKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"
