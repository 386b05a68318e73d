# File: safewalk/core/common/enums.py

from enum import Enum, IntEnum, IntFlag, unique

@unique
class TraversalMode(str, Enum):
    TOP_LEVEL_ONLY = "top_level_only"
    FULL_SUBTREE = "full_subtree"

@unique
class SizeUnit(IntEnum):
    """Exponent of 1024 applied to a size quantity."""
    BYTES = 0
    KILOBYTES = 1
    MEGABYTES = 2
    GIGABYTES = 3
    TERABYTES = 4
    PETABYTES = 5

@unique
class CommonSize(str, Enum):
    """
    Explorer-like size buckets.
    The ranges behind each bucket live in size_bucket.COMMON_SIZE_RANGES.
    """
    EMPTY = "empty"
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"
    GIGANTIC = "gigantic"

@unique
class DateField(str, Enum):
    CREATION = "creation"
    LAST_MODIFICATION = "last_modification"
    LAST_ACCESS = "last_access"

class EntryAttributes(IntFlag):
    """
    Attribute flags of a filesystem entry.
    Values match the Windows FILE_ATTRIBUTE_* constants so st_file_attributes
    can be used as-is on that platform.
    """
    NONE = 0
    READ_ONLY = 0x1
    HIDDEN = 0x2
    SYSTEM = 0x4
    DIRECTORY = 0x10
    ARCHIVE = 0x20
    NORMAL = 0x80
    TEMPORARY = 0x100
    SPARSE_FILE = 0x200
    REPARSE_POINT = 0x400
    COMPRESSED = 0x800
    OFFLINE = 0x1000
    NOT_CONTENT_INDEXED = 0x2000
    ENCRYPTED = 0x4000
