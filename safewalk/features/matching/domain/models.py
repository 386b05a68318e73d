from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Optional, Union

from safewalk.core.common.enums import CommonSize, DateField, EntryAttributes, SizeUnit

DateLike = Union[date, datetime]

@dataclass(frozen=True)
class NameOption:
    """
    Exact name match. Files compare their stem unless `include_extension`
    is set; directories always compare the full name.
    """
    name: str
    case_sensitive: bool = False
    include_extension: bool = False

@dataclass(frozen=True)
class ExtensionOption:
    """Accepts 'txt', '.txt' or '*.txt' alike."""
    extension: str

@dataclass(frozen=True)
class SizeOption:
    """
    'Roughly `quantity` units': matches within one unit either side.
    """
    quantity: float
    unit: SizeUnit = SizeUnit.BYTES

@dataclass(frozen=True)
class SizeRangeOption:
    """
    Sizes above `lower` and up to `upper` units. A range that collapses
    after the lower bound is bumped matches nothing.
    """
    lower: float
    upper: float
    unit: SizeUnit = SizeUnit.BYTES

@dataclass(frozen=True)
class DateOption:
    date: DateLike
    field: DateField = DateField.LAST_MODIFICATION

@dataclass(frozen=True)
class DateRangeOption:
    lower: DateLike
    upper: DateLike
    field: DateField = DateField.LAST_MODIFICATION

@dataclass(frozen=True)
class PatternOption:
    """Regular expression searched in the stem (or full name with `include_extension`)."""
    pattern: str
    include_extension: bool = False

@dataclass(frozen=True)
class AttributesOption:
    """Every flag in `attributes` must be set on the entry; extra flags are fine."""
    attributes: EntryAttributes

# Single-criterion filters accepted anywhere a bundle is
Criterion = Union[
    NameOption, ExtensionOption, SizeOption, SizeRangeOption, DateOption,
    DateRangeOption, PatternOption, AttributesOption, EntryAttributes, CommonSize,
]

@dataclass(frozen=True)
class FileSearchOptions:
    """
    Composite file filter: every field that is set must match.
    A bundle with nothing set matches no file at all.
    Field order is the evaluation order.
    """
    name: Optional[NameOption] = None
    extension: Optional[str] = None
    attributes: Optional[EntryAttributes] = None
    common_size: Optional[CommonSize] = None
    size: Optional[SizeOption] = None
    size_range: Optional[SizeRangeOption] = None
    date: Optional[DateOption] = None
    date_range: Optional[DateRangeOption] = None
    pattern: Optional[PatternOption] = None

    @property
    def is_empty(self) -> bool:
        return _is_empty(self)

@dataclass(frozen=True)
class DirectorySearchOptions:
    """
    Composite directory filter. Same rules as FileSearchOptions; when any
    field is set but `attributes` is not, DIRECTORY is required implicitly.
    """
    name: Optional[NameOption] = None
    attributes: Optional[EntryAttributes] = None
    date: Optional[DateOption] = None
    date_range: Optional[DateRangeOption] = None
    pattern: Optional[PatternOption] = None

    @property
    def is_empty(self) -> bool:
        return _is_empty(self)

def _is_empty(options) -> bool:
    # Empty strings and a zero flag set count as "not set"
    return not any(getattr(options, f.name) for f in fields(options))
