"""
Per-entry predicates.

Every matcher is wrapped in `contained`: an exception while evaluating one
entry (bad pattern, odd metadata) makes that entry a non-match and nothing
else. Matchers run over thousands of entries, some of them half-broken.
"""
import functools
import logging
import re
from datetime import date, datetime

from safewalk.core.common.enums import CommonSize, DateField, EntryAttributes, SizeUnit
from safewalk.features.traversal.domain.models import Entry, FileEntry
from .size_bucket import common_size_window, range_window, size_window

logger = logging.getLogger(__name__)

_EXTENSION_TOKEN = re.compile(r"\.?\w+")

def contained(matcher):
    @functools.wraps(matcher)
    def wrapper(entry, *args, **kwargs):
        try:
            return bool(matcher(entry, *args, **kwargs))
        except Exception as e:
            logger.debug(f"{matcher.__name__} failed on {getattr(entry, 'path', entry)}: {e!r}")
            return False
    return wrapper

def _base_name(entry: Entry, include_extension: bool) -> str:
    if include_extension or not isinstance(entry, FileEntry):
        return entry.name
    return entry.stem

def _as_date(value) -> date:
    return value.date() if isinstance(value, datetime) else value

def _field_date(entry: Entry, field: DateField) -> date:
    field = DateField(field)
    if field == DateField.CREATION:
        return entry.created.date()
    if field == DateField.LAST_ACCESS:
        return entry.accessed.date()
    return entry.modified.date()

@contained
def match_by_name(entry: Entry, keyword: str, case_sensitive: bool = False, include_extension: bool = False) -> bool:
    name = _base_name(entry, include_extension)
    if case_sensitive:
        return name == keyword
    return name.casefold() == keyword.casefold()

@contained
def match_by_extension(entry: Entry, extension: str) -> bool:
    if not isinstance(entry, FileEntry):
        return False
    token = _EXTENSION_TOKEN.search(extension)
    if token is None:
        return False
    wanted = token.group(0)
    if not wanted.startswith("."):
        wanted = "." + wanted
    return entry.extension.casefold() == wanted.casefold()

@contained
def match_by_size(entry: Entry, quantity: float, unit: SizeUnit) -> bool:
    if not isinstance(entry, FileEntry):
        return False
    window = size_window(quantity, unit)
    return window is not None and window.contains(entry.size)

@contained
def match_by_size_range(entry: Entry, lower: float, upper: float, unit: SizeUnit) -> bool:
    if not isinstance(entry, FileEntry):
        return False
    window = range_window(lower, upper, unit)
    return window is not None and window.contains(entry.size)

@contained
def match_by_common_size(entry: Entry, common_size: CommonSize) -> bool:
    if not isinstance(entry, FileEntry):
        return False
    return common_size_window(common_size).contains(entry.size)

@contained
def match_by_date(entry: Entry, when, field: DateField) -> bool:
    return _field_date(entry, field) == _as_date(when)

@contained
def match_by_date_range(entry: Entry, lower, upper, field: DateField) -> bool:
    return _as_date(lower) <= _field_date(entry, field) <= _as_date(upper)

@contained
def match_by_pattern(entry: Entry, pattern: str, include_extension: bool = False) -> bool:
    # re keeps its own cache of compiled patterns
    return re.search(pattern, _base_name(entry, include_extension)) is not None

@contained
def match_by_attributes(entry: Entry, attributes: EntryAttributes) -> bool:
    wanted = EntryAttributes(attributes)
    return entry.attributes & wanted == wanted
