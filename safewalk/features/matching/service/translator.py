import logging
from dataclasses import replace
from typing import Callable, List, Union

from safewalk.core.common.enums import CommonSize, EntryAttributes
from safewalk.features.traversal.domain.models import Entry
from ..data import matchers
from ..domain.models import (
    AttributesOption, Criterion, DateOption, DateRangeOption, DirectorySearchOptions,
    ExtensionOption, FileSearchOptions, NameOption, PatternOption, SizeOption, SizeRangeOption,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[Entry], bool]
SearchOptions = Union[FileSearchOptions, DirectorySearchOptions]
Filter = Union[Predicate, SearchOptions, Criterion]

# --- Criterion evaluation ---

def evaluate(criterion: Criterion, entry: Entry) -> bool:
    """
    Runs the matcher behind one criterion. Matchers look up through the
    module so they can be swapped out in tests.
    """
    if isinstance(criterion, NameOption):
        return matchers.match_by_name(entry, criterion.name, criterion.case_sensitive, criterion.include_extension)
    if isinstance(criterion, ExtensionOption):
        return matchers.match_by_extension(entry, criterion.extension)
    if isinstance(criterion, AttributesOption):
        return matchers.match_by_attributes(entry, criterion.attributes)
    if isinstance(criterion, EntryAttributes):
        return matchers.match_by_attributes(entry, criterion)
    if isinstance(criterion, CommonSize):
        return matchers.match_by_common_size(entry, criterion)
    if isinstance(criterion, SizeOption):
        return matchers.match_by_size(entry, criterion.quantity, criterion.unit)
    if isinstance(criterion, SizeRangeOption):
        return matchers.match_by_size_range(entry, criterion.lower, criterion.upper, criterion.unit)
    if isinstance(criterion, DateOption):
        return matchers.match_by_date(entry, criterion.date, criterion.field)
    if isinstance(criterion, DateRangeOption):
        return matchers.match_by_date_range(entry, criterion.lower, criterion.upper, criterion.field)
    if isinstance(criterion, PatternOption):
        return matchers.match_by_pattern(entry, criterion.pattern, criterion.include_extension)
    raise TypeError(f"Unsupported criterion: {type(criterion).__name__}")

# --- Bundles ---

def criteria_for(options: SearchOptions) -> List[Criterion]:
    """
    Lists the criteria a bundle actually sets, in evaluation order.
    """
    if isinstance(options, DirectorySearchOptions):
        return _directory_criteria(options)

    criteria = []
    if options.name is not None:
        criteria.append(options.name)
    if options.extension:
        criteria.append(ExtensionOption(options.extension))
    if options.attributes:
        criteria.append(AttributesOption(options.attributes))
    if options.common_size:
        criteria.append(CommonSize(options.common_size))
    if options.size is not None:
        criteria.append(options.size)
    if options.size_range is not None:
        criteria.append(options.size_range)
    if options.date is not None:
        criteria.append(options.date)
    if options.date_range is not None:
        criteria.append(options.date_range)
    if options.pattern is not None:
        criteria.append(options.pattern)
    return criteria

def _directory_criteria(options: DirectorySearchOptions) -> List[Criterion]:
    if options.is_empty:
        return []

    criteria = []
    if options.name is not None:
        criteria.append(options.name)
    # Directory bundles always check attributes, DIRECTORY when unspecified
    criteria.append(AttributesOption(options.attributes or EntryAttributes.DIRECTORY))
    if options.date is not None:
        criteria.append(options.date)
    if options.date_range is not None:
        criteria.append(options.date_range)
    if options.pattern is not None:
        criteria.append(options.pattern)
    return criteria

def matches(entry: Entry, options: SearchOptions) -> bool:
    """
    AND across the bundle's criteria.
    A bundle with no criteria matches nothing; it is not a wildcard.
    """
    criteria = criteria_for(options)
    if not criteria:
        return False

    for criterion in criteria:
        if not evaluate(criterion, entry):
            return False
    return True

# --- Filter -> Predicate ---

_FILE_FIELDS = {
    NameOption: "name",
    ExtensionOption: "extension",
    AttributesOption: "attributes",
    EntryAttributes: "attributes",
    CommonSize: "common_size",
    SizeOption: "size",
    SizeRangeOption: "size_range",
    DateOption: "date",
    DateRangeOption: "date_range",
    PatternOption: "pattern",
}

_DIRECTORY_FIELDS = {
    NameOption: "name",
    AttributesOption: "attributes",
    EntryAttributes: "attributes",
    DateOption: "date",
    DateRangeOption: "date_range",
    PatternOption: "pattern",
}

def to_options(criterion: Criterion, for_directories: bool = False) -> SearchOptions:
    """
    Wraps a single criterion in a bundle with exactly that field set.
    """
    table = _DIRECTORY_FIELDS if for_directories else _FILE_FIELDS
    bundle = DirectorySearchOptions() if for_directories else FileSearchOptions()

    field_name = table.get(type(criterion))
    if field_name is None:
        kind = "directories" if for_directories else "files"
        raise TypeError(f"{type(criterion).__name__} cannot filter {kind}")

    if isinstance(criterion, ExtensionOption):
        value = criterion.extension
    elif isinstance(criterion, AttributesOption):
        value = criterion.attributes
    else:
        value = criterion
    return replace(bundle, **{field_name: value})

def build_predicate(criteria: Filter, for_directories: bool = False) -> Predicate:
    """
    Turns any accepted filter into a single Predicate.

    Accepts a plain callable, a search options bundle, or one criterion
    (sugar for a bundle with that one field set). Anything else is a
    TypeError, raised here rather than during the walk.
    """
    if criteria is None:
        raise ValueError("`criteria` cannot be None")

    if isinstance(criteria, (FileSearchOptions, DirectorySearchOptions)):
        if isinstance(criteria, DirectorySearchOptions) != for_directories:
            kind = "directories" if for_directories else "files"
            raise TypeError(f"{type(criteria).__name__} cannot filter {kind}")
        options = criteria
    elif type(criteria) in _FILE_FIELDS:
        options = to_options(criteria, for_directories)
    elif callable(criteria):
        return criteria
    else:
        raise TypeError(f"Unsupported filter: {type(criteria).__name__}")

    if options.is_empty:
        logger.debug("Empty search options given; the walk will match nothing")

    def predicate(entry: Entry) -> bool:
        return matches(entry, options)

    return predicate
