import logging
from threading import Event
from typing import Optional

from safewalk.core.common.enums import TraversalMode
from safewalk.features.matching.domain.models import DirectorySearchOptions, FileSearchOptions
from ..domain.models import RootLike, ScanSummary, WalkError
from .api import SafeTraversal

logger = logging.getLogger(__name__)

class DirectoryScanner:
    """
    Eager counterpart to the lazy walks: drains them into a ScanSummary.
    """

    def __init__(self, traversal: SafeTraversal = None):
        self.traversal = traversal or SafeTraversal()

    def scan(
        self,
        root: RootLike,
        mode: TraversalMode = TraversalMode.FULL_SUBTREE,
        file_options: Optional[FileSearchOptions] = None,
        directory_options: Optional[DirectorySearchOptions] = None,
        cancel_event: Optional[Event] = None,
    ) -> ScanSummary:
        """
        Counts matching files and directories under `root`.
        Listing failures end up in `summary.errors`, one message per
        directory per walk; they never abort the scan.
        """
        summary = ScanSummary()

        def collect(error: WalkError):
            summary.errors.append(f"{error.path}: {error.message}")

        # Validation errors propagate; the walks themselves can't raise
        files = self.traversal.traverse_files(
            root, mode, file_options, on_error=collect, cancel_event=cancel_event
        )
        directories = self.traversal.traverse_directories(
            root, mode, directory_options, on_error=collect, cancel_event=cancel_event
        )

        logger.info(f"Starting scan of: {root}")

        for _ in files:
            summary.files_found += 1
        for _ in directories:
            summary.directories_found += 1

        logger.info(
            f"Scan complete. Files: {summary.files_found}, "
            f"Directories: {summary.directories_found}, Errors: {len(summary.errors)}"
        )
        return summary
