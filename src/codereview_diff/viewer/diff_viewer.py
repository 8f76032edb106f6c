"""
Diff Viewer

Main interface that turns a GitHub pull request file into the row
models shown by the review UI.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import AppConfig, VIEW_MODES, get_config
from ..diff.filters import DisplayFilter, DisplayOptions
from ..diff.numbering import LineNumberAssigner
from ..diff.pairing import SideBySidePairer
from ..diff.parser import PatchParser, count_changes
from ..diff.renderer import (
    PlainTextRenderer,
    PlainTextRow,
    SideBySideRenderer,
    SideBySideRow,
    UnifiedRenderer,
    UnifiedRow,
)
from ..models.diff_line import ChangePair, DiffLine, DiffStats
from ..models.file_change import FileChange


logger = logging.getLogger(__name__)


NO_FILE_MESSAGE = "No file selected"
NO_PATCH_MESSAGE = "No changes in this file or binary file"

STATUS_LABELS = {
    'added': '+ Added',
    'modified': '~ Modified',
    'removed': '- Removed',
    'renamed': '⟳ Renamed',
}


@dataclass
class DiffView:
    """Everything the UI needs to draw one file's diff."""
    filename: Optional[str]
    status: Optional[str]
    view_mode: str
    stats: DiffStats = field(default_factory=DiffStats)
    reported_additions: int = 0
    reported_deletions: int = 0
    lines: List[DiffLine] = field(default_factory=list)
    pairs: List[ChangePair] = field(default_factory=list)
    unified_rows: List[UnifiedRow] = field(default_factory=list)
    side_by_side_rows: List[SideBySideRow] = field(default_factory=list)
    plain_rows: List[PlainTextRow] = field(default_factory=list)
    message: Optional[str] = None
    is_binary: bool = False

    @property
    def is_empty(self) -> bool:
        return self.message is not None

    @property
    def status_label(self) -> str:
        if not self.status:
            return ''
        return STATUS_LABELS.get(self.status, self.status)


class DiffViewer:
    """
    Diff viewer pipeline.

    parse -> number -> filter -> pair/render. Numbering runs on the full
    patch before filtering so hiding hunk headers does not desynchronise
    the line numbers.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize diff viewer.

        Args:
            config: Optional configuration object, defaults to the global config
        """
        self.config = config or get_config()

        self.parser = PatchParser()
        self.numberer = LineNumberAssigner()
        self.display_filter = DisplayFilter()
        self.pairer = SideBySidePairer(
            lookahead_window=self.config.pairing.lookahead_window,
            similarity_threshold=self.config.pairing.similarity_threshold
        )
        self.unified_renderer = UnifiedRenderer()
        self.side_by_side_renderer = SideBySideRenderer()
        self.plain_renderer = PlainTextRenderer()

    def default_options(self) -> DisplayOptions:
        return DisplayOptions(
            show_full_context=self.config.display.show_full_context,
            show_hunk_headers=self.config.display.show_hunk_headers,
        )

    def render(
        self,
        file_change: Optional[FileChange],
        options: Optional[DisplayOptions] = None,
        view_mode: Optional[str] = None
    ) -> DiffView:
        """
        Render a pull request file.

        Args:
            file_change: Selected file, or None when nothing is selected
            options: Display toggles, defaults to the configured ones
            view_mode: 'side_by_side', 'unified' or 'plain'

        Returns:
            DiffView for the file; an empty view when there is nothing to diff
        """
        mode = self._resolve_view_mode(view_mode)

        if file_change is None:
            return DiffView(filename=None, status=None, view_mode=mode, message=NO_FILE_MESSAGE)

        if not file_change.has_patch:
            logger.info(f"No patch for {file_change.filename} ({file_change.status}), skipping diff")
            return DiffView(
                filename=file_change.filename,
                status=file_change.status,
                view_mode=mode,
                reported_additions=file_change.additions,
                reported_deletions=file_change.deletions,
                message=NO_PATCH_MESSAGE,
                is_binary=True,
            )

        view = self.render_patch(file_change.patch, options=options, view_mode=mode)
        view.filename = file_change.filename
        view.status = file_change.status
        view.reported_additions = file_change.additions
        view.reported_deletions = file_change.deletions

        if view.stats.additions != file_change.additions or view.stats.deletions != file_change.deletions:
            logger.debug(
                f"{file_change.filename}: patch has +{view.stats.additions}/-{view.stats.deletions}, "
                f"GitHub reports +{file_change.additions}/-{file_change.deletions}"
            )

        return view

    def render_patch(
        self,
        patch: str,
        options: Optional[DisplayOptions] = None,
        view_mode: Optional[str] = None
    ) -> DiffView:
        """
        Render a bare patch string.

        Args:
            patch: Unified-diff text for one file
            options: Display toggles, defaults to the configured ones
            view_mode: 'side_by_side', 'unified' or 'plain'

        Returns:
            DiffView without file metadata
        """
        mode = self._resolve_view_mode(view_mode)
        options = options or self.default_options()

        parsed = self.parser.parse(patch)
        numbered = self.numberer.assign(parsed)
        visible = self.display_filter.apply(numbered, options)

        view = DiffView(
            filename=None,
            status=None,
            view_mode=mode,
            stats=count_changes(parsed),
            lines=visible,
        )

        if mode == 'side_by_side':
            view.pairs = self.pairer.pair(visible)
            view.side_by_side_rows = self.side_by_side_renderer.render(view.pairs)
        elif mode == 'unified':
            view.unified_rows = self.unified_renderer.render(visible)
        else:
            view.plain_rows = self.plain_renderer.render(parsed)

        logger.debug(
            f"Rendered {mode} view: {len(parsed)} lines, {len(visible)} visible, "
            f"+{view.stats.additions}/-{view.stats.deletions}"
        )
        return view

    def _resolve_view_mode(self, view_mode: Optional[str]) -> str:
        mode = view_mode or self.config.display.view_mode
        if mode not in VIEW_MODES:
            raise ValueError(f"Invalid view mode: {mode}")
        return mode
