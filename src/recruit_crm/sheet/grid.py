"""Editable candidate sheet grid.

The grid keeps two layers: an immutable snapshot of rows as last seen on
the server (fetched rows plus a stable list of placeholders) and a keyed
overlay of pending edits. What the user sees is always
``merge_rows(pad_rows(...), overlay)``; nothing else mutates row data.

The grid talks to the server through an injected ``api`` object exposing
``list_sheet_candidates(client_name, job_title)``,
``create_sheet_candidate(data)`` and ``update_sheet_candidate(row_id, data)``,
which is what :class:`recruit_crm.client.CRMApiClient` provides.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

import structlog

from .rows import (
    COLUMNS,
    MIN_VISIBLE_ROWS,
    ROWS_PER_PAGE,
    SheetRow,
    make_placeholder,
    merge_rows,
    pad_rows,
)

logger = structlog.get_logger(__name__)

CREATE_FAILED_MESSAGE = "Failed to save candidate"
UPDATE_FAILED_MESSAGE = "Failed to update candidate"


class BlurOutcome(str, Enum):
    """What a blur did with the edited row."""
    IGNORED = "ignored"
    PENDING = "pending"
    UNCHANGED = "unchanged"
    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


class SheetGrid:
    """State machine behind the candidate sheet for one (client, job) pair."""

    def __init__(self, api: Any, alert: Callable[[str], None]):
        self.api = api
        self.alert = alert
        self.client_name = ""
        self.job_title = ""
        self.visible_count = MIN_VISIBLE_ROWS
        self.editing: Optional[Tuple[str, str]] = None
        self._fetched: Tuple[SheetRow, ...] = ()
        self._placeholders: List[SheetRow] = []
        self._overlay: Dict[str, Dict[str, str]] = {}
        self._reset_placeholders()

    @property
    def locked(self) -> bool:
        return not (self.client_name.strip() and self.job_title.strip())

    @property
    def overlay(self) -> Dict[str, Dict[str, str]]:
        return {row_id: dict(edits) for row_id, edits in self._overlay.items()}

    @property
    def rows(self) -> List[SheetRow]:
        return merge_rows(self._snapshot(), self._overlay)

    def select(self, client_name: str, job_title: str) -> None:
        """Switch to another sheet, dropping pending edits."""
        self.client_name = client_name or ""
        self.job_title = job_title or ""
        self.visible_count = MIN_VISIBLE_ROWS
        self.editing = None
        self._fetched = ()
        self._overlay = {}
        self._reset_placeholders()

        logger.debug("Sheet selected", client_name=self.client_name, job_title=self.job_title, locked=self.locked)
        if not self.locked:
            self.refresh()

    def refresh(self) -> None:
        """Reload the server snapshot; a locked grid never calls the API."""
        if self.locked:
            return

        documents = self.api.list_sheet_candidates(self.client_name, self.job_title)
        self._fetched = tuple(SheetRow.from_document(document) for document in documents)
        self._ensure_placeholders()
        logger.debug("Sheet refreshed", client_name=self.client_name, job_title=self.job_title, count=len(self._fetched))

    def load_more(self) -> None:
        if self.locked:
            return
        self.visible_count += ROWS_PER_PAGE
        self._ensure_placeholders()

    def click(self, row_id: str, column: str) -> bool:
        """Start editing a cell. Returns False when the grid is locked."""
        self._check_cell(row_id, column)
        if self.locked:
            return False
        self.editing = (row_id, column)
        return True

    def change(self, row_id: str, column: str, value: str) -> bool:
        self._check_cell(row_id, column)
        if self.locked:
            return False
        self._overlay.setdefault(row_id, {})[column] = value
        return True

    def key(self, key: str) -> Optional[BlurOutcome]:
        if key == "Enter":
            return self.blur()
        if key == "Escape" and self.editing is not None:
            row_id, _ = self.editing
            self._overlay.pop(row_id, None)
            self.editing = None
        return None

    def blur(self) -> BlurOutcome:
        """Leave the current cell and reconcile its row with the server."""
        if self.editing is None or self.locked:
            return BlurOutcome.IGNORED

        row_id, _ = self.editing
        self.editing = None

        backing = self._find(row_id)
        if backing is None:
            return BlurOutcome.IGNORED
        if backing.persisted:
            return self._update(backing)
        return self._create(backing)

    def _create(self, placeholder: SheetRow) -> BlurOutcome:
        row = merge_rows([placeholder], self._overlay)[0]
        if not row.is_complete():
            return BlurOutcome.PENDING

        payload = {key: value for key, value in row.to_payload().items() if value}
        payload["clientName"] = self.client_name
        payload["jobTitle"] = self.job_title

        try:
            saved = self.api.create_sheet_candidate(payload)
        except Exception as e:
            logger.warning("Failed to save sheet row", row_id=placeholder.id, error=str(e))
            self.alert(CREATE_FAILED_MESSAGE)
            return BlurOutcome.FAILED

        saved_row = SheetRow.from_document(saved)
        self._placeholders = [saved_row if entry.id == placeholder.id else entry for entry in self._placeholders]
        self._overlay.pop(placeholder.id, None)
        logger.info("Sheet row created", row_id=saved_row.id, placeholder_id=placeholder.id)
        return BlurOutcome.CREATED

    def _update(self, backing: SheetRow) -> BlurOutcome:
        edits = self._overlay.get(backing.id, {})
        changes = {column: value for column, value in edits.items() if getattr(backing, column) != value}
        if not changes:
            self._overlay.pop(backing.id, None)
            return BlurOutcome.UNCHANGED

        try:
            updated = self.api.update_sheet_candidate(backing.id, backing.with_values(changes).to_payload(changes))
        except Exception as e:
            logger.warning("Failed to update sheet row", row_id=backing.id, error=str(e))
            self.alert(UPDATE_FAILED_MESSAGE)
            return BlurOutcome.FAILED

        merged = backing.merged_with(updated)
        self._fetched = tuple(merged if row.id == backing.id else row for row in self._fetched)
        self._placeholders = [merged if row.id == backing.id else row for row in self._placeholders]
        self._overlay.pop(backing.id, None)
        logger.info("Sheet row updated", row_id=backing.id, fields=sorted(changes))
        return BlurOutcome.UPDATED

    def _snapshot(self) -> List[SheetRow]:
        return pad_rows(self._fetched, self._placeholders, self.visible_count)

    def _find(self, row_id: str) -> Optional[SheetRow]:
        for row in self._snapshot():
            if row.id == row_id:
                return row
        return None

    def _check_cell(self, row_id: str, column: str) -> None:
        if column not in COLUMNS:
            raise ValueError(f"Unknown column: {column}")
        if self._find(row_id) is None:
            raise KeyError(row_id)

    def _reset_placeholders(self) -> None:
        self._placeholders = []
        self._ensure_placeholders()

    def _ensure_placeholders(self) -> None:
        """Grow the placeholder list so the padded view can always be filled."""
        fetched_ids = {row.id for row in self._fetched}
        needed = max(MIN_VISIBLE_ROWS, self.visible_count) - len(self._fetched)
        available = sum(1 for row in self._placeholders if row.id not in fetched_ids)

        while available < needed:
            self._placeholders.append(
                make_placeholder(self.client_name, self.job_title, len(self._placeholders))
            )
            available += 1
