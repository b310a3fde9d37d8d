"""Tests for the editable candidate sheet grid."""

from typing import Any, Dict, List

import pytest

from recruit_crm.client import ApiError
from recruit_crm.sheet import BlurOutcome, SheetGrid, SheetRow, merge_rows, pad_rows, placeholder_id


def sheet_document(doc_id: str, name: str, email: str, status: str = "New") -> Dict[str, Any]:
    return {
        "id": doc_id,
        "userId": "u1",
        "candidateName": name,
        "email": email,
        "status": status,
        "clientName": "Acme",
        "jobTitle": "Engineer",
        "sheetName": "Acme_Engineer",
        "phone": "",
    }


class FakeSheetApi:
    """Records calls the grid makes and answers like the HTTP API."""

    def __init__(self, documents: List[Dict[str, Any]] = None):
        self.documents = [dict(doc) for doc in documents or []]
        self.list_calls = []
        self.created = []
        self.updated = []
        self.fail_with = None

    def list_sheet_candidates(self, client_name, job_title):
        self.list_calls.append((client_name, job_title))
        return [dict(doc) for doc in self.documents]

    def create_sheet_candidate(self, data):
        self.created.append(data)
        if self.fail_with:
            raise self.fail_with
        document = {"id": f"new-{len(self.created)}", "userId": "u1", **data}
        self.documents.append(document)
        return dict(document)

    def update_sheet_candidate(self, row_id, data):
        self.updated.append((row_id, data))
        if self.fail_with:
            raise self.fail_with
        document = next(doc for doc in self.documents if doc["id"] == row_id)
        document.update(data)
        return dict(document)


@pytest.fixture
def api():
    return FakeSheetApi([
        sheet_document("r1", "Ann Smith", "ann@example.com"),
        sheet_document("r2", "Bob Jones", "bob@example.com", status="Interviewing"),
        sheet_document("r3", "Cy Young", "cy@example.com"),
    ])


@pytest.fixture
def alerts():
    return []


@pytest.fixture
def grid(api, alerts):
    sheet_grid = SheetGrid(api, alerts.append)
    sheet_grid.select("Acme", "Engineer")
    return sheet_grid


def first_placeholder(grid: SheetGrid) -> SheetRow:
    return next(row for row in grid.rows if not row.persisted)


def edit(grid: SheetGrid, row_id: str, column: str, value: str) -> BlurOutcome:
    assert grid.click(row_id, column)
    grid.change(row_id, column, value)
    return grid.blur()


class TestPadding:

    def test_three_fetched_rows_leave_seven_placeholders(self, grid, api):
        rows = grid.rows

        assert api.list_calls == [("Acme", "Engineer")]
        assert len(rows) == 10
        assert [row.id for row in rows[:3]] == ["r1", "r2", "r3"]
        assert sum(1 for row in rows if not row.persisted) == 7

    def test_load_more_adds_ten_placeholders(self, grid):
        fetched_before = grid.rows[:3]

        grid.load_more()

        rows = grid.rows
        assert len(rows) == 20
        assert sum(1 for row in rows if not row.persisted) == 17
        assert rows[:3] == fetched_before

    def test_placeholder_ids_name_the_sheet(self, grid):
        assert first_placeholder(grid).id == placeholder_id("Acme", "Engineer", 0)
        assert first_placeholder(grid).id == "empty-Acme-Engineer-row-0"

    def test_load_more_keeps_in_progress_edits(self, grid):
        placeholder = first_placeholder(grid)
        grid.change(placeholder.id, "candidate_name", "Half typed")

        grid.load_more()

        row = next(row for row in grid.rows if row.id == placeholder.id)
        assert row.candidate_name == "Half typed"

    def test_select_resets_visible_rows_and_edits(self, grid):
        grid.load_more()
        grid.change("r1", "notes", "pending")

        grid.select("Acme", "Designer")

        assert len(grid.rows) == 10
        assert grid.overlay == {}
        assert first_placeholder(grid).id == "empty-Acme-Designer-row-0"


class TestLockedGrid:

    def test_incomplete_selection_renders_placeholders_only(self, api, alerts):
        grid = SheetGrid(api, alerts.append)

        assert grid.locked
        assert len(grid.rows) == 10
        assert grid.rows[0].id == "empty-default-default-row-0"

    def test_locked_grid_makes_no_calls(self, api, alerts):
        grid = SheetGrid(api, alerts.append)
        grid.select("Acme", "")
        row_id = grid.rows[0].id

        grid.refresh()
        grid.load_more()

        assert grid.click(row_id, "candidate_name") is False
        assert grid.change(row_id, "candidate_name", "Jane") is False
        assert grid.blur() is BlurOutcome.IGNORED
        assert len(grid.rows) == 10
        assert grid.overlay == {}
        assert api.list_calls == []
        assert api.created == []


class TestPlaceholderPromotion:

    def test_name_and_email_trigger_exactly_one_create(self, grid, api):
        placeholder = first_placeholder(grid)

        assert edit(grid, placeholder.id, "candidate_name", "Jane Doe") is BlurOutcome.PENDING
        assert api.created == []

        assert edit(grid, placeholder.id, "email", "jane@example.com") is BlurOutcome.CREATED
        assert len(api.created) == 1
        assert api.created[0] == {
            "candidateName": "Jane Doe",
            "email": "jane@example.com",
            "status": "New",
            "clientName": "Acme",
            "jobTitle": "Engineer",
        }

    def test_name_only_triggers_no_call(self, grid, api):
        placeholder = first_placeholder(grid)

        outcome = edit(grid, placeholder.id, "candidate_name", "Jane Doe")

        assert outcome is BlurOutcome.PENDING
        assert api.created == []
        assert api.updated == []
        assert grid.overlay == {placeholder.id: {"candidate_name": "Jane Doe"}}

    def test_saved_row_takes_the_placeholder_position(self, grid):
        placeholder = first_placeholder(grid)
        position = [row.id for row in grid.rows].index(placeholder.id)

        grid.change(placeholder.id, "candidate_name", "Jane Doe")
        grid.change(placeholder.id, "skills", "Go")
        edit(grid, placeholder.id, "email", "jane@example.com")

        saved = grid.rows[position]
        assert saved.id == "new-1"
        assert saved.persisted
        assert saved.skills == "Go"
        assert placeholder.id not in grid.overlay
        assert len(grid.rows) == 10

    def test_refresh_after_create_does_not_duplicate_row(self, grid):
        placeholder = first_placeholder(grid)
        grid.change(placeholder.id, "candidate_name", "Jane Doe")
        edit(grid, placeholder.id, "email", "jane@example.com")

        grid.refresh()

        ids = [row.id for row in grid.rows]
        assert len(ids) == 10
        assert len(set(ids)) == 10
        assert ids[:4] == ["r1", "r2", "r3", "new-1"]

    def test_failed_create_alerts_and_keeps_edits(self, grid, api, alerts):
        placeholder = first_placeholder(grid)
        api.fail_with = ApiError(500, "Internal server error")
        grid.change(placeholder.id, "candidate_name", "Jane Doe")

        outcome = edit(grid, placeholder.id, "email", "jane@example.com")

        assert outcome is BlurOutcome.FAILED
        assert alerts == ["Failed to save candidate"]
        row = next(row for row in grid.rows if row.id == placeholder.id)
        assert row.email == "jane@example.com"
        assert not row.persisted

        api.fail_with = None
        grid.click(placeholder.id, "email")
        assert grid.blur() is BlurOutcome.CREATED
        assert len(api.created) == 2


class TestPersistedRowUpdates:

    def test_status_change_sends_only_that_field(self, grid, api):
        outcome = edit(grid, "r1", "status", "Interviewing")

        assert outcome is BlurOutcome.UPDATED
        assert api.updated == [("r1", {"status": "Interviewing"})]
        assert grid.rows[0].status == "Interviewing"
        assert grid.overlay == {}

    def test_unchanged_value_makes_no_call(self, grid, api):
        outcome = edit(grid, "r2", "status", "Interviewing")

        assert outcome is BlurOutcome.UNCHANGED
        assert api.updated == []

    def test_failed_update_alerts_and_keeps_edit(self, grid, api, alerts):
        api.fail_with = ApiError(403, "Unauthorized")

        outcome = edit(grid, "r1", "notes", "Call back Friday")

        assert outcome is BlurOutcome.FAILED
        assert alerts == ["Failed to update candidate"]
        assert grid.rows[0].notes == "Call back Friday"


class TestKeyboard:

    def test_enter_saves(self, grid, api):
        grid.click("r3", "phone")
        grid.change("r3", "phone", "555-0199")

        assert grid.key("Enter") is BlurOutcome.UPDATED
        assert api.updated == [("r3", {"phone": "555-0199"})]

    def test_escape_discards_edit(self, grid, api):
        grid.click("r3", "candidate_name")
        grid.change("r3", "candidate_name", "Typo")

        assert grid.key("Escape") is None
        assert grid.editing is None
        assert grid.rows[2].candidate_name == "Cy Young"
        assert grid.blur() is BlurOutcome.IGNORED
        assert api.updated == []


def test_unknown_cells_are_rejected(grid):
    with pytest.raises(ValueError):
        grid.click("r1", "salary_band")
    with pytest.raises(KeyError):
        grid.click("no-such-row", "email")


class TestPureHelpers:

    def test_merge_rows_does_not_modify_inputs(self):
        rows = [SheetRow(id="a", candidate_name="Ann"), SheetRow(id="b")]
        overlay = {"b": {"email": "b@example.com"}}

        merged = merge_rows(rows, overlay)

        assert merged[0] is rows[0]
        assert merged[1].email == "b@example.com"
        assert rows[1].email == ""
        assert overlay == {"b": {"email": "b@example.com"}}

    def test_pad_rows_shows_all_fetched_rows_beyond_target(self):
        fetched = [SheetRow(id=f"r{i}", persisted=True) for i in range(12)]
        placeholders = [SheetRow(id=placeholder_id("A", "B", i)) for i in range(10)]

        rows = pad_rows(fetched, placeholders, visible=10)

        assert rows == fetched

    def test_row_round_trips_api_keys(self):
        row = SheetRow.from_document({**sheet_document("r9", "Dee", "dee@example.com"), "linkedinUrl": "in/dee"})

        assert row.persisted
        assert row.linkedin_url == "in/dee"
        assert row.to_payload(["candidate_name", "linkedin_url"]) == {
            "candidateName": "Dee",
            "linkedinUrl": "in/dee",
        }
