"""Property-based tests for sheet row padding and overlay merging."""

from typing import List

from hypothesis import given, strategies as st

from recruit_crm.sheet import MIN_VISIBLE_ROWS, ROWS_PER_PAGE, SheetGrid, SheetRow, merge_rows, pad_rows
from recruit_crm.sheet.rows import make_placeholder

from tests.property_based.base import PropertyTestBase, property_test
from tests.property_based.generators import overlays, sheet_rows


class StaticSheetApi:
    def __init__(self, documents):
        self.documents = documents

    def list_sheet_candidates(self, client_name, job_title):
        return [dict(doc) for doc in self.documents]


class TestPaddingProperties(PropertyTestBase):

    @property_test("candidate-sheet", 1, "Rendered rows are fetched rows followed by placeholders")
    @given(
        fetched=st.lists(sheet_rows(), max_size=25, unique_by=lambda row: row.id),
        visible=st.integers(min_value=0, max_value=60)
    )
    def test_padding_length_and_order(self, fetched: List[SheetRow], visible: int):
        target = max(MIN_VISIBLE_ROWS, visible)
        placeholders = [make_placeholder("Acme", "Engineer", i) for i in range(target)]

        rows = pad_rows(fetched, placeholders, visible)

        assert len(rows) == max(target, len(fetched))
        assert rows[:len(fetched)] == fetched
        assert all(not row.persisted for row in rows[len(fetched):])

    @property_test("candidate-sheet", 2, "Load more adds exactly one page of placeholders")
    @given(fetched_count=st.integers(min_value=0, max_value=15), pages=st.integers(min_value=0, max_value=4))
    def test_load_more_grows_by_one_page(self, fetched_count: int, pages: int):
        documents = [
            {"id": f"r{i}", "candidateName": f"C{i}", "email": f"c{i}@example.com"}
            for i in range(fetched_count)
        ]
        grid = SheetGrid(StaticSheetApi(documents), alert=lambda message: None)
        grid.select("Acme", "Engineer")

        for _ in range(pages):
            grid.load_more()

        visible = MIN_VISIBLE_ROWS + pages * ROWS_PER_PAGE
        rows = grid.rows
        assert len(rows) == max(visible, fetched_count)
        assert [row.id for row in rows[:fetched_count]] == [doc["id"] for doc in documents]
        assert len({row.id for row in rows}) == len(rows)


class TestMergeProperties(PropertyTestBase):

    @property_test("candidate-sheet", 3, "Merging applies the overlay without mutating inputs")
    @given(data=st.data())
    def test_merge_applies_overlay(self, data):
        rows = data.draw(st.lists(sheet_rows(), max_size=8, unique_by=lambda row: row.id))
        overlay = data.draw(overlays([row.id for row in rows]))
        snapshot = list(rows)

        merged = merge_rows(rows, overlay)

        assert rows == snapshot
        assert [row.id for row in merged] == [row.id for row in rows]
        for original, result in zip(rows, merged):
            edits = overlay.get(original.id, {})
            for column, value in edits.items():
                assert getattr(result, column) == value
            if not edits:
                assert result == original
