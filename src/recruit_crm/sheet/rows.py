"""Row types and pure helpers for the candidate sheet grid."""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic.alias_generators import to_camel

MIN_VISIBLE_ROWS = 10
ROWS_PER_PAGE = 10

COLUMNS = (
    "candidate_name",
    "email",
    "status",
    "phone",
    "experience",
    "skills",
    "current_company",
    "current_salary",
    "expected_salary",
    "notice_period",
    "linkedin_url",
    "notes",
)
REQUIRED_COLUMNS = ("candidate_name", "email")

Overlay = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class SheetRow:
    """One grid row, either backed by a stored document or a placeholder."""

    id: str
    persisted: bool = False
    candidate_name: str = ""
    email: str = ""
    status: str = "New"
    phone: str = ""
    experience: str = ""
    skills: str = ""
    current_company: str = ""
    current_salary: str = ""
    expected_salary: str = ""
    notice_period: str = ""
    linkedin_url: str = ""
    notes: str = ""

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "SheetRow":
        """Build a persisted row from an API document (camelCase keys)."""
        return cls(id=document["id"], persisted=True).merged_with(document)

    def merged_with(self, document: Mapping[str, Any]) -> "SheetRow":
        """Return a copy with the columns present in ``document`` applied."""
        values = {}
        for column in COLUMNS:
            key = to_camel(column)
            if key in document and document[key] is not None:
                values[column] = str(document[key])
        return replace(self, **values)

    def with_values(self, values: Mapping[str, str]) -> "SheetRow":
        return replace(self, **{column: values[column] for column in values if column in COLUMNS})

    def is_complete(self) -> bool:
        return all(getattr(self, column).strip() for column in REQUIRED_COLUMNS)

    def to_payload(self, columns: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """Serialize the given columns (all by default) with API key names."""
        columns = COLUMNS if columns is None else columns
        return {to_camel(column): getattr(self, column) for column in columns}


def placeholder_id(client_name: str, job_title: str, index: int) -> str:
    return f"empty-{client_name or 'default'}-{job_title or 'default'}-row-{index}"


def make_placeholder(client_name: str, job_title: str, index: int) -> SheetRow:
    return SheetRow(id=placeholder_id(client_name, job_title, index))


def merge_rows(rows: Sequence[SheetRow], overlay: Overlay) -> List[SheetRow]:
    """Apply pending edits on top of a row snapshot.

    Neither argument is modified; rows without an overlay entry are
    returned as-is.
    """
    return [row.with_values(overlay[row.id]) if row.id in overlay else row for row in rows]


def pad_rows(
    fetched: Sequence[SheetRow],
    placeholders: Sequence[SheetRow],
    visible: int
) -> List[SheetRow]:
    """Fetched rows first, then placeholders up to ``max(MIN_VISIBLE_ROWS, visible)``.

    Placeholder-list entries that were promoted and later re-fetched are
    skipped so a row never renders twice.
    """
    target = max(MIN_VISIBLE_ROWS, visible)
    rows = list(fetched)
    fetched_ids = {row.id for row in fetched}

    for row in placeholders:
        if len(rows) >= target:
            break
        if row.id in fetched_ids:
            continue
        rows.append(row)
    return rows
