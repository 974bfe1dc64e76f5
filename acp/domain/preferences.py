"""Contact preference reconciliation (pure, no persistence).

A submission is the complete desired state for a user: a mapping of topic
name to the delivery modes selected for it. Reconciliation walks the bounded
grid canonical topics x ContactMode and classifies every cell as insert,
delete, or unchanged. Cells outside the grid (unknown topics or modes) are
never produced, so forged or stale form fields cannot create rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from acp.domain.enums import ContactMode

PreferenceMatrix = Mapping[str, Iterable[ContactMode | str]]


@dataclass(frozen=True, order=True)
class ContactCell:
    """One (topic, mode) pair; a stored row means the user wants it."""

    topic: str
    mode: ContactMode


@dataclass(frozen=True)
class ContactDiff:
    """Writes needed to make stored cells equal the submission."""

    to_insert: tuple[ContactCell, ...]
    to_delete: tuple[ContactCell, ...]
    unchanged: tuple[ContactCell, ...]

    @property
    def write_count(self) -> int:
        return len(self.to_insert) + len(self.to_delete)

    @property
    def is_empty(self) -> bool:
        return self.write_count == 0


def iter_grid(topics: Sequence[str]) -> Iterable[ContactCell]:
    """Yield every cell of topics x ContactMode in a stable order."""
    for topic in topics:
        for mode in ContactMode:
            yield ContactCell(topic, mode)


def selected_cells(
    topics: Sequence[str], submitted: PreferenceMatrix
) -> frozenset[ContactCell]:
    """Cells selected in submitted, restricted to the canonical grid."""
    canonical = set(topics)
    cells: set[ContactCell] = set()
    for topic, modes in submitted.items():
        if topic not in canonical:
            continue
        for raw in modes:
            mode = ContactMode.parse(raw)
            if mode is not None:
                cells.add(ContactCell(topic, mode))
    return frozenset(cells)


def compute_contact_diff(
    topics: Sequence[str],
    existing: Iterable[ContactCell],
    submitted: PreferenceMatrix,
) -> ContactDiff:
    """Classify every grid cell against stored state.

    selected and stored -> unchanged; selected only -> insert;
    stored only -> delete; neither -> nothing. Stored cells for topics
    outside the canonical set are left alone.
    """
    stored = set(existing)
    wanted = selected_cells(topics, submitted)
    to_insert: list[ContactCell] = []
    to_delete: list[ContactCell] = []
    unchanged: list[ContactCell] = []
    for cell in iter_grid(topics):
        if cell in wanted:
            (unchanged if cell in stored else to_insert).append(cell)
        elif cell in stored:
            to_delete.append(cell)
    return ContactDiff(tuple(to_insert), tuple(to_delete), tuple(unchanged))


def build_preference_matrix(
    topics: Sequence[str], existing: Iterable[ContactCell]
) -> dict[str, dict[str, bool]]:
    """Full topic -> {mode: selected} grid for rendering an edit form."""
    stored = set(existing)
    return {
        topic: {mode.value: ContactCell(topic, mode) in stored for mode in ContactMode}
        for topic in topics
    }


def matrix_to_lists(matrix: Mapping[str, Mapping[str, bool]]) -> dict[str, list[str]]:
    """Compact form of a grid (selected modes only), used in audit payloads."""
    return {
        topic: [mode for mode, selected in modes.items() if selected]
        for topic, modes in matrix.items()
    }
