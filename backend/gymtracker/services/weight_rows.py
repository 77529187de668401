"""Conversion between the flat set list of a performance and its weight rows.

The flat list (``SetEntry`` sorted by ``order``) is what gets stored. The rows are
what a user edits: consecutive sets at the same weight share a row, and going back
to an earlier weight opens a new row rather than extending the old one::

    20x10 (0), 20x10 (1), 22x7 (2), 20x8 (3)
    -> [20: 10, 10] [22: 7] [20: 8]

Row edits work on positions, so two neighbouring rows can end up with the same
weight. They stay separate until the rows are rebuilt from sets again, at which
point they merge.

Row indices are not range-checked here; callers validate them first.
"""
from __future__ import annotations
from typing import Iterable, Sequence

from gymtracker.domain import SetEntry, WeightRow
from gymtracker.errors import ValidationFailedError

Rows = tuple[WeightRow, ...]

NO_QUALIFYING_SETS = "Add at least one set with reps"


def sets_to_rows(sets: Iterable[SetEntry]) -> Rows:
    rows: list[WeightRow] = []
    weight = start = None
    reps: list[int] = []

    for s in sorted(sets, key=lambda s: s.order):
        if reps and s.weight == weight:
            reps.append(s.reps)
            continue
        if reps:
            rows.append(WeightRow(weight, tuple(reps), start))
        weight, start, reps = s.weight, s.order, [s.reps]

    if reps:
        rows.append(WeightRow(weight, tuple(reps), start))
    return tuple(rows)


def rows_to_sets(rows: Iterable[WeightRow]) -> tuple[SetEntry, ...]:
    """Flatten rows back into sets; ``order`` is renumbered from 0, ``start_order`` ignored."""
    sets: list[SetEntry] = []
    for row in rows:
        for reps in row.reps:
            sets.append(SetEntry(weight=row.weight, reps=reps, order=len(sets)))
    return tuple(sets)


def new_performance_rows() -> Rows:
    return (WeightRow(weight=0.0, reps=(), start_order=0),)


# ROW EDITS

def append_row(rows: Sequence[WeightRow]) -> Rows:
    """Add an empty row at the end, carrying over the last row's weight."""
    if not rows:
        return (WeightRow(weight=0.0, reps=(), start_order=0),)
    last = rows[-1]
    new = WeightRow(weight=last.weight, reps=(), start_order=last.start_order + len(last.reps))
    return (*rows, new)


def append_rep(rows: Sequence[WeightRow], row_index: int) -> Rows:
    return _replace_row(rows, row_index, lambda row: (*row.reps, 0))


def set_weight(rows: Sequence[WeightRow], row_index: int, weight: float) -> Rows:
    """Change one row's weight. Neighbours with the same weight are not merged."""
    row = rows[row_index]
    return _with_row(rows, row_index, WeightRow(weight, row.reps, row.start_order))


def set_rep(rows: Sequence[WeightRow], row_index: int, rep_index: int, reps: int) -> Rows:
    def update(row: WeightRow) -> tuple[int, ...]:
        if not 0 <= rep_index < len(row.reps):
            return row.reps
        values = list(row.reps)
        values[rep_index] = reps
        return tuple(values)

    return _replace_row(rows, row_index, update)


def delete_row(rows: Sequence[WeightRow], row_index: int) -> Rows:
    return tuple(row for i, row in enumerate(rows) if i != row_index)


def delete_rep(rows: Sequence[WeightRow], row_index: int, rep_index: int) -> Rows:
    """Drop one rep. A row left without reps is kept."""
    return _replace_row(
        rows, row_index, lambda row: tuple(r for i, r in enumerate(row.reps) if i != rep_index)
    )


# SAVE POLICY

def prepare_for_save(sets: Iterable[SetEntry]) -> tuple[SetEntry, ...]:
    """Drop zero-rep placeholders and renumber what is left from 0.

    Raises ValidationFailedError when no set has reps.
    """
    kept = [s for s in sets if s.reps > 0]
    if not kept:
        raise ValidationFailedError(NO_QUALIFYING_SETS)
    return tuple(SetEntry(weight=s.weight, reps=s.reps, order=i) for i, s in enumerate(kept))


def _with_row(rows: Sequence[WeightRow], row_index: int, row: WeightRow) -> Rows:
    out = list(rows)
    out[row_index] = row
    return tuple(out)


def _replace_row(rows, row_index, new_reps) -> Rows:
    row = rows[row_index]
    return _with_row(rows, row_index, WeightRow(row.weight, new_reps(row), row.start_order))
