"""Editing session for one performance.

An editor holds the weight rows the user is working on together with the flat set
list derived from them. Every row edit rebuilds the set list straight away; only the
set list is ever written to storage.

Status flow::

    LOADING -> READY -> SAVING -> SAVED
                 ^         |
                 +- error -+

A failed load ends in LOAD_FAILED. Failed saves/deletes go back to READY with
``error`` set and rows/sets untouched, so the user can retry.
"""
from __future__ import annotations
import enum
import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Optional

from gymtracker.domain import SetEntry, WeightRow
from gymtracker.errors import EditorStateError, GymTrackerError, NotFoundError, ValidationFailedError
from gymtracker.repositories.store import PerformanceStore
from gymtracker.services import weight_rows as wr

log = logging.getLogger(__name__)


class EditorStatus(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"
    SAVED = "saved"
    LOAD_FAILED = "load_failed"


@dataclass(frozen=True, slots=True)
class EditorState:
    exercise_id: int
    exercise_name: str = ""
    performance_id: Optional[int] = None
    date: Optional[datetime] = None
    notes: str = ""
    rows: tuple[WeightRow, ...] = ()
    sets: tuple[SetEntry, ...] = ()
    status: EditorStatus = EditorStatus.LOADING
    error: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.performance_id is None


class PerformanceEditor:
    def __init__(self, exercise_id: int, performance_id: Optional[int] = None):
        self._lock = threading.Lock()
        self._state = EditorState(exercise_id=exercise_id, performance_id=performance_id)

    @property
    def state(self) -> EditorState:
        return self._state

    @classmethod
    def open(cls, store: PerformanceStore, exercise_id: int,
             performance_id: Optional[int] = None) -> "PerformanceEditor":
        editor = cls(exercise_id, performance_id)
        editor.load(store)
        return editor

    # LOADING

    def load(self, store: PerformanceStore) -> EditorState:
        with self._lock:
            s = self._state
            try:
                exercise = store.get_exercise(s.exercise_id)
                if exercise is None:
                    return self._fail_load("Exercise not found")
                s = replace(s, exercise_name=exercise.name)

                if s.performance_id is None:
                    rows = wr.new_performance_rows()
                    self._state = replace(s, rows=rows, sets=wr.rows_to_sets(rows),
                                          status=EditorStatus.READY, error=None)
                    return self._state

                perf = store.get_performance(s.performance_id)
                if perf is None:
                    self._state = s
                    return self._fail_load("Performance not found")
            except GymTrackerError as e:
                return self._fail_load(f"Failed to load data: {e}")

            self._state = replace(
                s,
                date=perf.date,
                notes=perf.notes,
                sets=tuple(perf.sets),
                rows=wr.sets_to_rows(perf.sets),
                status=EditorStatus.READY,
                error=None,
            )
            log.info("editor ready exercise=%s performance=%s rows=%d",
                     s.exercise_id, s.performance_id, len(self._state.rows))
            return self._state

    def _fail_load(self, message: str) -> EditorState:
        log.warning("editor load failed exercise=%s performance=%s: %s",
                    self._state.exercise_id, self._state.performance_id, message)
        self._state = replace(self._state, status=EditorStatus.LOAD_FAILED, error=message)
        return self._state

    # ROW EDITS

    def add_row(self) -> EditorState:
        return self._edit_rows(wr.append_row)

    def add_rep(self, row_index: int) -> EditorState:
        return self._edit_rows(lambda rows: wr.append_rep(rows, row_index), row_index)

    def update_weight(self, row_index: int, weight: float) -> EditorState:
        return self._edit_rows(lambda rows: wr.set_weight(rows, row_index, weight), row_index)

    def update_rep(self, row_index: int, rep_index: int, reps: int) -> EditorState:
        return self._edit_rows(lambda rows: wr.set_rep(rows, row_index, rep_index, reps),
                               row_index, rep_index)

    def delete_row(self, row_index: int) -> EditorState:
        return self._edit_rows(lambda rows: wr.delete_row(rows, row_index), row_index)

    def delete_rep(self, row_index: int, rep_index: int) -> EditorState:
        return self._edit_rows(lambda rows: wr.delete_rep(rows, row_index, rep_index),
                               row_index, rep_index)

    def update_notes(self, notes: str) -> EditorState:
        with self._lock:
            self._require(EditorStatus.READY)
            self._state = replace(self._state, notes=notes)
            return self._state

    def _edit_rows(self, edit: Callable[[tuple[WeightRow, ...]], tuple[WeightRow, ...]],
                   row_index: Optional[int] = None, rep_index: Optional[int] = None) -> EditorState:
        # indices are checked against the rows the edit will actually see
        with self._lock:
            self._require(EditorStatus.READY)
            rows = self._state.rows
            if row_index is not None:
                if not 0 <= row_index < len(rows):
                    raise NotFoundError("Row not found")
                if rep_index is not None and not 0 <= rep_index < len(rows[row_index].reps):
                    raise NotFoundError("Rep not found")
            rows = edit(rows)
            self._state = replace(self._state, rows=rows, sets=wr.rows_to_sets(rows))
            return self._state

    # PERSISTENCE

    def save(self, store: PerformanceStore) -> EditorState:
        with self._lock:
            self._require(EditorStatus.READY)
            try:
                sets = wr.prepare_for_save(self._state.sets)
            except ValidationFailedError as e:
                self._state = replace(self._state, error=str(e))
                return self._state
            snapshot = self._state
            self._state = replace(snapshot, status=EditorStatus.SAVING)

        try:
            if snapshot.is_new:
                perf = store.insert_performance(snapshot.exercise_id, date=snapshot.date,
                                                sets=sets, notes=snapshot.notes)
            else:
                perf = store.update_performance(snapshot.performance_id, exercise_id=snapshot.exercise_id,
                                                date=snapshot.date, sets=sets, notes=snapshot.notes)
        except GymTrackerError as e:
            return self._back_to_ready(f"Failed to save: {e}")

        with self._lock:
            self._state = replace(self._state, performance_id=perf.id, date=perf.date,
                                  status=EditorStatus.SAVED, error=None)
            log.info("performance %s saved with %d sets", perf.id, len(sets))
            return self._state

    def delete(self, store: PerformanceStore) -> EditorState:
        with self._lock:
            self._require(EditorStatus.READY)
            snapshot = self._state
            if snapshot.is_new:
                # never stored; nothing to remove
                self._state = replace(snapshot, status=EditorStatus.SAVED, error=None)
                return self._state
            self._state = replace(snapshot, status=EditorStatus.SAVING)

        try:
            store.delete_performance(snapshot.performance_id)
        except GymTrackerError as e:
            return self._back_to_ready(f"Failed to delete: {e}")

        with self._lock:
            self._state = replace(self._state, status=EditorStatus.SAVED, error=None)
            log.info("performance %s deleted", snapshot.performance_id)
            return self._state

    def clear_error(self) -> EditorState:
        with self._lock:
            self._state = replace(self._state, error=None)
            return self._state

    def _back_to_ready(self, message: str) -> EditorState:
        with self._lock:
            log.warning("editor exercise=%s performance=%s: %s",
                        self._state.exercise_id, self._state.performance_id, message)
            self._state = replace(self._state, status=EditorStatus.READY, error=message)
            return self._state

    def _require(self, status: EditorStatus) -> None:
        if self._state.status is not status:
            raise EditorStateError(f"editor is {self._state.status.value}")
