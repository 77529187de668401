from __future__ import annotations
import logging
import threading
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional

from gymtracker.errors import NotFoundError
from gymtracker.repositories.store import PerformanceStore
from gymtracker.services.performance_editor import EditorStatus, PerformanceEditor

log = logging.getLogger(__name__)

class EditorRegistry:
    """Open editors for one application instance, keyed by a random id.

    Editors untouched for ``idle_seconds`` are dropped, and once more than ``max_open``
    are held the least recently used go first. An editor in the middle of a save is
    never dropped.
    """

    def __init__(self, idle_seconds: float = 1800, max_open: int = 256,
                 clock: Callable[[], float] = time.monotonic):
        self.idle_seconds = idle_seconds
        self.max_open = max_open
        self._clock = clock
        self._lock = threading.Lock()
        # editor id -> (editor, last touched); oldest first
        self._editors: OrderedDict[str, tuple[PerformanceEditor, float]] = OrderedDict()

    def open(self, store: PerformanceStore, exercise_id: int,
             performance_id: Optional[int] = None) -> tuple[str, PerformanceEditor]:
        editor = PerformanceEditor.open(store, exercise_id, performance_id)
        editor_id = uuid.uuid4().hex
        with self._lock:
            now = self._clock()
            self._evict(now, room=1)
            self._editors[editor_id] = (editor, now)
        return editor_id, editor

    def get(self, editor_id: str) -> PerformanceEditor:
        with self._lock:
            now = self._clock()
            self._evict(now)
            entry = self._editors.get(editor_id)
            if entry is None:
                raise NotFoundError("Editor not found")
            self._editors[editor_id] = (entry[0], now)
            self._editors.move_to_end(editor_id)
        return entry[0]

    def close(self, editor_id: str) -> None:
        with self._lock:
            if self._editors.pop(editor_id, None) is None:
                raise NotFoundError("Editor not found")

    def __len__(self) -> int:
        return len(self._editors)

    def _evict(self, now: float, room: int = 0) -> None:
        # caller holds self._lock
        overflow = len(self._editors) + room - self.max_open
        for editor_id, (editor, touched) in list(self._editors.items()):
            if editor.state.status is EditorStatus.SAVING:
                continue
            if overflow > 0:
                overflow -= 1
            elif now - touched < self.idle_seconds:
                continue
            del self._editors[editor_id]
            log.info("editor %s dropped (%s)", editor_id, editor.state.status.value)
