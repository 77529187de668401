from fastapi import APIRouter, Depends, status
from gymtracker.deps.editors import get_editors, get_store
from gymtracker.repositories.store import SqlPerformanceStore
from gymtracker.schemas.editor import EditorOpen, EditorRead, NotesUpdate, RepUpdate, WeightUpdate
from gymtracker.schemas.performance import SetRead, WeightRowRead
from gymtracker.services.editor_registry import EditorRegistry
from gymtracker.services.performance_editor import EditorState

router = APIRouter(prefix="/editors", tags=["editors"])

def to_read(editor_id: str, s: EditorState) -> EditorRead:
    return EditorRead(
        editor_id=editor_id,
        exercise_id=s.exercise_id,
        exercise_name=s.exercise_name,
        performance_id=s.performance_id,
        date=s.date,
        notes=s.notes,
        status=s.status.value,
        error=s.error,
        rows=[WeightRowRead.model_validate(r) for r in s.rows],
        sets=[SetRead.model_validate(x) for x in s.sets],
    )

@router.post("", response_model=EditorRead, status_code=status.HTTP_201_CREATED)
def open_editor(
    payload: EditorOpen,
    editors: EditorRegistry = Depends(get_editors),
    store: SqlPerformanceStore = Depends(get_store),
):
    editor_id, editor = editors.open(store, payload.exercise_id, payload.performance_id)
    return to_read(editor_id, editor.state)

@router.get("/{editor_id}", response_model=EditorRead)
def get_editor(editor_id: str, editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).state)

@router.delete("/{editor_id}", status_code=status.HTTP_204_NO_CONTENT)
def close_editor(editor_id: str, editors: EditorRegistry = Depends(get_editors)):
    editors.close(editor_id)

# ROWS

@router.post("/{editor_id}/rows", response_model=EditorRead)
def add_row(editor_id: str, editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).add_row())

@router.patch("/{editor_id}/rows/{row_index}", response_model=EditorRead)
def update_weight(editor_id: str, row_index: int, payload: WeightUpdate,
                  editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).update_weight(row_index, payload.weight))

@router.delete("/{editor_id}/rows/{row_index}", response_model=EditorRead)
def delete_row(editor_id: str, row_index: int, editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).delete_row(row_index))

# REPS

@router.post("/{editor_id}/rows/{row_index}/reps", response_model=EditorRead)
def add_rep(editor_id: str, row_index: int, editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).add_rep(row_index))

@router.patch("/{editor_id}/rows/{row_index}/reps/{rep_index}", response_model=EditorRead)
def update_rep(editor_id: str, row_index: int, rep_index: int, payload: RepUpdate,
               editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).update_rep(row_index, rep_index, payload.reps))

@router.delete("/{editor_id}/rows/{row_index}/reps/{rep_index}", response_model=EditorRead)
def delete_rep(editor_id: str, row_index: int, rep_index: int,
               editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).delete_rep(row_index, rep_index))

# SESSION

@router.put("/{editor_id}/notes", response_model=EditorRead)
def update_notes(editor_id: str, payload: NotesUpdate, editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).update_notes(payload.notes))

@router.post("/{editor_id}/save", response_model=EditorRead)
def save(
    editor_id: str,
    editors: EditorRegistry = Depends(get_editors),
    store: SqlPerformanceStore = Depends(get_store),
):
    return to_read(editor_id, editors.get(editor_id).save(store))

@router.post("/{editor_id}/delete", response_model=EditorRead)
def delete_performance(
    editor_id: str,
    editors: EditorRegistry = Depends(get_editors),
    store: SqlPerformanceStore = Depends(get_store),
):
    return to_read(editor_id, editors.get(editor_id).delete(store))

@router.delete("/{editor_id}/error", response_model=EditorRead)
def clear_error(editor_id: str, editors: EditorRegistry = Depends(get_editors)):
    return to_read(editor_id, editors.get(editor_id).clear_error())
