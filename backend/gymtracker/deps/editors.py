# gymtracker/deps/editors.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from gymtracker.db import get_db
from gymtracker.repositories.store import SqlPerformanceStore
from gymtracker.services.editor_registry import EditorRegistry

def get_editors(request: Request) -> EditorRegistry:
    """The registry is created per app in main.py and kept on app.state."""
    return request.app.state.editors

def get_store(db: Session = Depends(get_db)) -> SqlPerformanceStore:
    return SqlPerformanceStore(db)
