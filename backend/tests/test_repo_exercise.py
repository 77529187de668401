from datetime import datetime, timedelta, timezone
from gymtracker.db import SessionLocal
from gymtracker.domain import SetEntry
from gymtracker.errors import NotFoundError
from gymtracker.repositories.exercise_repo import ExerciseRepository
from gymtracker.repositories.group_repo import GroupRepository
from gymtracker.repositories.performance_repo import PerformanceRepository
import uuid, pytest

def uniq(prefix="Ex"): return f"{prefix} {uuid.uuid4().hex[:8]}"

def test_exercise_repo_create_get_update():
    db = SessionLocal()
    repo = ExerciseRepository(db)
    name = uniq()
    ex = repo.create(name=name)
    assert ex.id and ex.name == name and ex.is_favorite is False
    assert repo.get(ex.id).name == name
    repo.update(ex.id, is_favorite=True)
    assert repo.get(ex.id).is_favorite is True
    assert ex.id in {e.id for e in repo.list(favorites_only=True)}
    db.close()

def test_exercise_search_is_case_insensitive():
    db = SessionLocal()
    repo = ExerciseRepository(db)
    token = uuid.uuid4().hex[:8]
    ex = repo.create(name=f"Incline Press {token}")
    hits = repo.search(f"PRESS {token.upper()}")
    assert [h.id for h in hits] == [ex.id]
    db.close()

def test_missing_exercise_raises():
    db = SessionLocal()
    with pytest.raises(NotFoundError):
        ExerciseRepository(db).update(999999, name="x")
    with pytest.raises(NotFoundError):
        ExerciseRepository(db).delete(999999)
    db.close()

def test_group_membership_replaced():
    db = SessionLocal()
    exercises = ExerciseRepository(db)
    groups = GroupRepository(db)
    a, b, c = (exercises.create(name=uniq()) for _ in range(3))
    g = groups.create(name=uniq("Push"), exercise_ids=[a.id, b.id])
    assert {e.id for e in g.exercises} == {a.id, b.id}

    g = groups.set_exercises(g.id, [b.id, c.id])
    assert {e.id for e in g.exercises} == {b.id, c.id}
    assert a.id in {e.id for e in exercises.list_ungrouped()}
    assert c.id not in {e.id for e in exercises.list_ungrouped()}

    with pytest.raises(NotFoundError):
        groups.set_exercises(g.id, [999999])
    db.close()

def test_deleting_group_keeps_exercises():
    db = SessionLocal()
    exercises = ExerciseRepository(db)
    groups = GroupRepository(db)
    ex = exercises.create(name=uniq())
    g = groups.create(name=uniq("Legs"), exercise_ids=[ex.id])
    groups.delete(g.id)
    assert groups.get(g.id) is None
    assert exercises.get(ex.id) is not None
    db.close()

def test_performance_history_ordering_and_range():
    db = SessionLocal()
    ex = ExerciseRepository(db).create(name=uniq())
    perfs = PerformanceRepository(db)
    base = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
    for day in (0, 2, 1):
        perfs.create(ex.id, sets=[SetEntry(40, 5, 0)], date=base + timedelta(days=day), notes=f"d{day}")

    assert [p.notes for p in perfs.list_for_exercise(ex.id)] == ["d2", "d1", "d0"]
    assert perfs.latest_for_exercise(ex.id).notes == "d2"
    in_range = perfs.list_in_range(ex.id, base, base + timedelta(days=1))
    assert [p.notes for p in in_range] == ["d0", "d1"]

    perfs.delete_all_for_exercise(ex.id)
    assert perfs.list_for_exercise(ex.id) == []
    db.close()

def test_deleting_exercise_deletes_performances():
    db = SessionLocal()
    exercises = ExerciseRepository(db)
    ex = exercises.create(name=uniq())
    perf = PerformanceRepository(db).create(ex.id, sets=[SetEntry(30, 8, 0)])
    pid = perf.id
    exercises.delete(ex.id)
    db.expire_all()
    assert PerformanceRepository(db).get(pid) is None
    db.close()
