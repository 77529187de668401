from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient
from gymtracker.db import SessionLocal
from gymtracker.domain import SetEntry
from gymtracker.main import app
from gymtracker.repositories.performance_repo import PerformanceRepository
import uuid

client = TestClient(app)
def uniq(prefix="Row"): return f"{prefix} {uuid.uuid4().hex[:8]}"

def make_exercise(name=None, **extra):
    r = client.post("/exercises", json={"name": name or uniq(), **extra})
    assert r.status_code == 201
    return r.json()

def test_create_get_update_delete_exercise():
    ex = make_exercise("  Deadlift  ")
    assert ex["name"] == "Deadlift"
    assert ex["is_favorite"] is False

    r = client.patch(f"/exercises/{ex['id']}", json={"is_favorite": True})
    assert r.status_code == 200
    assert r.json()["is_favorite"] is True

    favs = client.get("/exercises", params={"favorites": True}).json()
    assert ex["id"] in [e["id"] for e in favs]

    assert client.delete(f"/exercises/{ex['id']}").status_code == 204
    assert client.get(f"/exercises/{ex['id']}").status_code == 404

def test_blank_names_rejected():
    assert client.post("/exercises", json={"name": "   "}).status_code == 422
    ex = make_exercise()
    assert client.patch(f"/exercises/{ex['id']}", json={"name": ""}).status_code == 422
    assert client.post("/groups", json={"name": ""}).status_code == 422

def test_search_exercises():
    token = uuid.uuid4().hex[:8]
    ex = make_exercise(f"Cable Fly {token}")
    hits = client.get("/exercises", params={"q": f"fly {token}"}).json()
    assert [h["id"] for h in hits] == [ex["id"]]

def test_groups_crud_and_membership():
    a, b = make_exercise(), make_exercise()
    r = client.post("/groups", json={"name": uniq("Pull"), "exercise_ids": [a["id"]]})
    assert r.status_code == 201
    group = r.json()
    assert [e["id"] for e in group["exercises"]] == [a["id"]]

    r = client.patch(f"/groups/{group['id']}", json={"exercise_ids": [b["id"]], "is_favorite": True})
    assert r.status_code == 200
    body = r.json()
    assert [e["id"] for e in body["exercises"]] == [b["id"]]
    assert body["is_favorite"] is True

    groups_of_b = client.get(f"/exercises/{b['id']}/groups").json()
    assert [g["id"] for g in groups_of_b] == [group["id"]]

    assert client.delete(f"/groups/{group['id']}").status_code == 204
    assert client.get(f"/groups/{group['id']}").status_code == 404
    assert client.get(f"/exercises/{b['id']}").status_code == 200

def test_group_with_unknown_exercise_404():
    r = client.post("/groups", json={"name": uniq("Core"), "exercise_ids": [999999]})
    assert r.status_code == 404

def test_history_404s():
    assert client.get("/exercises/999999/performances").status_code == 404
    ex = make_exercise()
    assert client.get(f"/exercises/{ex['id']}/performances").json() == []
    assert client.get(f"/exercises/{ex['id']}/performances/latest").status_code == 404
    assert client.get("/performances/999999").status_code == 404

def test_group_update_is_all_or_nothing():
    a = make_exercise()
    name = uniq("Arms")
    group = client.post("/groups", json={"name": name, "exercise_ids": [a["id"]]}).json()

    r = client.patch(f"/groups/{group['id']}", json={"name": "Renamed", "exercise_ids": [a["id"], 999999]})
    assert r.status_code == 404
    body = client.get(f"/groups/{group['id']}").json()
    assert body["name"] == name
    assert [e["id"] for e in body["exercises"]] == [a["id"]]

def test_search_treats_wildcards_literally():
    token = uuid.uuid4().hex[:8]
    pct = make_exercise(f"Curl 100% {token}")
    make_exercise(f"Curl 100x {token}")
    hits = client.get("/exercises", params={"q": f"100% {token}"}).json()
    assert [h["id"] for h in hits] == [pct["id"]]
    assert client.get("/exercises", params={"q": f"curl_100 {token}"}).json() == []

def test_history_window_and_delete_all():
    ex = make_exercise()
    base = datetime(2026, 4, 1, 7, 0, tzinfo=timezone.utc)
    db = SessionLocal()
    for day in (0, 1, 3):
        PerformanceRepository(db).create(ex["id"], sets=[SetEntry(50, 5, 0)], date=base + timedelta(days=day),
                                         notes=f"d{day}")
    db.close()

    url = f"/exercises/{ex['id']}/performances"
    window = client.get(url, params={"start": base.isoformat(), "end": (base + timedelta(days=2)).isoformat()})
    assert window.status_code == 200
    assert [p["notes"] for p in window.json()] == ["d0", "d1"]
    assert [p["notes"] for p in client.get(url).json()] == ["d3", "d1", "d0"]
    assert client.get(url, params={"start": base.isoformat()}).status_code == 422

    assert client.delete(url).status_code == 204
    assert client.get(url).json() == []
    assert client.delete("/exercises/999999/performances").status_code == 404
