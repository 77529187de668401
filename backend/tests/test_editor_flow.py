from fastapi.testclient import TestClient
from gymtracker.main import app
import uuid

client = TestClient(app)

def make_exercise():
    r = client.post("/exercises", json={"name": f"Bench {uuid.uuid4().hex[:8]}"})
    assert r.status_code == 201
    return r.json()["id"]

def open_editor(exercise_id, performance_id=None):
    r = client.post("/editors", json={"exercise_id": exercise_id, "performance_id": performance_id})
    assert r.status_code == 201
    return r.json()

def test_log_new_performance_then_reopen():
    ex_id = make_exercise()
    ed = open_editor(ex_id)
    eid = ed["editor_id"]
    assert ed["status"] == "ready"
    assert ed["rows"] == [{"weight": 0.0, "reps": [], "start_order": 0}]

    client.patch(f"/editors/{eid}/rows/0", json={"weight": 20})
    for i, reps in enumerate([10, 10]):
        client.post(f"/editors/{eid}/rows/0/reps")
        client.patch(f"/editors/{eid}/rows/0/reps/{i}", json={"reps": reps})
    client.post(f"/editors/{eid}/rows")
    client.patch(f"/editors/{eid}/rows/1", json={"weight": 22})
    client.post(f"/editors/{eid}/rows/1/reps")
    client.patch(f"/editors/{eid}/rows/1/reps/0", json={"reps": 7})
    client.post(f"/editors/{eid}/rows")
    client.patch(f"/editors/{eid}/rows/2", json={"weight": 20})
    client.post(f"/editors/{eid}/rows/2/reps")
    client.patch(f"/editors/{eid}/rows/2/reps/0", json={"reps": 8})
    r = client.put(f"/editors/{eid}/notes", json={"notes": "easy"})
    assert [s["order"] for s in r.json()["sets"]] == [0, 1, 2, 3]

    r = client.post(f"/editors/{eid}/save")
    assert r.status_code == 200
    saved = r.json()
    assert saved["status"] == "saved"
    pid = saved["performance_id"]
    assert client.delete(f"/editors/{eid}").status_code == 204

    perf = client.get(f"/performances/{pid}").json()
    assert perf["notes"] == "easy"
    assert [(s["weight"], s["reps"], s["order"]) for s in perf["sets"]] == [
        (20, 10, 0), (20, 10, 1), (22, 7, 2), (20, 8, 3)]
    assert [(r["weight"], r["reps"]) for r in perf["rows"]] == [(20, [10, 10]), (22, [7]), (20, [8])]

    reopened = open_editor(ex_id, pid)
    assert [r["start_order"] for r in reopened["rows"]] == [0, 2, 3]

    latest = client.get(f"/exercises/{ex_id}/performances/latest").json()
    assert latest["id"] == pid

def test_edit_existing_and_delete():
    ex_id = make_exercise()
    ed = open_editor(ex_id)
    eid = ed["editor_id"]
    client.patch(f"/editors/{eid}/rows/0", json={"weight": 50})
    client.post(f"/editors/{eid}/rows/0/reps")
    client.patch(f"/editors/{eid}/rows/0/reps/0", json={"reps": 5})
    pid = client.post(f"/editors/{eid}/save").json()["performance_id"]

    ed = open_editor(ex_id, pid)
    eid = ed["editor_id"]
    client.post(f"/editors/{eid}/rows/0/reps")
    r = client.patch(f"/editors/{eid}/rows/0/reps/1", json={"reps": 4})
    assert r.json()["rows"][0]["reps"] == [5, 4]
    assert client.post(f"/editors/{eid}/save").json()["status"] == "saved"
    assert [s["reps"] for s in client.get(f"/performances/{pid}").json()["sets"]] == [5, 4]

    ed = open_editor(ex_id, pid)
    r = client.post(f"/editors/{ed['editor_id']}/delete")
    assert r.json()["status"] == "saved"
    assert client.get(f"/performances/{pid}").status_code == 404

def test_delete_rep_and_row():
    ed = open_editor(make_exercise())
    eid = ed["editor_id"]
    client.post(f"/editors/{eid}/rows/0/reps")
    r = client.delete(f"/editors/{eid}/rows/0/reps/0")
    assert r.json()["rows"] == [{"weight": 0.0, "reps": [], "start_order": 0}]
    r = client.delete(f"/editors/{eid}/rows/0")
    assert r.json()["rows"] == []
    assert r.json()["sets"] == []
