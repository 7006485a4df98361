# tests/test_api.py
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app
from conftest import DEAD_CELL, EULER_01, EULER_01_SOLUTION

client = TestClient(app)


def test_solve_text():
    r = client.post("/solve", json={"puzzle": EULER_01})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "solved"
    assert body["rendered"] == EULER_01_SOLUTION
    assert body["solution"][0] == [4, 8, 3, 9, 2, 1, 6, 5, 7]


def test_solve_grid_without_solution():
    grid = [[int(ch) for ch in DEAD_CELL[i:i + 9]] for i in range(0, 81, 9)]
    r = client.post("/solve", json={"grid": grid})
    assert r.status_code == 200
    assert r.json()["status"] == "no_solution"
    assert r.json()["solution"] is None


def test_solve_invalid_input_is_422():
    r = client.post("/solve", json={"puzzle": "55" + "0" * 79})
    assert r.status_code == 422
    assert r.json()["detail"]["kind"] == "rule_violation"
    r = client.post("/solve", json={})
    assert r.status_code == 422


def test_sanity_check_and_candidates():
    grid = [[int(ch) for ch in EULER_01[i:i + 9]] for i in range(0, 81, 9)]
    current = [row[:] for row in grid]
    current[0][2] = 4
    current[0][0] = 4
    r = client.post("/sanity_check", json={"original": grid, "current": current})
    body = r.json()
    assert body["ok"] is False
    assert {i["type"] for i in body["issues"]} == {"given_overwritten", "duplicate"}
    r = client.post("/compute_candidates", json={"grid": grid})
    assert r.json()["candidates"]["r1c1"] == [4, 5]
