# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from solver.sudoku_tools import compute_candidates_tool, sanity_check, solve_tool

app = FastAPI(title="Sudoku Solver Tool API")


class GridModel(BaseModel):
    grid: list[list[int]]


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


class SolveRequest(BaseModel):
    puzzle: str | None = None
    grid: list[list[int]] | None = None


@app.post("/solve")
def api_solve(req: SolveRequest):
    if (req.puzzle is None) == (req.grid is None):
        raise HTTPException(status_code=422, detail={"kind": "invalid_request",
                                                     "message": "give exactly one of 'puzzle' or 'grid'"})
    result = solve_tool(req.puzzle if req.puzzle is not None else req.grid)
    if result["status"] == "invalid_input":
        raise HTTPException(status_code=422, detail=result["error"])
    return result


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    return sanity_check(payload.original, payload.current)


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)
