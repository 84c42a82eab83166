"""FastAPI app: load a dependency document and serve conflict queries for the frontend."""

from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from depviz import DependencySession, DepvizError, NoMatchError

app = FastAPI(
    title="depviz API",
    description="Dependency tree version-conflict analysis backend",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One document per app instance; loading replaces it wholesale.
app.state.session = DependencySession()


def get_session(request: Request) -> DependencySession:
    return request.app.state.session


def loaded_session(session: DependencySession = Depends(get_session)) -> DependencySession:
    """Like get_session, but answers 409 until a document has been loaded."""
    if not session.is_loaded:
        raise HTTPException(status_code=409, detail="No document loaded")
    return session


@app.post("/api/document")
def post_document(
    document: Any = Body(...), session: DependencySession = Depends(get_session)
) -> dict:
    """Load a dependency document (JSON body); the previous one is kept if it is invalid."""
    try:
        session.load(document)
    except DepvizError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return session.stats().to_dict()


@app.get("/api/tree")
def get_tree(session: DependencySession = Depends(loaded_session)) -> JSONResponse:
    """Return the loaded dependency tree."""
    try:
        return JSONResponse(session.root.to_dict())
    except RecursionError as e:
        raise HTTPException(
            status_code=422, detail="Dependency tree is nested too deeply to serialize"
        ) from e


@app.get("/api/stats")
def get_stats(session: DependencySession = Depends(get_session)) -> dict:
    """Package, occurrence and conflict counts."""
    return session.stats().to_dict()


@app.get("/api/search")
def get_search(
    term: str = Query(..., min_length=1), session: DependencySession = Depends(loaded_session)
) -> dict:
    """Case-insensitive substring search over package names."""
    try:
        matches = session.search(term)
    except NoMatchError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return {"term": term, "matches": matches}


@app.get("/api/conflicts")
def get_conflicts(
    order: str = Query("name", pattern="^(name|count|duplicates)$"),
    session: DependencySession = Depends(loaded_session),
) -> dict:
    """Conflicted packages sorted by name or by number of versions."""
    entries = session.sort_conflicted_packages(order)
    return {"order": order, "conflicts": [e.to_dict() for e in entries]}


@app.get("/api/conflicts/{package_name}")
def get_conflict_detail(
    package_name: str, session: DependencySession = Depends(loaded_session)
) -> dict:
    """Occurrence paths of a package grouped by version, highest first."""
    return session.list_conflicts(package_name).to_dict()


@app.get("/api/packages/{package_name}/filter")
def get_version_filter(
    package_name: str,
    version: str = Query(...),
    session: DependencySession = Depends(loaded_session),
) -> dict:
    """Split the occurrences of a package into those at ``version`` and the rest."""
    return session.filter_by_version(package_name, version).to_dict()
