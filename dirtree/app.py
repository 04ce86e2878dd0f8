import os

from fastapi import FastAPI, HTTPException, Query

from .config import TraversalConfig
from .entries import IdentityLookupError
from .report import render_report

app = FastAPI(title="dirtree")


@app.get("/dirtree")
def dirtree_endpoint(
    path: list[str] = Query(default=["."]),
    tree: bool = True,
    summary: bool = False,
    verbose: bool = False,
    gitignore: bool = False,
) -> str:
    """Render the same report the command line prints, as one string."""
    config = TraversalConfig(
        tree=tree or verbose, summary=summary, verbose=verbose, gitignore=gitignore
    )
    lines: list[str] = []

    def emit(line: str) -> None:
        # JSON cannot carry the surrogates of undecodable file names
        lines.append(os.fsencode(line).decode("utf-8", "replace"))

    try:
        render_report(path, config, emit)
    except IdentityLookupError as exc:
        raise HTTPException(status_code=500, detail=f"unknown id {exc.args[0]}")
    except MemoryError:
        raise HTTPException(status_code=500, detail="Out of memory.")
    return "\n".join(lines)
