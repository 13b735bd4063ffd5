"""
REST API for the versus backend.
Thin wrappers around the character store and the matchup engine.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from versus.config import get_settings
from versus.logging_config import configure_logging
from versus.roster import CharacterRepository, load_roster
from versus.services import CharacterNotFoundError, compare_characters


# ---------- Lifespan: logging + roster ----------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.roster = load_roster(settings.roster_path)
    yield


# ---------- FastAPI app ----------
app = FastAPI(
    title="Versus API",
    description="Character lookup and head-to-head matchup analysis",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_roster() -> CharacterRepository:
    """Character store for request handlers. Loaded lazily if the lifespan did not run."""
    roster = getattr(app.state, "roster", None)
    if roster is None:
        roster = load_roster(get_settings().roster_path)
        app.state.roster = roster
    return roster


# ---------- Request models ----------


class CompareRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    char1_id: str | None = Field(None, alias="char1Id")
    char2_id: str | None = Field(None, alias="char2Id")
    scenario: str | None = Field(None, description="Accepted for client compatibility; does not change scoring")


# ---------- Endpoints ----------
# Served under /api, the base path the web client calls.
router = APIRouter(prefix="/api")


@router.get("/health")
def health() -> dict[str, Any]:
    return {"status": "ok", "message": "Character Battle Analysis API"}


@router.get("/characters")
def list_characters(roster: CharacterRepository = Depends(get_roster)) -> list[dict[str, Any]]:
    """All characters in the store, in roster order."""
    return [c.to_dict() for c in roster.list_all()]


@router.get("/characters/{character_id}")
def get_character(character_id: str, roster: CharacterRepository = Depends(get_roster)) -> dict[str, Any]:
    character = roster.lookup(character_id)
    if character is None:
        raise HTTPException(status_code=404, detail="Character not found")
    return character.to_dict()


@router.post("/compare")
def compare_endpoint(req: CompareRequest, roster: CharacterRepository = Depends(get_roster)) -> dict[str, Any]:
    """
    Head-to-head matchup. Returns verdict, confidence, win split (character 1's share),
    key factors, per-stat breakdown, scenario verdicts and the analysis text.
    """
    char1_id = (req.char1_id or "").strip()
    char2_id = (req.char2_id or "").strip()
    if not char1_id or not char2_id:
        raise HTTPException(status_code=400, detail="Both character IDs are required")
    try:
        result = compare_characters(roster, char1_id, char2_id)
    except CharacterNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return result.to_dict()


app.include_router(router)
