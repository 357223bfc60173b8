import logging

from fastapi import FastAPI, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from . import crud, schemas
from .config import settings
from .db import Base, engine, get_db
from .event import get_event
from .logging_config import setup_logging
from .routers import public
from .routers.public import match_or_404
from .scoring import build_leaderboard, event_totals, match_summary, alternate_shot_handicaps

setup_logging(settings)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)
logger.info("Score tables ready")

# Falla al arrancar si el fichero del evento no es valido
get_event()


app = FastAPI(title="Golf Match Tracker")

app.include_router(public.router)


# ---------------------------------------------------------------------------------

@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/public")


# ================================================================================
# ==================================== API =======================================
# ================================================================================

@app.get("/api/event")
def api_event(event: schemas.EventConfig = Depends(get_event)):
    return {
        "name": event.name,
        "course_name": event.course_name,
        "front_holes": [h.model_dump() for h in event.front_holes],
        "back_holes": [h.model_dump() for h in event.back_holes],
        "matches": [
            {
                **m.model_dump(),
                "alternate_shot": alternate_shot_handicaps(m),
            }
            for m in event.matches
        ],
    }


@app.get("/api/matches/{match_id}")
def api_match(
    match_id: int,
    db: Session = Depends(get_db),
    event: schemas.EventConfig = Depends(get_event),
):
    match = match_or_404(event, match_id)
    scores = crud.load_score_table(db, match_id)
    return match_summary(event, match, scores)


@app.put("/api/matches/{match_id}/front/{hole_number}/{player_id}", response_model=schemas.ScoreOut)
def api_front_score(
    match_id: int,
    hole_number: int,
    player_id: str,
    data: schemas.ScoreUpdate,
    db: Session = Depends(get_db),
    event: schemas.EventConfig = Depends(get_event),
):
    match = match_or_404(event, match_id)
    if not event.front_hole(hole_number):
        raise HTTPException(status_code=404, detail=f"Hole {hole_number} is not on the front nine")
    if not match.get_player(player_id):
        raise HTTPException(status_code=404, detail=f"Player {player_id} not in match {match_id}")

    s = crud.upsert_front_score(db, match_id, hole_number, player_id, data.gross)
    return schemas.ScoreOut(
        match_id=s.match_id, hole_number=s.hole_number, contestant=s.player_id, gross=s.gross
    )


@app.put("/api/matches/{match_id}/back/{hole_number}/{team}", response_model=schemas.ScoreOut)
def api_back_score(
    match_id: int,
    hole_number: int,
    team: str,
    data: schemas.ScoreUpdate,
    db: Session = Depends(get_db),
    event: schemas.EventConfig = Depends(get_event),
):
    match_or_404(event, match_id)
    if not event.back_hole(hole_number):
        raise HTTPException(status_code=404, detail=f"Hole {hole_number} is not on the back nine")
    if team not in ("A", "B"):
        raise HTTPException(status_code=404, detail=f"Team {team} not found")

    s = crud.upsert_back_score(db, match_id, hole_number, team, data.gross)
    return schemas.ScoreOut(
        match_id=s.match_id, hole_number=s.hole_number, contestant=s.team, gross=s.gross
    )


@app.get("/api/leaderboard")
def api_leaderboard(
    db: Session = Depends(get_db),
    event: schemas.EventConfig = Depends(get_event),
):
    rows = build_leaderboard(event, crud.load_score_table(db))
    return {"rows": rows, "totals": event_totals(rows)}


@app.get("/health")
def health():
    return {"status": "ok"}
