# match_tracker/routers/public.py

from pathlib import Path

from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from match_tracker import crud
from match_tracker.db import get_db
from match_tracker.event import get_event
from match_tracker.golf_calc import to_gross
from match_tracker.scoring import build_leaderboard, event_totals, match_summary

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter()


def match_or_404(event, match_id: int):
    match = event.get_match(match_id)
    if not match:
        raise HTTPException(status_code=404, detail=f"Match {match_id} not found")
    return match


@router.get("/public", response_class=HTMLResponse)
def public_leaderboard(request: Request, db: Session = Depends(get_db), event=Depends(get_event)):
    rows = build_leaderboard(event, crud.load_score_table(db))
    return templates.TemplateResponse(
        request,
        "leaderboard.html",
        {"event": event, "rows": rows, "totals": event_totals(rows)},
    )


@router.get("/public/matches/{match_id}", response_class=HTMLResponse)
def public_match(match_id: int, request: Request, db: Session = Depends(get_db), event=Depends(get_event)):
    match = match_or_404(event, match_id)
    summary = match_summary(event, match, crud.load_score_table(db, match_id))
    return templates.TemplateResponse(
        request,
        "match.html",
        {"event": event, "match": match, "s": summary},
    )


@router.post("/public/matches/{match_id}/front")
async def public_front_save(match_id: int, request: Request, db: Session = Depends(get_db), event=Depends(get_event)):
    match = match_or_404(event, match_id)
    form = await request.form()

    # campos g_{hoyo}_{player_id}; lo que no se entiende se guarda como vacio
    for h in event.front_holes:
        for p in match.players:
            key = f"g_{h.number}_{p.id}"
            if key in form:
                crud.upsert_front_score(db, match_id, h.number, p.id, to_gross(form.get(key)))

    return RedirectResponse(f"/public/matches/{match_id}", status_code=303)


@router.post("/public/matches/{match_id}/back")
async def public_back_save(match_id: int, request: Request, db: Session = Depends(get_db), event=Depends(get_event)):
    match_or_404(event, match_id)
    form = await request.form()

    # campos g_{hoyo}_{A|B}
    for h in event.back_holes:
        for team in ("A", "B"):
            key = f"g_{h.number}_{team}"
            if key in form:
                crud.upsert_back_score(db, match_id, h.number, team, to_gross(form.get(key)))

    return RedirectResponse(f"/public/matches/{match_id}", status_code=303)
