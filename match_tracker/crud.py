import logging
from datetime import datetime

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from . import models
from .scoring import ScoreTable

logger = logging.getLogger(__name__)


def _upsert_gross(db: Session, model, keys: dict, gross):
    # INSERT ... ON CONFLICT DO UPDATE sobre la clave (match, hoyo, jugador|equipo)
    dialect = postgresql if db.get_bind().dialect.name == "postgresql" else sqlite
    now = datetime.utcnow()

    stmt = dialect.insert(model).values(**keys, gross=gross, updated_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=list(keys),
        set_={"gross": gross, "updated_at": now},
    )
    db.execute(stmt)
    db.commit()


#---------------------------------------------------------------------------------
# -------------------------------- Front 9 scores --------------------------------
# --------------------------------------------------------------------------------

def get_front_score(db: Session, match_id: int, hole_number: int, player_id: str):
    return (
        db.query(models.FrontScore)
        .filter(
            models.FrontScore.match_id == match_id,
            models.FrontScore.hole_number == hole_number,
            models.FrontScore.player_id == player_id,
        )
        .first()
    )


def upsert_front_score(db: Session, match_id: int, hole_number: int, player_id: str, gross):
    _upsert_gross(
        db, models.FrontScore,
        {"match_id": match_id, "hole_number": hole_number, "player_id": player_id},
        gross,
    )
    s = get_front_score(db, match_id, hole_number, player_id)

    logger.debug(f"front_scores upsert match={match_id} hole={hole_number} player={player_id} gross={gross}")
    return s


def get_front_scores(db: Session, match_id: int | None = None):
    q = db.query(models.FrontScore)
    if match_id is not None:
        q = q.filter(models.FrontScore.match_id == match_id)
    return q.order_by(models.FrontScore.match_id, models.FrontScore.hole_number).all()


#---------------------------------------------------------------------------------
# -------------------------------- Back 9 scores ---------------------------------
# --------------------------------------------------------------------------------

def get_back_score(db: Session, match_id: int, hole_number: int, team: str):
    return (
        db.query(models.BackScore)
        .filter(
            models.BackScore.match_id == match_id,
            models.BackScore.hole_number == hole_number,
            models.BackScore.team == team,
        )
        .first()
    )


def upsert_back_score(db: Session, match_id: int, hole_number: int, team: str, gross):
    _upsert_gross(
        db, models.BackScore,
        {"match_id": match_id, "hole_number": hole_number, "team": team},
        gross,
    )
    s = get_back_score(db, match_id, hole_number, team)

    logger.debug(f"back_scores upsert match={match_id} hole={hole_number} team={team} gross={gross}")
    return s


def get_back_scores(db: Session, match_id: int | None = None):
    q = db.query(models.BackScore)
    if match_id is not None:
        q = q.filter(models.BackScore.match_id == match_id)
    return q.order_by(models.BackScore.match_id, models.BackScore.hole_number).all()


#---------------------------------------------------------------------------------
# ------------------------------ Snapshot para motor -----------------------------
# --------------------------------------------------------------------------------

def load_score_table(db: Session, match_id: int | None = None) -> ScoreTable:
    table = ScoreTable()
    for s in get_front_scores(db, match_id):
        table.set_front(s.match_id, s.hole_number, s.player_id, s.gross)
    for s in get_back_scores(db, match_id):
        table.set_back(s.match_id, s.hole_number, s.team, s.gross)
    return table
