from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from .db import Base


# Solo se guardan golpes brutos; netos, resultados y puntos se recalculan siempre.


class FrontScore(Base):
    __tablename__ = "front_scores"
    __table_args__ = (
        UniqueConstraint("match_id", "hole_number", "player_id", name="uq_front_score"),
    )

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, nullable=False, index=True)
    hole_number = Column(Integer, nullable=False)   # 1..9
    player_id = Column(String, nullable=False)

    gross = Column(Integer, nullable=True)          # None = sin apuntar

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class BackScore(Base):
    __tablename__ = "back_scores"
    __table_args__ = (
        UniqueConstraint("match_id", "hole_number", "team", name="uq_back_score"),
    )

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, nullable=False, index=True)
    hole_number = Column(Integer, nullable=False)   # 10..18
    team = Column(String(1), nullable=False)        # "A" / "B"

    gross = Column(Integer, nullable=True)          # gross del equipo (alternate shot)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
