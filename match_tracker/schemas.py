from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator


Team = Literal["A", "B"]


class HoleMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=18)
    par: int = Field(gt=0)
    handicap: int = Field(ge=1, le=18)   # HCP hoyo 1..18, 1 = el mas dificil


class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    handicap: float = Field(ge=0)        # course handicap (dado, no calculado)
    team: Team


class MatchConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    label: str
    players: tuple[Player, Player, Player, Player]   # [A1, A2, B1, B2]

    @model_validator(mode="after")
    def check_players(self):
        teams = [p.team for p in self.players]
        if teams != ["A", "A", "B", "B"]:
            raise ValueError(
                f"match {self.id}: players must be ordered A1, A2, B1, B2 (got {teams})"
            )
        ids = [p.id for p in self.players]
        if len(set(ids)) != len(ids):
            raise ValueError(f"match {self.id}: duplicated player id")
        return self

    def team_players(self, team: str) -> tuple[Player, Player]:
        a1, a2, b1, b2 = self.players
        return (a1, a2) if team == "A" else (b1, b2)

    def team_name(self, team: str) -> str:
        p1, p2 = self.team_players(team)
        return f"{p1.name} / {p2.name}"

    def get_player(self, player_id: str) -> Optional[Player]:
        for p in self.players:
            if p.id == player_id:
                return p
        return None


class EventConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Match Tracker"
    course_name: str
    front_holes: tuple[HoleMeta, ...]
    back_holes: tuple[HoleMeta, ...]
    matches: tuple[MatchConfig, ...]

    @field_validator("front_holes", "back_holes")
    @classmethod
    def nine_holes(cls, v):
        if len(v) != 9:
            raise ValueError(f"a nine must have exactly 9 holes (got {len(v)})")
        return v

    @model_validator(mode="after")
    def check_course_and_roster(self):
        holes = self.front_holes + self.back_holes

        numbers = [h.number for h in holes]
        if len(set(numbers)) != len(numbers):
            raise ValueError("hole numbers must be unique")

        ranks = sorted(h.handicap for h in holes)
        if ranks != list(range(1, 19)):
            raise ValueError("hole handicaps must use each rank 1..18 exactly once")

        match_ids = [m.id for m in self.matches]
        if len(set(match_ids)) != len(match_ids):
            raise ValueError("match ids must be unique")

        player_ids = [p.id for m in self.matches for p in m.players]
        if len(set(player_ids)) != len(player_ids):
            raise ValueError("player ids must be unique across the event")

        return self

    def get_match(self, match_id: int) -> Optional[MatchConfig]:
        for m in self.matches:
            if m.id == match_id:
                return m
        return None

    def front_hole(self, number: int) -> Optional[HoleMeta]:
        for h in self.front_holes:
            if h.number == number:
                return h
        return None

    def back_hole(self, number: int) -> Optional[HoleMeta]:
        for h in self.back_holes:
            if h.number == number:
                return h
        return None


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

class ScoreUpdate(BaseModel):
    gross: Optional[StrictInt] = Field(default=None, ge=1)   # None = borrar golpe; true/"5" -> 422


class ScoreOut(BaseModel):
    match_id: int
    hole_number: int
    contestant: str
    gross: Optional[int] = None
