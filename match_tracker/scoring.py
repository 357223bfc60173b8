"""
Motor de la competicion: tarjeta de cada partido, estado y puntos.

Front 9: 2-Man Net Best Ball (cada jugador con sus golpes de handicap).
Back 9: 2-Man Alternate Shot (un gross por equipo; solo recibe golpes
el equipo con mayor handicap medio, por la diferencia entre ambos).

Todo se recalcula desde los golpes brutos (ScoreTable) en cada llamada.
"""
from dataclasses import dataclass, field

from .golf_calc import (
    alternate_shot_tee_order,
    best_net,
    higher_side,
    hole_result,
    net_score,
    nine_points,
    status_from_results,
    stroke_differential,
    strokes_for_hole,
    team_handicap,
    to_gross,
)


@dataclass
class ScoreTable:
    """
    Golpes brutos tal cual se han apuntado.
    front: {(match_id, hole_number, player_id): gross | None}
    back:  {(match_id, hole_number, team): gross | None}
    """
    front: dict = field(default_factory=dict)
    back: dict = field(default_factory=dict)

    def set_front(self, match_id, hole_number, player_id, gross):
        self.front[(match_id, hole_number, player_id)] = gross

    def set_back(self, match_id, hole_number, team, gross):
        self.back[(match_id, hole_number, team)] = gross

    def front_gross(self, match_id, hole_number, player_id):
        return to_gross(self.front.get((match_id, hole_number, player_id)))

    def back_gross(self, match_id, hole_number, team):
        return to_gross(self.back.get((match_id, hole_number, team)))


# ---------------------------------------------------------------------------
# Front 9
# ---------------------------------------------------------------------------

def front_hole_row(match, hole, scores: ScoreTable) -> dict:
    players = []
    nets = {}
    for p in match.players:
        gross = scores.front_gross(match.id, hole.number, p.id)
        net = net_score(gross, p.handicap, hole.handicap)
        nets[p.id] = net
        players.append({
            "player_id": p.id,
            "team": p.team,
            "gross": gross,
            "strokes": strokes_for_hole(p.handicap, hole.handicap),
            "net": net,
        })

    a1, a2, b1, b2 = match.players
    best_a = best_net(nets[a1.id], nets[a2.id])
    best_b = best_net(nets[b1.id], nets[b2.id])

    return {
        "number": hole.number,
        "par": hole.par,
        "handicap": hole.handicap,
        "players": players,
        "best_a": best_a,
        "best_b": best_b,
        "result": hole_result(best_a, best_b),
    }


def front_results(match, holes, scores: ScoreTable) -> list:
    return [front_hole_row(match, h, scores)["result"] for h in holes]


# ---------------------------------------------------------------------------
# Back 9
# ---------------------------------------------------------------------------

def alternate_shot_handicaps(match) -> dict:
    team_a_hcp = team_handicap(*match.team_players("A"))
    team_b_hcp = team_handicap(*match.team_players("B"))
    return {
        "team_a": team_a_hcp,
        "team_b": team_b_hcp,
        "higher_side": higher_side(team_a_hcp, team_b_hcp),
        "stroke_diff": stroke_differential(team_a_hcp, team_b_hcp),
    }


def back_hole_row(match, hole, scores: ScoreTable, alt=None) -> dict:
    alt = alt or alternate_shot_handicaps(match)
    side = alt["higher_side"]
    diff = alt["stroke_diff"]

    gross_a = scores.back_gross(match.id, hole.number, "A")
    gross_b = scores.back_gross(match.id, hole.number, "B")

    strokes = strokes_for_hole(diff, hole.handicap) if side and diff else 0

    net_a = None if gross_a is None else gross_a - (strokes if side == "A" else 0)
    net_b = None if gross_b is None else gross_b - (strokes if side == "B" else 0)

    return {
        "number": hole.number,
        "par": hole.par,
        "handicap": hole.handicap,
        "gross_a": gross_a,
        "gross_b": gross_b,
        "strokes": strokes,
        "strokes_to": side if strokes else None,
        "net_a": net_a,
        "net_b": net_b,
        "result": hole_result(net_a, net_b),
    }


def back_results(match, holes, scores: ScoreTable) -> list:
    alt = alternate_shot_handicaps(match)
    return [back_hole_row(match, h, scores, alt)["result"] for h in holes]


# ---------------------------------------------------------------------------
# Partido completo y clasificacion
# ---------------------------------------------------------------------------

def match_standing(front_res, back_res) -> dict:
    front_summary = nine_points(front_res)
    back_summary = nine_points(back_res)
    return {
        "front_status": status_from_results(front_res),
        "back_status": status_from_results(back_res),
        "front_summary": front_summary,
        "back_summary": back_summary,
        "total_a": front_summary["a"] + back_summary["a"],
        "total_b": front_summary["b"] + back_summary["b"],
    }


def match_summary(event, match, scores: ScoreTable) -> dict:
    alt = alternate_shot_handicaps(match)

    front_rows = [front_hole_row(match, h, scores) for h in event.front_holes]
    back_rows = [back_hole_row(match, h, scores, alt) for h in event.back_holes]

    standing = match_standing(
        [row["result"] for row in front_rows],
        [row["result"] for row in back_rows],
    )

    return {
        "match_id": match.id,
        "label": match.label,
        "players": [p.model_dump() for p in match.players],
        "team_a_name": match.team_name("A"),
        "team_b_name": match.team_name("B"),
        "alternate_shot": {
            **alt,
            "tee_order": {
                "A": alternate_shot_tee_order(*match.team_players("A")),
                "B": alternate_shot_tee_order(*match.team_players("B")),
            },
        },
        "front": front_rows,
        "back": back_rows,
        **standing,
    }


def build_leaderboard(event, scores: ScoreTable) -> list:
    # solo resultados por hoyo, sin filas de tarjeta
    rows = []
    for m in event.matches:
        standing = match_standing(
            front_results(m, event.front_holes, scores),
            back_results(m, event.back_holes, scores),
        )
        rows.append({
            "match_id": m.id,
            "label": m.label,
            "team_a_name": m.team_name("A"),
            "team_b_name": m.team_name("B"),
            **standing,
        })
    return rows


def event_totals(rows) -> dict:
    totals = {"a": 0, "b": 0}
    for row in rows:
        totals["a"] += row["total_a"]
        totals["b"] += row["total_b"]
    return totals
