import math
from decimal import Decimal, ROUND_HALF_UP

HALVED = "AS"


def strokes_for_hole(course_handicap: float, hole_rank: int) -> int:
    """
    Golpes recibidos en un hoyo segun la tabla de handicap del campo.
    Handicap 0 o rank invalido -> 0 golpes.
    """
    if not course_handicap or not hole_rank:
        return 0

    base = int(course_handicap // 18)
    extra = course_handicap % 18

    return base + (1 if hole_rank <= extra else 0)


def to_gross(raw):
    # None, "", "abc", nan, 4.5, 0 -> None
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None
        try:
            raw = float(raw)
        except ValueError:
            return None
    if not isinstance(raw, (int, float)):
        return None
    if not math.isfinite(raw) or raw != int(raw) or raw < 1:
        return None
    return int(raw)


def net_score(gross: int | None, course_handicap: float, hole_rank: int) -> int | None:
    if gross is None:
        return None
    return gross - strokes_for_hole(course_handicap, hole_rank)


def best_net(*nets: int | None) -> int | None:
    valid = [n for n in nets if n is not None and math.isfinite(n)]
    if not valid:
        return None
    return min(valid)


def hole_result(a_net, b_net):
    """
    "A" / "B" si gana un lado, "AS" si empatan (halved),
    None si falta alguno de los dos resultados.
    """
    if a_net is None or b_net is None:
        return None
    if a_net < b_net:
        return "A"
    if b_net < a_net:
        return "B"
    return HALVED


def tally(results) -> tuple[int, int]:
    """Devuelve (diff, holes_played). diff > 0 -> va ganando A."""
    diff = 0
    holes_played = 0
    for r in results:
        if r is None:
            continue
        holes_played += 1
        if r == "A":
            diff += 1
        elif r == "B":
            diff -= 1
    return diff, holes_played


def status_from_results(results) -> str:
    diff, holes_played = tally(results)

    if holes_played == 0:
        return "All square"
    if diff == 0:
        return f"All square thru {holes_played}"
    if diff > 0:
        return f"Team A up {diff} thru {holes_played}"
    return f"Team B up {-diff} thru {holes_played}"


def nine_points(results) -> dict:
    # 1 punto por vuelta de 9; empate -> 0.5 / 0.5; sin hoyos -> 0 / 0
    diff, holes_played = tally(results)

    if holes_played == 0:
        return {"a": 0, "b": 0, "result": None}
    if diff > 0:
        return {"a": 1, "b": 0, "result": "A"}
    if diff < 0:
        return {"a": 0, "b": 1, "result": "B"}
    return {"a": 0.5, "b": 0.5, "result": HALVED}


# ---------------------------------------------------------------------------
# Alternate shot (back 9)
# ---------------------------------------------------------------------------

def team_handicap(p1, p2) -> int:
    # media redondeada "half up": 22.5 -> 23
    avg = (Decimal(str(p1.handicap)) + Decimal(str(p2.handicap))) / 2
    return int(avg.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def higher_side(team_a_hcp: int, team_b_hcp: int):
    if team_a_hcp > team_b_hcp:
        return "A"
    if team_b_hcp > team_a_hcp:
        return "B"
    return None


def stroke_differential(team_a_hcp: int, team_b_hcp: int) -> int:
    return abs(team_a_hcp - team_b_hcp)


def alternate_shot_tee_order(p1, p2) -> dict:
    """
    El de menor handicap sale en los hoyos pares, el otro en los impares.
    Empate -> el primero de la pareja sale en los pares.
    """
    low, high = (p1, p2) if p1.handicap <= p2.handicap else (p2, p1)
    return {"even": low.name, "odd": high.name}
