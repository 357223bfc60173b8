def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_event(client):
    data = client.get("/api/event").json()
    assert data["course_name"].startswith("San Dimas")
    assert len(data["front_holes"]) == 9
    assert data["matches"][0]["alternate_shot"] == {
        "team_a": 23, "team_b": 24, "higher_side": "B", "stroke_diff": 1,
    }


def test_front_scores_drive_match_status(client):
    for player_id, gross in (("m1-p1", 5), ("m1-p2", 4), ("m1-p3", 4), ("m1-p4", 5)):
        r = client.put(f"/api/matches/1/front/4/{player_id}", json={"gross": gross})
        assert r.status_code == 200
        assert r.json() == {"match_id": 1, "hole_number": 4, "contestant": player_id, "gross": gross}

    s = client.get("/api/matches/1").json()
    hole4 = s["front"][3]
    assert [p["net"] for p in hole4["players"]] == [3, 3, 3, 2]
    assert hole4["result"] == "B"
    assert s["front_status"] == "Team B up 1 thru 1"
    assert s["front_summary"] == {"a": 0, "b": 1, "result": "B"}
    assert s["back_status"] == "All square"

    board = client.get("/api/leaderboard").json()
    assert board["rows"][0]["total_b"] == 1
    assert board["totals"] == {"a": 0, "b": 1}


def test_clearing_a_score_makes_hole_undetermined(client):
    client.put("/api/matches/2/back/11/A", json={"gross": 4})
    client.put("/api/matches/2/back/11/B", json={"gross": 4})
    assert client.get("/api/matches/2").json()["back"][1]["result"] == "AS"

    r = client.put("/api/matches/2/back/11/B", json={"gross": None})
    assert r.status_code == 200
    assert r.json()["gross"] is None

    s = client.get("/api/matches/2").json()
    assert s["back"][1]["result"] is None
    assert s["back_summary"] == {"a": 0, "b": 0, "result": None}


def test_unknown_keys_are_404(client):
    assert client.get("/api/matches/99").status_code == 404
    assert client.put("/api/matches/99/front/1/m1-p1", json={"gross": 4}).status_code == 404
    assert client.put("/api/matches/1/front/10/m1-p1", json={"gross": 4}).status_code == 404
    assert client.put("/api/matches/1/front/1/m2-p1", json={"gross": 4}).status_code == 404
    assert client.put("/api/matches/1/back/4/A", json={"gross": 4}).status_code == 404
    assert client.put("/api/matches/1/back/10/C", json={"gross": 4}).status_code == 404


def test_invalid_gross_is_422(client):
    assert client.put("/api/matches/1/front/1/m1-p1", json={"gross": 0}).status_code == 422
    assert client.put("/api/matches/1/front/1/m1-p1", json={"gross": "abc"}).status_code == 422
    assert client.put("/api/matches/1/front/1/m1-p1", json={"gross": True}).status_code == 422
    assert client.put("/api/matches/1/front/1/m1-p1", json={"gross": "5"}).status_code == 422
    assert client.put("/api/matches/1/back/10/A", json={"gross": True}).status_code == 422
    assert client.get("/api/matches/1").json()["front"][0]["players"][0]["gross"] is None


def test_public_pages(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code in (302, 307)
    assert r.headers["location"] == "/public"

    r = client.get("/public")
    assert r.status_code == 200
    assert "Group 1" in r.text
    assert "Javier Tiscareno / Kenny Wong" in r.text

    r = client.get("/public/matches/3")
    assert r.status_code == 200
    assert "Greg Lee" in r.text
    assert 'name="g_1_m3-p1"' in r.text
    assert 'name="g_18_B"' in r.text

    assert client.get("/public/matches/42").status_code == 404


def test_public_forms_save_scores(client):
    r = client.post(
        "/public/matches/1/back",
        data={"g_10_A": "3", "g_10_B": "4", "g_11_A": "x"},
        follow_redirects=False,
    )
    assert r.status_code == 303
    assert r.headers["location"] == "/public/matches/1"

    r = client.post(
        "/public/matches/1/front",
        data={"g_4_m1-p1": "5", "g_4_m1-p2": "4", "g_4_m1-p3": "4", "g_4_m1-p4": "5"},
    )
    assert r.status_code == 200

    s = client.get("/api/matches/1").json()
    assert s["back"][0]["result"] == "A"
    assert s["back"][1]["gross_a"] is None
    assert s["front"][3]["result"] == "B"
    assert (s["total_a"], s["total_b"]) == (1, 1)
