import pytest

from tetris_scores import InMemoryScoreRepository
from tetris_server import create_app, get_args


@pytest.fixture
def client():
    app = create_app(InMemoryScoreRepository())
    app.config["TESTING"] = True
    return app.test_client()


def test_list_scores_sorted(client):
    resp = client.get("/api/scores")
    assert resp.status_code == 200
    data = resp.get_json()
    assert [s["score"] for s in data] == [5500, 3200, 2800, 2400, 2000]
    assert set(data[0]) == {"id", "nickname", "score", "date"}


def test_negative_score_rejected(client):
    resp = client.post("/api/scores", json={"nickname": "A", "score": -1})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


@pytest.mark.parametrize("body", [
    {"score": 100},
    {"nickname": "A"},
    {"nickname": "A", "score": "100"},
    {"nickname": "", "score": 100},
])
def test_invalid_bodies_rejected(client, body):
    assert client.post("/api/scores", json=body).status_code == 400


def test_malformed_json_rejected(client):
    resp = client.post("/api/scores", data="{nope", content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_created_score_listed_above_lower_scores(client):
    resp = client.post("/api/scores", json={"nickname": "A", "score": 2100})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["message"] == "Score saved successfully"
    assert [s["nickname"] for s in body["topScores"]][-2:] == ["A", "GridWarrior"]

    data = client.get("/api/scores").get_json()
    names = [s["nickname"] for s in data]
    assert names.index("A") < names.index("GridWarrior")
    assert names.index("LineEraser") < names.index("A")
    new = data[names.index("A")]
    assert new["id"] == 6 and new["score"] == 2100


def test_score_floored_and_nickname_trimmed(client):
    client.post("/api/scores", json={"nickname": "  Zed  ", "score": 9999.7})
    top = client.get("/api/scores").get_json()[0]
    assert (top["nickname"], top["score"]) == ("Zed", 9999)


def test_list_capped_at_ten(client):
    for i in range(10):
        client.post("/api/scores", json={"nickname": f"p{i}", "score": 100 + i})
    data = client.get("/api/scores").get_json()
    assert len(data) == 10
    assert data[-1]["score"] == 105


def test_delete_unknown_id_404(client):
    resp = client.delete("/api/scores/9999")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Score not found"}


def test_delete_non_numeric_id_404(client):
    assert client.delete("/api/scores/abc").status_code == 404


def test_delete_returns_updated_top(client):
    resp = client.delete("/api/scores/1")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert [s["id"] for s in body["topScores"]] == [2, 3, 4, 5]
    assert client.delete("/api/scores/1").status_code == 404


def test_unknown_api_route_is_json(client):
    resp = client.get("/api/nothing")
    assert resp.status_code == 404
    assert "error" in resp.get_json()
    assert client.put("/api/scores").status_code == 405


def test_index_page_lists_ranking_escaped(client):
    client.post("/api/scores", json={"nickname": "<b>x</b>", "score": 99999})
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "TetrisKing" in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "99,999" in html


def test_apps_do_not_share_state():
    a = create_app().test_client()
    b = create_app().test_client()
    a.delete("/api/scores/1")
    assert len(b.get("/api/scores").get_json()) == 5


def test_cli_defaults():
    args = get_args([])
    assert (args.host, args.port, args.debug) == ("127.0.0.1", 3000, False)
    assert get_args(["--port", "8080", "--debug"]).port == 8080


def test_huge_integer_score_does_not_crash(client):
    body = '{"nickname": "A", "score": 1' + "0" * 400 + "}"
    resp = client.post("/api/scores", data=body, content_type="application/json")
    assert resp.status_code == 200
    assert resp.get_json()["topScores"][0]["nickname"] == "A"


def test_huge_negative_score_rejected(client):
    body = '{"nickname": "A", "score": -1' + "0" * 400 + "}"
    resp = client.post("/api/scores", data=body, content_type="application/json")
    assert resp.status_code == 400
