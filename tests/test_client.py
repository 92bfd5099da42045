import io
import json
import urllib.error
import urllib.request
from urllib.parse import urlsplit

import pytest

import tetris_client
from tetris_client import LeaderboardClient, LeaderboardUnavailable
from tetris_scores import InMemoryScoreRepository
from tetris_server import create_app


class FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@pytest.fixture
def served(monkeypatch):
    """Route the client's urlopen calls into a Flask test client."""
    app = create_app(InMemoryScoreRepository())
    web = app.test_client()
    calls = []

    def urlopen(req, data=None, timeout=None):
        calls.append((req.get_method(), req.full_url, timeout))
        resp = web.open(urlsplit(req.full_url).path, method=req.get_method(),
                        data=data, headers=dict(req.header_items()))
        if resp.status_code >= 400:
            raise urllib.error.HTTPError(req.full_url, resp.status_code, resp.status, {}, None)
        return FakeResponse(resp.get_data())

    monkeypatch.setattr(tetris_client.urllib.request, "urlopen", urlopen)
    return calls


def test_top_scores(served):
    client = LeaderboardClient("http://scores.test/", timeout=2)
    scores = client.top_scores()
    assert scores[0]["nickname"] == "TetrisKing"
    assert served == [("GET", "http://scores.test/api/scores", 2)]


def test_submit_returns_refreshed_top(served):
    client = LeaderboardClient("http://scores.test")
    top = client.submit("Ann", 3000)
    assert [s["nickname"] for s in top][:3] == ["TetrisKing", "CS_Student", "Ann"]
    assert served[0][0] == "POST"
    assert served[0][2] == 4


def test_rejected_submit_raises(served):
    client = LeaderboardClient("http://scores.test")
    with pytest.raises(LeaderboardUnavailable):
        client.submit("Ann", -5)


def test_unreachable_server(monkeypatch):
    def urlopen(req, data=None, timeout=None):
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr(tetris_client.urllib.request, "urlopen", urlopen)
    with pytest.raises(LeaderboardUnavailable):
        LeaderboardClient("http://nowhere.test").top_scores()


def test_bad_json(monkeypatch):
    monkeypatch.setattr(tetris_client.urllib.request, "urlopen",
                        lambda req, data=None, timeout=None: FakeResponse(b"<html>"))
    with pytest.raises(LeaderboardUnavailable):
        LeaderboardClient("http://scores.test").top_scores()


def test_unexpected_shape(monkeypatch):
    monkeypatch.setattr(tetris_client.urllib.request, "urlopen",
                        lambda req, data=None, timeout=None: FakeResponse(json.dumps({"x": 1}).encode()))
    with pytest.raises(LeaderboardUnavailable):
        LeaderboardClient("http://scores.test").top_scores()
