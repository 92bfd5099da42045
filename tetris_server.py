"""Leaderboard service: Flask app over a ScoreRepository."""
from __future__ import annotations
import argparse
import logging
from typing import Optional

from flask import Flask, jsonify, request, render_template_string
from werkzeug.exceptions import HTTPException

from tetris_config import CONFIG
from tetris_scores import (
    TOP_N,
    InMemoryScoreRepository,
    InvalidScoreError,
    ScoreNotFoundError,
    ScoreRepository,
    validate_submission,
)

logger = logging.getLogger(__name__)

INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Retro Tetris Connect</title>
  <style>
    body { background: #0a0d22; color: #c5cae9; font-family: monospace; margin: 2em; }
    table { border-collapse: collapse; }
    td, th { padding: 4px 12px; text-align: left; }
    tr.rank-top td { color: #f0f000; }
  </style>
</head>
<body>
  <h1>Retro Tetris Connect</h1>
  <p>Start the game window with <code>retro-tetris --url {{ base_url }}</code>.</p>
  <h2>Ranking</h2>
  {% if scores %}
  <table>
    <tr><th>#</th><th>Nickname</th><th>Score</th><th>Date</th></tr>
    {% for item in scores %}
    <tr class="{{ 'rank-top' if loop.first else '' }}">
      <td>{{ loop.index }}</td><td>{{ item.nickname }}</td><td>{{ "{:,}".format(item.score) }}</td><td>{{ item.date }}</td>
    </tr>
    {% endfor %}
  </table>
  {% else %}
  <p>No scores yet.</p>
  {% endif %}
</body>
</html>
"""


def create_app(repository: Optional[ScoreRepository] = None) -> Flask:
    app = Flask(__name__)
    scores = repository if repository is not None else InMemoryScoreRepository()
    app.extensions["scores"] = scores

    def top_scores():
        return [r.to_dict() for r in scores.top(TOP_N)]

    @app.get("/")
    def index():
        return render_template_string(INDEX_HTML, scores=scores.top(TOP_N), base_url=request.host_url.rstrip("/"))

    @app.get("/api/scores")
    def list_scores():
        return jsonify(top_scores())

    @app.post("/api/scores")
    def create_score():
        nickname, score = validate_submission(request.get_json(silent=True))
        record = scores.add(nickname, score)
        logger.info("score saved: id=%d nickname=%r score=%d", record.id, record.nickname, record.score)
        return jsonify({
            "success": True,
            "message": "Score saved successfully",
            "topScores": top_scores(),
        })

    @app.delete("/api/scores/<score_id>")
    def delete_score(score_id):
        try:
            sid = int(score_id)
        except ValueError:
            raise ScoreNotFoundError("Score not found") from None
        record = scores.delete(sid)
        logger.info("score deleted: id=%d nickname=%r", record.id, record.nickname)
        return jsonify({
            "success": True,
            "message": "Score deleted successfully",
            "topScores": top_scores(),
        })

    @app.errorhandler(InvalidScoreError)
    def invalid_score(e):
        logger.warning("rejected submission: %s", e)
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(ScoreNotFoundError)
    def score_not_found(e):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(HTTPException)
    def http_error(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": e.description}), e.code
        return e

    return app


def get_args(argv=None):
    parser = argparse.ArgumentParser(description="Retro Tetris Connect leaderboard server")
    parser.add_argument("--host", type=str, default=CONFIG["SERVER_HOST"])
    parser.add_argument("--port", type=int, default=CONFIG["SERVER_PORT"])
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[LEADERBOARD] %(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    logger.info("leaderboard listening on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
