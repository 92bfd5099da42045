"""HTTP client the game uses to talk to the leaderboard service."""
import json
import logging
import urllib.error
import urllib.request
from typing import Any, Dict, List, Optional

from tetris_config import CONFIG

logger = logging.getLogger(__name__)


class LeaderboardUnavailable(Exception):
    pass


class LeaderboardClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or CONFIG["LEADERBOARD_URL"]).rstrip("/")
        self.timeout = timeout if timeout is not None else CONFIG["LEADERBOARD_TIMEOUT_S"]

    def _req(self, path: str, method: str = "GET", data: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        body = None
        req = urllib.request.Request(url, method=method)
        if data is not None:
            req.add_header("Content-Type", "application/json")
            body = json.dumps(data).encode("utf-8")
        try:
            with urllib.request.urlopen(req, data=body, timeout=self.timeout) as r:
                return json.loads(r.read().decode("utf-8"))
        except urllib.error.HTTPError as e:
            logger.warning("%s %s failed: HTTP %s", method, url, e.code)
            raise LeaderboardUnavailable(f"server answered {e.code}") from e
        except (urllib.error.URLError, OSError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise LeaderboardUnavailable("leaderboard unreachable") from e
        except ValueError as e:
            logger.warning("%s %s returned bad JSON: %s", method, url, e)
            raise LeaderboardUnavailable("bad response from leaderboard") from e

    def top_scores(self) -> List[Dict[str, Any]]:
        data = self._req("/api/scores")
        if not isinstance(data, list):
            raise LeaderboardUnavailable("bad response from leaderboard")
        return data

    def submit(self, nickname: str, score: int) -> List[Dict[str, Any]]:
        """Post a final score and return the refreshed top list."""
        data = self._req("/api/scores", "POST", {"nickname": nickname, "score": score})
        if not isinstance(data, dict) or not data.get("success"):
            raise LeaderboardUnavailable("score was not saved")
        return data.get("topScores", [])
