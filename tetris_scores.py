"""Score records and the repository the leaderboard service stores them in.

The repository keeps records sorted by descending score. Python's sort is
stable, so equal scores stay in insertion order. All mutations run under a
single lock.
"""
from __future__ import annotations
import math
import threading
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

TOP_N = 10
# Up to 100 records are retained even though only the top 10 are shown.
RETENTION_CAP = 100

SEED_SCORES = [
    ("TetrisKing", 5500, "2024-05-20"),
    ("CS_Student", 3200, "2024-05-21"),
    ("BlockMaster", 2800, "2024-05-22"),
    ("LineEraser", 2400, "2024-05-23"),
    ("GridWarrior", 2000, "2024-05-24"),
]


class LeaderboardError(Exception):
    pass


class InvalidScoreError(LeaderboardError):
    pass


class ScoreNotFoundError(LeaderboardError):
    pass


@dataclass
class ScoreRecord:
    id: int
    nickname: str
    score: int
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def validate_submission(payload: Any) -> Tuple[str, int]:
    """Check a ``{nickname, score}`` payload and return the cleaned values."""
    if not isinstance(payload, dict):
        raise InvalidScoreError("Invalid data. nickname and score (number) are required.")
    nickname = payload.get("nickname")
    score = payload.get("score")
    if not isinstance(nickname, str) or not nickname.strip():
        raise InvalidScoreError("Invalid data. nickname and score (number) are required.")
    # bool is an int subclass; JSON true/false is not a score
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise InvalidScoreError("Invalid data. nickname and score (number) are required.")
    # big JSON ints cannot convert to float, so only floats get the finite check
    if (isinstance(score, float) and not math.isfinite(score)) or score < 0:
        raise InvalidScoreError("Invalid data. score must be a non-negative number.")
    return nickname.strip(), math.floor(score)


class ScoreRepository:
    """Storage interface for score records."""

    def top(self, limit: int = TOP_N) -> List[ScoreRecord]:
        raise NotImplementedError

    def add(self, nickname: str, score: int, date: Optional[str] = None) -> ScoreRecord:
        raise NotImplementedError

    def delete(self, score_id: int) -> ScoreRecord:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError


class InMemoryScoreRepository(ScoreRepository):
    def __init__(self, seed: Iterable[Tuple[str, int, str]] = SEED_SCORES, cap: int = RETENTION_CAP):
        self.cap = cap
        self._lock = threading.Lock()
        self._records: List[ScoreRecord] = []
        self._next_id = 1
        for nickname, score, date in seed:
            self.add(nickname, score, date)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def top(self, limit: int = TOP_N) -> List[ScoreRecord]:
        with self._lock:
            return list(self._records[:limit])

    def add(self, nickname: str, score: int, date: Optional[str] = None) -> ScoreRecord:
        with self._lock:
            record = ScoreRecord(self._next_id, nickname, score, date or today())
            self._next_id += 1
            self._records.append(record)
            self._records.sort(key=lambda r: r.score, reverse=True)
            if len(self._records) > self.cap:
                del self._records[self.cap:]
            return record

    def delete(self, score_id: int) -> ScoreRecord:
        with self._lock:
            for i, record in enumerate(self._records):
                if record.id == score_id:
                    return self._records.pop(i)
        raise ScoreNotFoundError("Score not found")
