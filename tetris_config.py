CONFIG = {
    "CELL_SIZE": 30,
    "PREVIEW_CELL": 22,
    "FPS": 60,
    "BASE_DROP_MS": 1000,
    "DROP_STEP_MS": 50,
    "MIN_DROP_MS": 100,
    "LINES_PER_LEVEL": 10,
    "LINE_SCORE": 100,
    "SOFT_DROP_BONUS": 1,
    "HARD_DROP_BONUS": 2,
    "LEADERBOARD_URL": "http://127.0.0.1:3000",
    "LEADERBOARD_TIMEOUT_S": 4,
    "SEED": None,
    "SERVER_HOST": "127.0.0.1",
    "SERVER_PORT": 3000,
}
