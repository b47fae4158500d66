
COLS, ROWS = 10, 20

CONFIG = {
    "CELL_SIZE": 24,
    "TICK_MS": 500,
    "LINE_BONUS": 10,
    "SPAWN_X": 4,
    "SPAWN_Y": 0,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
