
CONFIG = {
    "WIDTH": 20,
    "HEIGHT": 40,
    "TICK_MS": 200,
    "CELL_SIZE": 14,
    "SPAWN_ROW": 4,
    "SHIFT_MARGIN": 2,
    "LOG_LEVEL": "INFO",
}
