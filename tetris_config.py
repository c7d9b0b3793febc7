
CONFIG = {
    "BLOCK_SIZE": 30,
    "DROP_INTERVAL_MS": 1000,
    "FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
