# constants.py

MONTHS_PER_YEAR: int = 12

DOUBLING_TARGET_MULTIPLE: float = 2.0
DEFAULT_DOUBLING_CAP_YEARS: int = 100

MIN_SOLVED_RATE_PERCENT: float = 0.01
MAX_SOLVED_RATE_PERCENT: float = 100.0
SOLVED_RATE_DECIMALS: int = 2

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)
