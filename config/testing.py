from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORE_LATENCY_SCALE = 0.0

SEED_PATH = str(REPO_ROOT / "database" / "seed.json")
AUTO_SEED = False

LOW_ATTENDANCE_THRESHOLD = 75
