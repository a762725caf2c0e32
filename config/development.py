import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Multiplier on the simulated store latency; 0 disables it.
STORE_LATENCY_SCALE = float(os.getenv("STORE_LATENCY_SCALE", "1"))

SEED_PATH = os.getenv("SEED_PATH", str(REPO_ROOT / "database" / "seed.json"))
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "1")))

LOW_ATTENDANCE_THRESHOLD = int(os.getenv("LOW_ATTENDANCE_THRESHOLD", "75"))
