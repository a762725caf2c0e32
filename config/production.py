import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_LATENCY_SCALE = float(os.getenv("STORE_LATENCY_SCALE", "0"))

SEED_PATH = os.getenv("SEED_PATH", "")
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "0")))

LOW_ATTENDANCE_THRESHOLD = int(os.getenv("LOW_ATTENDANCE_THRESHOLD", "75"))
