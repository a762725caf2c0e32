from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

SEED_KINDS = ("students", "classes", "grades", "attendance")


def load_seed(seed_path: str | Path) -> Dict[str, List[Dict[str, Any]]]:
    """Read a JSON seed file: one flat list of flat records per entity kind."""

    data = json.loads(Path(seed_path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Seed file must hold an object, got {type(data).__name__}")
    return {kind: list(data.get(kind) or []) for kind in SEED_KINDS}


def seed_stores(stores: Dict[str, Any], seed: Dict[str, List[Dict[str, Any]]]) -> Dict[str, int]:
    counts = {}
    for kind in SEED_KINDS:
        counts[kind] = stores[kind].load(seed.get(kind, []))
    logger.info("Seeded stores: %s", ", ".join(f"{k}={v}" for k, v in counts.items()))
    return counts
