from __future__ import annotations

import asyncio
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.academic_records.academic_records.container import build_container


async def _summary(container):
    summary = await container.dashboard_service.summary()
    overview = await container.class_service.overview()
    return summary, overview


def main() -> None:
    settings = load_settings()
    settings.update(AUTO_SEED=True, STORE_LATENCY_SCALE=0)
    if not settings.get("SEED_PATH"):
        settings["SEED_PATH"] = str(REPO_ROOT / "database" / "seed.json")

    container = build_container(settings=settings)
    summary, overview = asyncio.run(_summary(container))

    print(
        f"Students: {summary.total_students} ({summary.active_students} active) | "
        f"attendance {summary.average_attendance}% | grades {summary.average_grade}% | "
        f"present today {summary.today_present_count}"
    )
    for row in overview:
        print(f"  {row.section.name}: {row.occupancy.count}/{row.occupancy.capacity} ({row.occupancy.rate}%)")


if __name__ == "__main__":
    main()
