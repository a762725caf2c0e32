"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

import asyncio

from config import load_settings

from src.academic_records.academic_records.container import build_container


async def _demo(container):
    record = await container.attendance_service.toggle(1, "2024-10-14")
    print("toggled:", record)
    print(await container.dashboard_service.summary())


def main():
    settings = load_settings()
    container = build_container(settings={**settings, "AUTO_SEED": True, "STORE_LATENCY_SCALE": 0})
    asyncio.run(_demo(container))


if __name__ == "__main__":
    main()
