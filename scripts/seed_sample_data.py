"""Seed a local cache (and optionally the Redis mirror) with demo data.

Usage:
    python scripts/seed_sample_data.py --cache-dir .rollcall-cache
    python scripts/seed_sample_data.py --reset --mirror redis
"""

from __future__ import annotations

import argparse

from rollcall.core.config import AppSettings, StoreConfig
from rollcall.persistence import RecordStore, create_store
from rollcall.sample_data import initialize_sample_data
from rollcall.services.access import AccessControl
from rollcall.services.attendance_repository import AttendanceRepository


def seed(store: RecordStore, reset: bool = False) -> bool:
    """Seed ``store``; with ``reset`` every collection is cleared first."""
    repository = AttendanceRepository(store)
    if reset:
        repository.clear_all_data()
        print("  Cleared existing data")
    seeded = initialize_sample_data(repository, AccessControl(repository))
    if seeded:
        print(f"  Seeded {len(repository.get_all_employees())} employees, "
              f"{len(repository.get_all_attendance())} attendance records")
    else:
        print("  Employees already present, skipping")
    return seeded


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed Rollcall sample data")
    parser.add_argument("--cache-dir", default=None, help="Local cache directory")
    parser.add_argument("--mirror", choices=["none", "redis"], default=None, help="Remote mirror to push to")
    parser.add_argument("--reset", action="store_true", help="Delete all data before seeding")
    args = parser.parse_args()

    settings = AppSettings()
    overrides = {k: v for k, v in {"cache_dir": args.cache_dir, "mirror": args.mirror}.items() if v}
    if overrides:
        settings.store = StoreConfig(**{**settings.store.model_dump(), **overrides})

    store = create_store(settings)
    store.start()
    try:
        print("Seeding sample data...")
        seed(store, reset=args.reset)
    finally:
        store.close()
    print("Done!")


if __name__ == "__main__":
    main()
