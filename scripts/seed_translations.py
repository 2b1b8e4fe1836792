#!/usr/bin/env python3
"""Upsert translations for list items that are missing them.

Usage:
    python scripts/seed_translations.py

Exit code 0 on success, 1 if any record failed.
"""

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from backoffice.seeding.data import MISSING_TRANSLATIONS
from backoffice.seeding.runner import run_seed
from backoffice.seeding.seeder import seed_translations


def main() -> int:
    parser = argparse.ArgumentParser(description="Upsert missing list-item translations")
    parser.parse_args()

    try:
        count = asyncio.run(run_seed(lambda session: seed_translations(session, MISSING_TRANSLATIONS)))
    except Exception as e:
        print(f"Seed failed: {e}", file=sys.stderr)
        return 1

    print(f"Seed complete. {count} translations were added or updated.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
