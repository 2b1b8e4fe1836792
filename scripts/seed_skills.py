#!/usr/bin/env python3
"""Seed the skill taxonomy and its translations.

Usage:
    python scripts/seed_skills.py              # every letter
    python scripts/seed_skills.py --letter A   # one letter
    python scripts/seed_skills.py --letter AWZ
    python scripts/seed_skills.py --top100     # most requested skills

Exit code 0 on success, 1 if any record failed, 2 for an unknown letter.
"""

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from backoffice.seeding.data import TOP_SKILLS, skills_for
from backoffice.seeding.runner import run_seed
from backoffice.seeding.seeder import seed_skills


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed skills and their translations")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--letter", help="Only seed the skills filed under these letters")
    group.add_argument("--top100", action="store_true", help="Seed the most requested skills")
    args = parser.parse_args()

    try:
        items = TOP_SKILLS if args.top100 else skills_for(args.letter)
    except KeyError as e:
        print(e.args[0], file=sys.stderr)
        return 2

    try:
        result = asyncio.run(run_seed(lambda session: seed_skills(session, items)))
    except Exception as e:
        print(f"Seed failed: {e}", file=sys.stderr)
        return 1

    print(f"Seed complete. Created: {result.created} skills, Synchronized: {result.synchronized} skills.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
