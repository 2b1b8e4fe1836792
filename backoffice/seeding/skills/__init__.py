"""Skill seed datasets: one module per letter plus the top-skills list.

Lists are kept in seeding order. A name may appear more than once; the
later entry wins, as the seeder synchronizes category and translations.
"""

import string
from importlib import import_module

from .top100 import SKILLS as TOP_SKILLS

SKILLS_BY_LETTER: dict[str, list[dict]] = {
    letter: import_module(f".{letter.lower()}", __name__).SKILLS
    for letter in string.ascii_uppercase
}

__all__ = ["SKILLS_BY_LETTER", "TOP_SKILLS"]
