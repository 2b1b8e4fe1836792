"""Seed data for the skill taxonomy and for list items missing a translation."""

from .skills import SKILLS_BY_LETTER, TOP_SKILLS

# Translations for list items that were created without one
MISSING_TRANSLATIONS: list[dict] = [
    {"key": "coachingStyles_1", "listType": "coachingStyles",
     "translations": {"de": "Freundlich", "fr": "Amical", "es": "Amistoso"}},
    {"key": "specialties_1", "listType": "specialties",
     "translations": {"de": "Karriereentwicklung", "fr": "Développement de carrière", "es": "Desarrollo Profesional"}},
    {"key": "specialties_2", "listType": "specialties",
     "translations": {"de": "Stressbewältigung", "fr": "Gestion du stress", "es": "Gestión del Estrés"}},
    {"key": "specialties_3", "listType": "specialties",
     "translations": {"de": "Zeitmanagement", "fr": "Gestion du temps", "es": "Gestión del Tiempo"}},
]


def skills_for(letters: str | None = None) -> list[dict]:
    """Seed items for the given initial letters (all letters when None)."""
    if not letters:
        return [item for group in SKILLS_BY_LETTER.values() for item in group]
    wanted = {c.upper() for c in letters}
    unknown = wanted - set(SKILLS_BY_LETTER)
    if unknown:
        raise KeyError(f"No skill data for letter(s): {', '.join(sorted(unknown))}")
    return [item for letter in sorted(wanted) for item in SKILLS_BY_LETTER[letter]]
