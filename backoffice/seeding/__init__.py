"""Taxonomy seeding (skills, translations)."""

from .seeder import SeedResult, seed_skills, seed_translations, upsert_translation

__all__ = ["SeedResult", "seed_skills", "seed_translations", "upsert_translation"]
