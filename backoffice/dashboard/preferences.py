"""Server-side storage shape of admin dashboard preferences.

The KPI grid's tile selection (``settings.kpis``) is stored apart from the
layout, in ``User.admin_dashboard_kpi_config``, and folded back in on read.
"""

from typing import Any, Optional

from .registry import ADMIN_KPI_GRID

INVALID_FORMAT = 'Invalid preference format. "preferences" must be an array.'
INVALID_ENTRY = 'Invalid preference format. Every entry needs a string "key".'


class PreferenceFormatError(ValueError):
    pass


def is_reset(preferences: Any) -> bool:
    """``null`` and ``[]`` both mean "back to defaults"."""
    return preferences is None or (isinstance(preferences, list) and not preferences)


def validate_preferences(preferences: Any) -> list[dict]:
    if not isinstance(preferences, list):
        raise PreferenceFormatError(INVALID_FORMAT)
    for entry in preferences:
        if not isinstance(entry, dict) or not isinstance(entry.get("key"), str):
            raise PreferenceFormatError(INVALID_ENTRY)
    return preferences


def split_kpi_settings(preferences: list[dict]) -> tuple[list[dict], Optional[list]]:
    """Separate the KPI grid's ``settings.kpis`` from the layout entries."""
    stored: list[dict] = []
    kpis: Optional[list] = None
    for entry in preferences:
        entry = dict(entry)
        settings = entry.get("settings")
        if entry["key"] == ADMIN_KPI_GRID and isinstance(settings, dict) and "kpis" in settings:
            settings = dict(settings)
            kpis = list(settings.pop("kpis") or [])
            if settings:
                entry["settings"] = settings
            else:
                entry.pop("settings")
        stored.append(entry)
    return stored, kpis


def merge_kpi_settings(preferences: Optional[list[dict]], kpi_config: Optional[list]) -> Optional[list[dict]]:
    """Re-attach the stored KPI selection to the KPI grid entry."""
    if not preferences:
        return preferences
    merged = []
    for entry in preferences:
        entry = dict(entry)
        if kpi_config and entry.get("key") == ADMIN_KPI_GRID:
            entry["settings"] = {**(entry.get("settings") or {}), "kpis": list(kpi_config)}
        merged.append(entry)
    return merged
