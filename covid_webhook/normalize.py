"""Deterministic normalization of user-supplied country names to dataset values."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

# Agent entity values -> country_region values used by the JHU CSSE tables
COUNTRY_NAME_CORRECTIONS: Mapping[str, str] = MappingProxyType(
    {
        "United States of America": "US",
        "United States": "US",
        "Cape Verde": "Cabo Verde",
        "Democratic Republic of the Congo": "Congo (Kinshasa)",
        "Republic of the Congo": "Congo (Brazzaville)",
        "Côte d'Ivoire": "Cote d'Ivoire",
        "Vatikan": "Holy See",
        "South Korea": "Korea, South",
        "Taiwan": "Taiwan*",
    }
)


def normalize_country(country: Optional[str]) -> Optional[str]:
    """Return the canonical dataset name for a known alias, else the input unchanged."""
    if country in COUNTRY_NAME_CORRECTIONS:
        return COUNTRY_NAME_CORRECTIONS[country]
    return country
