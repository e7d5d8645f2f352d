"""Deterministic SQL builder for the JHU CSSE COVID-19 tables."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .config import settings

ALLOWED_TABLES = ("confirmed_cases", "deaths", "recovered_cases")


class InvalidTableError(ValueError):
    """Raised when a query targets a table outside the fixed dataset tables."""


def build_covid19_query(
    table_name: str, country: Optional[str]
) -> Tuple[str, Dict[str, str]]:
    """Build a single-table query and its bound parameters.

    The country is never interpolated into the SQL text; it is returned as the
    ``@country`` query parameter and only when a country is supplied.
    """
    if table_name not in ALLOWED_TABLES:
        raise InvalidTableError(f"Invalid table name {table_name}")

    sql = f"SELECT *\nFROM `{settings.dataset}.{table_name}`"
    params: Dict[str, str] = {}
    if country:
        sql += "\nWHERE country_region = @country"
        params["country"] = country

    return sql, params
