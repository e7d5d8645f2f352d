from typing import Any, Dict, List


def jhu_row(country: str, latest: int) -> Dict[str, Any]:
    """A JHU CSSE row: location columns, then one column per day, newest last."""
    return {
        "province_state": None,
        "country_region": country,
        "latitude": 0.0,
        "longitude": 0.0,
        "location_geom": None,
        "_1_22_20": 0,
        "_1_23_20": max(latest - 1, 0),
        "_1_24_20": latest,
    }


def jhu_rows(country: str, *latest: int) -> List[Dict[str, Any]]:
    return [jhu_row(country, value) for value in latest]
