"""Zip/City directory of the delivery area.

Static reference data: each serviceable postal code maps to the canonical
spelling of its city.  Several zips may share one city.
"""

from __future__ import annotations

from typing import Dict, Optional

SERVICE_AREA: Dict[str, str] = {
    "57072": "Siegen",
    "57074": "Siegen",
    "57076": "Siegen",
    "57078": "Siegen",
    "57080": "Siegen",
    "57223": "Kreuztal",
    "57234": "Wilnsdorf",
    "57250": "Netphen",
    "57258": "Freudenberg",
    "57271": "Hilchenbach",
    "57290": "Neunkirchen",
    "57299": "Burbach",
    "57319": "Bad Berleburg",
    "57334": "Bad Laasphe",
    "57339": "Erndtebrück",
    "35708": "Haiger",
    "35683": "Dillenburg",
    "35684": "Dillenburg",
    "35685": "Dillenburg",
    "35745": "Herborn",
    "57555": "Mudersbach",
    "57399": "Kirchhundem",
    "57610": "Altenkirchen",
}


def normalize_city(city: str) -> str:
    return city.strip().casefold()


def is_serviceable(zip_code: str) -> bool:
    """Return ``True`` if *zip_code* lies inside the delivery area."""
    return zip_code.strip() in SERVICE_AREA


def canonical_city(zip_code: str) -> Optional[str]:
    """Return the canonical city for *zip_code*, or ``None`` if unknown."""
    return SERVICE_AREA.get(zip_code.strip())


def city_matches(zip_code: str, city: str) -> bool:
    """Case- and surrounding-whitespace-insensitive city/zip check."""
    expected = canonical_city(zip_code)
    if expected is None:
        return False
    return normalize_city(city) == normalize_city(expected)
