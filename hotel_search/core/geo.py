"""Great-circle distance between two coordinates."""

import math

MILES_PER_DEGREE = 60 * 1.1515
KM_PER_MILE = 1.609344

UNIT_KM = "km"
UNIT_MILES = "miles"


def distance_between(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: str = UNIT_MILES,
    absolute: bool = True,
) -> float:
    """Spherical law of cosines distance, rounded to two decimals.

    With ``absolute`` set the hemisphere sign of every coordinate is dropped
    before converting to radians.
    """
    if absolute:
        lat1, lon1, lat2, lon2 = abs(lat1), abs(lon1), abs(lat2), abs(lon2)

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    theta = math.radians(lon1 - lon2)

    cosine = math.sin(phi1) * math.sin(phi2) + math.cos(phi1) * math.cos(phi2) * math.cos(theta)
    # Float drift can push coincident or antipodal points outside acos' domain.
    cosine = max(-1.0, min(1.0, cosine))

    distance = math.degrees(math.acos(cosine)) * MILES_PER_DEGREE
    if unit in (UNIT_KM, "kilometers"):
        distance *= KM_PER_MILE
    return round(distance, 2)
