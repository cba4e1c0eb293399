"""Straight-line route estimation for quoting before a real route is known.

Uses the Haversine great-circle distance between pickup and store, inflated
by a road factor, and an average city speed plus a fixed pickup/dropoff
buffer for time.
"""

import math
from math import atan2, cos, radians, sin, sqrt

from pydantic import BaseModel

from .models import RouteInfo

EARTH_RADIUS_MILES = 3959.0

# Straight line * 1.3 approximates actual road distance
ROAD_FACTOR = 1.3
AVERAGE_CITY_SPEED_MPH = 25.0
PICKUP_DROPOFF_BUFFER_MIN = 10
TIME_CAP_BUFFER_MIN = 10


class RouteEstimate(BaseModel):
    distance_miles: float
    estimated_minutes: int
    time_cap_minutes: int

    def to_route_info(self) -> RouteInfo:
        return RouteInfo(distance=self.distance_miles, estimated_time=self.estimated_minutes)


def haversine_distance_miles(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate the great-circle distance between two points in miles.

    Args:
        lat1: Latitude of first point in degrees
        lon1: Longitude of first point in degrees
        lat2: Latitude of second point in degrees
        lon2: Longitude of second point in degrees

    Returns:
        Distance between the two points in miles
    """
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_MILES * c


def estimate_route(
    pickup_lat: float,
    pickup_lng: float,
    store_lat: float,
    store_lng: float,
) -> RouteEstimate:
    """Estimate road distance and drive time from a pickup address to a store."""
    straight_miles = haversine_distance_miles(pickup_lat, pickup_lng, store_lat, store_lng)
    road_miles = straight_miles * ROAD_FACTOR
    driving_minutes = road_miles / AVERAGE_CITY_SPEED_MPH * 60
    estimated_minutes = math.ceil(driving_minutes + PICKUP_DROPOFF_BUFFER_MIN)

    return RouteEstimate(
        distance_miles=round(road_miles, 1),
        estimated_minutes=estimated_minutes,
        time_cap_minutes=estimated_minutes + TIME_CAP_BUFFER_MIN,
    )
