"""
Sunrise and sunset calculations.

Implements the NOAA low-precision solar position model. All times are UTC
minutes since midnight of the calendar date being evaluated.

Model outline:
- Julian day at 00:00 UTC -> Julian centuries since J2000.0
- Sun's mean anomaly plus equation of centre -> true ecliptic longitude
- Obliquity of the ecliptic -> solar declination
- Equation of time + longitude -> solar noon
- Hour angle at zenith 90.833 deg (refraction + solar radius) -> sunrise/sunset

Accuracy is about a minute for non-polar latitudes; close to the polar
circles the hour angle is very sensitive to declination.
"""

import logging
import math
from datetime import date

from .types import MINUTES_PER_DAY, PolarSentinel, SolarEvent, validate_coordinates

logger = logging.getLogger(__name__)

# Julian day constants
UNIX_EPOCH_JULIAN_DAY = 2440587.5  # 1970-01-01T00:00Z
J2000_JULIAN_DAY = 2451545.0  # 2000-01-01T12:00Z
DAYS_PER_JULIAN_CENTURY = 36525.0

# Orbital constants (degrees)
PERIHELION_DEGREES = 102.9372  # Longitude of Earth's perihelion
OBLIQUITY_DEGREES = 23.439

# Sun's centre 50' below the horizon: 34' refraction + 16' solar radius
SUNRISE_ZENITH_DEGREES = 90.833

_UNIX_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()


def julian_day(day: date) -> float:
    """Julian day number at 00:00 UTC on `day`."""
    return (day.toordinal() - _UNIX_EPOCH_ORDINAL) + UNIX_EPOCH_JULIAN_DAY


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000_JULIAN_DAY) / DAYS_PER_JULIAN_CENTURY


def mean_anomaly(t: float) -> float:
    """Sun's mean anomaly in degrees, reduced to [0, 360)."""
    return (357.52911 + t * (35999.05029 - 0.0001537 * t)) % 360


def true_longitude(t: float) -> float:
    """Sun's true ecliptic longitude in degrees (not reduced)."""
    m = mean_anomaly(t)
    m_rad = math.radians(m)
    center = (
        math.sin(m_rad) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(2 * m_rad) * (0.019993 - 0.000101 * t)
        + math.sin(3 * m_rad) * 0.000289
    )
    return m + center + 180 + PERIHELION_DEGREES


def sun_declination(t: float) -> float:
    """Solar declination in radians."""
    obliquity = math.radians(OBLIQUITY_DEGREES - 0.00000036 * t)
    return math.asin(math.sin(obliquity) * math.sin(math.radians(true_longitude(t))))


def equation_of_time(t: float) -> float:
    """
    Equation of time in minutes (apparent minus mean solar time).

    Four-term series in the Sun's mean anomaly.
    """
    m = math.radians(357.52911 + t * 35999.05029)
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(m)
        - 0.032077 * math.sin(m)
        - 0.014615 * math.cos(2 * m)
        - 0.040849 * math.sin(2 * m)
    )


def solar_noon_utc_minutes(jd: float, longitude: float) -> float:
    """
    Solar noon in UTC minutes from midnight.

    The equation of time is evaluated at local noon rather than at 00:00 UTC,
    hence the longitude shift of the Julian day.
    """
    t = julian_century(jd - longitude / 360)
    return 720 - 4 * longitude - equation_of_time(t)


def hour_angle_cosine(latitude: float, declination: float) -> float:
    """
    Cosine of the sunrise hour angle.

    Outside [-1, 1] the sun does not cross the horizon that day:
    > 1 means it stays below (polar night), < -1 means it stays above.
    """
    lat_rad = math.radians(latitude)
    return (math.cos(math.radians(SUNRISE_ZENITH_DEGREES)) - math.sin(lat_rad) * math.sin(declination)) / (
        math.cos(lat_rad) * math.cos(declination)
    )


def normalize_minutes(minutes: float) -> int:
    """Round to the nearest whole minute and wrap into [0, 1440)."""
    return round(minutes % MINUTES_PER_DAY) % MINUTES_PER_DAY


def solar_event(latitude: float, longitude: float, day: date) -> SolarEvent:
    """
    Calculate sunrise and sunset (UTC) for a location on a calendar date.

    Args:
        latitude: Decimal degrees, -90 to 90
        longitude: Decimal degrees, -180 to 180 (positive east)
        day: Calendar date, evaluated at 00:00 UTC

    Returns:
        SolarEvent with minutes-of-day in [0, 1440), or polar sentinels

    Raises:
        InvalidCoordinateError: If latitude or longitude is out of range
    """
    validate_coordinates(latitude, longitude)

    jd = julian_day(day)
    declination = sun_declination(julian_century(jd))
    cos_h = hour_angle_cosine(latitude, declination)

    if cos_h > 1:
        logger.debug("No sunrise at (%s, %s) on %s", latitude, longitude, day)
        return SolarEvent(PolarSentinel.NO_SUNRISE, PolarSentinel.NO_SUNRISE, 0)
    if cos_h < -1:
        logger.debug("No sunset at (%s, %s) on %s", latitude, longitude, day)
        return SolarEvent(PolarSentinel.NO_SUNSET, PolarSentinel.NO_SUNSET, MINUTES_PER_DAY)

    # Degrees -> hours (15 deg/hour) -> minutes
    half_day_minutes = math.degrees(math.acos(cos_h)) / 15 * 60
    noon = solar_noon_utc_minutes(jd, longitude)

    sunrise = normalize_minutes(noon - half_day_minutes)
    sunset = normalize_minutes(noon + half_day_minutes)

    # Day length rounds to 0 or 1440 minutes right at the polar circle edge;
    # equal endpoints cannot tell the two apart, so report the sentinel.
    if sunrise == sunset:
        if half_day_minutes < MINUTES_PER_DAY / 4:
            return SolarEvent(PolarSentinel.NO_SUNRISE, PolarSentinel.NO_SUNRISE, 0)
        return SolarEvent(PolarSentinel.NO_SUNSET, PolarSentinel.NO_SUNSET, MINUTES_PER_DAY)

    daylight = (sunset - sunrise + MINUTES_PER_DAY) % MINUTES_PER_DAY

    return SolarEvent(sunrise, sunset, daylight)
