"""NMEA data types for parsed sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero" - 0.0 is a legitimate coordinate, speed or DOP value.

    2. Shared Location: GLL, GGA, RMC and VTG all describe parts of the same
       position/velocity state. Each decoder fills in the members its
       sentence carries and leaves the rest as None.

    3. Tagged union: every sentence record carries a ``sentence_type`` class
       tag, and ``Sentence.data`` is one of the record types. Consumers use
       ``match sentence.data:`` rather than casting.

    4. Separate valid flag: ``valid`` indicates navigation validity, NOT parse
       validity. A successfully parsed sentence may still report no fix.

    5. Frozen dataclasses: records are built once per parse call and never
       modified afterwards.
"""

import datetime
import enum
from dataclasses import dataclass
from typing import ClassVar, Union

from gnssdecode.nmea.talker import GnssMode

# 1 knot = 1852 m / 3600 s
KNOTS_TO_METERS_PER_SECOND = 1852.0 / 3600.0


class OperationMode(enum.Enum):
    """GSA selection mode: how the receiver switches between 2D and 3D."""

    AUTO = "A"
    MANUAL = "M"


class Fix(enum.IntEnum):
    """GSA fix dimensionality."""

    NO_FIX = 1
    FIX_2D = 2
    FIX_3D = 3


@dataclass(frozen=True)
class Location:
    """Position and velocity state reported by a sentence.

    Attributes:
        latitude_degrees: Latitude in decimal degrees, positive=North.
            Converted from NMEA's DDMM.MMMM format.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Converted from NMEA's DDDMM.MMMM format.

        altitude_meters: Altitude above mean sea level (MSL) in meters.

        accuracy: Horizontal dilution of precision. Lower is better
            (< 1 = ideal, 1-2 = excellent, 2-5 = good, > 10 = poor).

        vertical_accuracy: Vertical dilution of precision.

        utc_time: UTC time of day with millisecond resolution.

        timestamp: Full UTC date and time. Only sentences carrying a date
            (RMC) set this.

        speed_knots: Speed over ground in knots.

        course_degrees: Course over ground relative to true north,
            0.0 to 360.0.
    """

    latitude_degrees: float | None = None
    longitude_degrees: float | None = None
    altitude_meters: float | None = None
    accuracy: float | None = None
    vertical_accuracy: float | None = None
    utc_time: datetime.time | None = None
    timestamp: datetime.datetime | None = None
    speed_knots: float | None = None
    course_degrees: float | None = None

    @property
    def time_of_day_milliseconds(self) -> int | None:
        """Milliseconds elapsed since UTC midnight, or None if no time."""
        if self.utc_time is None:
            return None
        seconds = (
            self.utc_time.hour * 3600
            + self.utc_time.minute * 60
            + self.utc_time.second
        )
        return seconds * 1000 + self.utc_time.microsecond // 1000

    @property
    def speed_meters_per_second(self) -> float | None:
        """Speed over ground in m/s, derived from knots."""
        if self.speed_knots is None:
            return None
        return self.speed_knots * KNOTS_TO_METERS_PER_SECOND


@dataclass(frozen=True)
class GSAData:
    """Parsed GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        operation_mode: AUTO or MANUAL 2D/3D switching, None if empty.
        fix: Fix dimensionality, None if empty.
        satellites_in_use: PRNs of satellites used in the solution, in
            sentence order. Unused slots are omitted.
        position_dilution_of_precision: PDOP, None if empty.
        horizontal_dilution_of_precision: HDOP, None if empty.
        vertical_dilution_of_precision: VDOP, None if empty.
        system_id: GNSS system ID (NMEA 4.10+), None if absent.
    """

    sentence_type: ClassVar[str] = "GSA"

    operation_mode: OperationMode | None
    fix: Fix | None
    satellites_in_use: tuple[int, ...]
    position_dilution_of_precision: float | None
    horizontal_dilution_of_precision: float | None
    vertical_dilution_of_precision: float | None
    system_id: int | None = None


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence.

    Attributes:
        location: Latitude, longitude and UTC time of the position.
        valid: True if the status field is 'A' (data valid).
        mode: FAA mode indicator (NMEA 2.3+), None if missing.
    """

    sentence_type: ClassVar[str] = "GLL"

    location: Location
    valid: bool
    mode: str | None = None


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        location: Latitude, longitude, altitude, accuracy (HDOP) and UTC
            time of the fix.

        fix_quality: GPS fix quality indicator, None if empty:
            0 = Invalid (no fix)
            1 = GPS fix (SPS - Standard Positioning Service)
            2 = DGPS fix (Differential GPS)
            4 = RTK Fixed (centimeter-level accuracy)
            5 = RTK Float (decimeter-level accuracy, converging)
            6 = Dead reckoning mode

        num_satellites: Number of satellites used in the fix solution.

        geoid_separation_meters: Height of geoid (MSL) above WGS84 ellipsoid.
            ellipsoid_height = altitude_meters + geoid_separation_meters.

        dgps_age_seconds: Age of differential corrections, None if unused.

        dgps_station_id: Differential reference station ID, None if unused.

        valid: Navigation validity flag. True only if fix_quality > 0.
    """

    sentence_type: ClassVar[str] = "GGA"

    location: Location
    fix_quality: int | None
    num_satellites: int | None
    geoid_separation_meters: float | None
    dgps_age_seconds: float | None
    dgps_station_id: str | None
    valid: bool


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        location: Latitude, longitude, speed (knots), course, UTC time and,
            when the date field is present, the full timestamp.
        valid: True if the status field is 'A', False for 'V' (warning).
        magnetic_variation_degrees: Magnetic variation, positive East and
            negative West. None if empty.
        mode: FAA mode indicator (NMEA 2.3+), None if missing.
        navigational_status: Navigational status (NMEA 4.10+), None if
            missing.
    """

    sentence_type: ClassVar[str] = "RMC"

    location: Location
    valid: bool
    magnetic_variation_degrees: float | None = None
    mode: str | None = None
    navigational_status: str | None = None


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        location: Course over ground (true north) and speed in knots.
            ``location.course_degrees`` is None when stationary because
            GNSS cannot determine heading without movement.
        course_magnetic_degrees: Course relative to magnetic north.
        speed_kilometers_per_hour: Ground speed in km/h.
        mode: FAA mode indicator (NMEA 2.3+):
            'A' = Autonomous, 'D' = Differential, 'E' = Estimated,
            'N' = Not valid. None for older receivers.
        valid: True only if mode is present and not 'N'.
    """

    sentence_type: ClassVar[str] = "VTG"

    location: Location
    course_magnetic_degrees: float | None
    speed_kilometers_per_hour: float | None
    mode: str | None
    valid: bool


@dataclass(frozen=True)
class Satellite:
    """One satellite entry of a GSV sentence.

    Attributes:
        prn: Satellite PRN / ID number.
        elevation_degrees: Elevation above the horizon, 0-90.
        azimuth_degrees: Azimuth from true north, 0-359.
        snr_db: Carrier-to-noise density in dB-Hz. None when not tracked.
    """

    prn: int
    elevation_degrees: int | None
    azimuth_degrees: int | None
    snr_db: int | None


@dataclass(frozen=True)
class GSVData:
    """Parsed GSV (GNSS Satellites in View) sentence.

    A full sky view spans ``total_messages`` sentences; each line is decoded
    on its own and combining them is left to the caller.

    Attributes:
        total_messages: Number of GSV sentences in this group.
        message_number: Position of this sentence within the group (1-based).
        satellites_in_view: Total satellites in view across the group.
        satellites: Up to four satellites described by this sentence.
        signal_id: GNSS signal ID (NMEA 4.10+), None if absent.
    """

    sentence_type: ClassVar[str] = "GSV"

    total_messages: int
    message_number: int
    satellites_in_view: int | None
    satellites: tuple[Satellite, ...]
    signal_id: str | None = None


SentenceData = Union[GSAData, GLLData, GGAData, RMCData, VTGData, GSVData]


@dataclass(frozen=True)
class Sentence:
    """A decoded sentence with its address.

    Attributes:
        talker_id: Two-letter talker prefix, e.g. "GP".
        sentence_type: Three-letter sentence ID, e.g. "GGA".
        gnss_mode: Constellation resolved from ``talker_id``.
        data: The decoded record; its type matches ``sentence_type``.

    Example:
        >>> sentence = parse("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
        >>> match sentence.data:
        ...     case VTGData(location=location):
        ...         location.speed_knots
        5.5
    """

    talker_id: str
    sentence_type: str
    gnss_mode: GnssMode
    data: SentenceData
