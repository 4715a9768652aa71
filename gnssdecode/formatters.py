"""JSON formatting utilities for decoded sentences."""

import json
from typing import Any

from gnssdecode.nmea import (
    ChecksumMismatchError,
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    Location,
    NMEAError,
    RMCData,
    Sentence,
    UnsupportedSentenceTypeError,
    VTGData,
)

__all__ = [
    "error_kind",
    "error_to_dict",
    "format_error_message",
    "format_sentence_message",
    "sentence_to_dict",
]


def _location_to_dict(location: Location) -> dict[str, Any]:
    utc_time = location.utc_time
    timestamp = location.timestamp
    return {
        "lat": location.latitude_degrees,
        "lon": location.longitude_degrees,
        "alt": location.altitude_meters,
        "accuracy": location.accuracy,
        "vertical_accuracy": location.vertical_accuracy,
        "utc_time": utc_time.isoformat(timespec="milliseconds") if utc_time else None,
        "time_of_day_ms": location.time_of_day_milliseconds,
        "timestamp": timestamp.isoformat(timespec="milliseconds") if timestamp else None,
        "speed_knots": location.speed_knots,
        "speed_ms": location.speed_meters_per_second,
        "course_degrees": location.course_degrees,
    }


def _data_to_dict(data: Any) -> dict[str, Any]:
    match data:
        case GSAData():
            return {
                "operation_mode": data.operation_mode.name if data.operation_mode else None,
                "fix": data.fix.name if data.fix else None,
                "satellites_in_use": list(data.satellites_in_use),
                "pdop": data.position_dilution_of_precision,
                "hdop": data.horizontal_dilution_of_precision,
                "vdop": data.vertical_dilution_of_precision,
                "system_id": data.system_id,
            }
        case GLLData():
            return {
                "location": _location_to_dict(data.location),
                "valid": data.valid,
                "mode": data.mode,
            }
        case GGAData():
            return {
                "location": _location_to_dict(data.location),
                "fix_quality": data.fix_quality,
                "num_satellites": data.num_satellites,
                "geoid_separation_m": data.geoid_separation_meters,
                "dgps_age_s": data.dgps_age_seconds,
                "dgps_station_id": data.dgps_station_id,
                "valid": data.valid,
            }
        case RMCData():
            return {
                "location": _location_to_dict(data.location),
                "valid": data.valid,
                "magnetic_variation_degrees": data.magnetic_variation_degrees,
                "mode": data.mode,
                "navigational_status": data.navigational_status,
            }
        case VTGData():
            return {
                "location": _location_to_dict(data.location),
                "course_magnetic_degrees": data.course_magnetic_degrees,
                "speed_kmh": data.speed_kilometers_per_hour,
                "mode": data.mode,
                "valid": data.valid,
            }
        case GSVData():
            return {
                "total_messages": data.total_messages,
                "message_number": data.message_number,
                "satellites_in_view": data.satellites_in_view,
                "satellites": [
                    {
                        "prn": satellite.prn,
                        "elevation": satellite.elevation_degrees,
                        "azimuth": satellite.azimuth_degrees,
                        "snr": satellite.snr_db,
                    }
                    for satellite in data.satellites
                ],
                "signal_id": data.signal_id,
            }
    raise TypeError(f"cannot format {type(data).__name__}")


def sentence_to_dict(sentence: Sentence) -> dict[str, Any]:
    """Convert a decoded sentence into a JSON-compatible dictionary."""
    return {
        "type": sentence.sentence_type.lower(),
        "talker_id": sentence.talker_id,
        "gnss_mode": sentence.gnss_mode.name,
        **_data_to_dict(sentence.data),
    }


def error_kind(error: NMEAError) -> str:
    """Short machine-readable name for an error class."""
    if isinstance(error, UnsupportedSentenceTypeError):
        return "unsupported_sentence_type"
    if isinstance(error, ChecksumMismatchError):
        return "checksum_mismatch"
    return "format"


def error_to_dict(error: NMEAError) -> dict[str, Any]:
    """Convert a decode failure into a JSON-compatible dictionary."""
    return {
        "type": "error",
        "error": error_kind(error),
        "message": str(error),
        "sentence": error.sentence,
    }


def format_sentence_message(sentence: Sentence) -> str:
    """Serialize a decoded sentence into a JSON string."""
    return json.dumps(sentence_to_dict(sentence))


def format_error_message(error: NMEAError) -> str:
    """Serialize a decode failure into a JSON string."""
    return json.dumps(error_to_dict(error))
