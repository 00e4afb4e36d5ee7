"""Encoder/decoder for the Google encoded polyline format.

Each coordinate is stored as the delta from the previous point, scaled by
10^precision, zig-zag encoded and split into 5-bit chunks offset by 63.
"""
from typing import Iterable, List, Tuple

from mapnav.constants import POLYLINE_PRECISION

LatLng = Tuple[float, float]


def _decode_value(encoded: str, index: int) -> Tuple[int, int]:
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise ValueError("Truncated polyline string")
        chunk = ord(encoded[index]) - 63
        if chunk < 0 or chunk > 63:
            raise ValueError(f"Invalid polyline character {encoded[index]!r} at position {index}")
        index += 1
        result |= (chunk & 0x1F) << shift
        shift += 5
        if chunk < 0x20:
            break
    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode_polyline(encoded: str, precision: int = POLYLINE_PRECISION) -> List[LatLng]:
    """Decode an encoded polyline into ``(latitude, longitude)`` pairs.

    Raises:
        ValueError: if the string is truncated or contains invalid characters
    """
    factor = 10 ** precision
    points: List[LatLng] = []
    index = lat = lng = 0

    while index < len(encoded):
        delta_lat, index = _decode_value(encoded, index)
        if index >= len(encoded):
            raise ValueError("Polyline ends with an unpaired latitude")
        delta_lng, index = _decode_value(encoded, index)
        lat += delta_lat
        lng += delta_lng
        try:
            points.append((lat / factor, lng / factor))
        except OverflowError as e:
            raise ValueError(f"Polyline value out of range at position {index}") from e

    return points


def _encode_value(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chunks = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))
    return "".join(chunks)


def encode_polyline(points: Iterable[LatLng], precision: int = POLYLINE_PRECISION) -> str:
    """Encode ``(latitude, longitude)`` pairs as a polyline string."""
    factor = 10 ** precision
    output = []
    prev_lat = prev_lng = 0

    for latitude, longitude in points:
        lat = int(round(latitude * factor))
        lng = int(round(longitude * factor))
        output.append(_encode_value(lat - prev_lat))
        output.append(_encode_value(lng - prev_lng))
        prev_lat, prev_lng = lat, lng

    return "".join(output)
