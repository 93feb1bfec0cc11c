"""Domain package exports for the bounded volume model and its errors."""

from .errors import InvalidBoundsError, InvalidGeometryError, LevelMeterError
from .volume import MAX_VOLUME, MIN_VOLUME, VolumeBounds, VolumeModel

__all__ = [
    "InvalidBoundsError",
    "InvalidGeometryError",
    "LevelMeterError",
    "MAX_VOLUME",
    "MIN_VOLUME",
    "VolumeBounds",
    "VolumeModel",
]
