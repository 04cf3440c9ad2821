"""Spatial hashing functionality: quantization, regions, flat indices."""

from gridecs.core.spatial.models import SpatialGrid
from gridecs.core.spatial.operations import flatten, inbounds, quantize, region

__all__ = [
    "SpatialGrid",
    "quantize",
    "region",
    "flatten",
    "inbounds",
]
