"""MGMP 2.0 (MOD Geospatial Metadata Profile) dialect of ISO 19139."""

from .classification import SecurityMapping
from .converter import MgmpConverter

__all__ = ["MgmpConverter", "SecurityMapping"]
