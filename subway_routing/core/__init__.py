"""
Core 설정 및 커스텀 예외
"""

from subway_routing.core.config import settings

from subway_routing.core.exceptions import (
    SubwayRoutingException,
    ConfigurationException,
    StationNotFoundException,
    LineNotFoundException,
    MapFileException,
    OutputWriteException,
    UnknownEngineException,
)

__all__ = [
    "settings",
    "SubwayRoutingException",
    "ConfigurationException",
    "StationNotFoundException",
    "LineNotFoundException",
    "MapFileException",
    "OutputWriteException",
    "UnknownEngineException",
]
