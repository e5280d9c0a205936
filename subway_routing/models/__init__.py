"""
domain 객체 및 pydantic 응답 모델
"""

from subway_routing.models.domain import Station, TransferPlan
from subway_routing.models.responses import (
    SegmentInfo,
    RouteResponse,
    AllRoutesResponse,
    LineStationsResponse,
)

__all__ = [
    "Station",
    "TransferPlan",
    "SegmentInfo",
    "RouteResponse",
    "AllRoutesResponse",
    "LineStationsResponse",
]
