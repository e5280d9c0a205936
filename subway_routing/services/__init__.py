"""
Business logic services
"""

from subway_routing.services.line_parser_service import LineParserService
from subway_routing.services.pathfinding_service import PathfindingService

__all__ = [
    "LineParserService",
    "PathfindingService",
]
