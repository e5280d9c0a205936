"""
노선망 모델 및 경로 탐색 알고리즘
"""

from subway_routing.algorithms.route import Route, Segment
from subway_routing.algorithms.network import SubwayNetwork
from subway_routing.algorithms.route_search import RouteSearch
from subway_routing.algorithms.shortest_path import ShortestPathSearch

__all__ = [
    "Route",
    "Segment",
    "SubwayNetwork",
    "RouteSearch",
    "ShortestPathSearch",
]
