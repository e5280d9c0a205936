# 경로 탐색 엔진 팩토리

import logging
from typing import Optional, Union

from subway_routing.algorithms.network import SubwayNetwork
from subway_routing.algorithms.route_search import RouteSearch
from subway_routing.algorithms.shortest_path import ShortestPathSearch
from subway_routing.core.config import ROUTING_ENGINES, settings
from subway_routing.core.exceptions import UnknownEngineException

logger = logging.getLogger(__name__)

RouteEngine = Union[ShortestPathSearch, RouteSearch]

ENGINE_DESCRIPTIONS = {
    "shortest_path": "(역, 노선) 상태 최단 경로 탐색 (최적해 보장)",
    "heuristic": "가까운 환승역 기반 다중 전략 재귀 탐색",
}


def get_route_engine(
    network: SubwayNetwork, engine_name: Optional[str] = None
) -> RouteEngine:
    """
    설정에 따라 적절한 경로 탐색 엔진 반환

    - shortest_path: ShortestPathSearch
    - heuristic: RouteSearch (ROUTE_SEARCH_MAX_DEPTH로 재귀 깊이 제한)

    Raises:
        UnknownEngineException: 지원하지 않는 엔진 이름
    """
    engine_name = engine_name or settings.ROUTING_ENGINE

    if engine_name == "shortest_path":
        logger.info("shortest_path 경로 탐색 엔진 사용")
        return ShortestPathSearch(network)

    if engine_name == "heuristic":
        logger.info(
            f"heuristic 경로 탐색 엔진 사용 (max_depth={settings.ROUTE_SEARCH_MAX_DEPTH})"
        )
        return RouteSearch(network)

    raise UnknownEngineException(
        f"알 수 없는 경로 탐색 엔진입니다: {engine_name} "
        f"(지원: {', '.join(ROUTING_ENGINES)})"
    )


def get_engine_info(engine_name: Optional[str] = None) -> dict:
    """현재 사용 중인 엔진 정보 반환"""
    engine_name = engine_name or settings.ROUTING_ENGINE
    if engine_name not in ENGINE_DESCRIPTIONS:
        raise UnknownEngineException(f"알 수 없는 경로 탐색 엔진입니다: {engine_name}")

    return {
        "engine_type": engine_name,
        "engine_class": (
            ShortestPathSearch.__name__
            if engine_name == "shortest_path"
            else RouteSearch.__name__
        ),
        "description": ENGINE_DESCRIPTIONS[engine_name],
    }
