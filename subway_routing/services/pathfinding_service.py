# 경로 찾기 서비스

import json
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Mapping, Optional, Sequence, Tuple

from subway_routing.algorithms.network import SubwayNetwork
from subway_routing.algorithms.route import Route
from subway_routing.core.config import settings
from subway_routing.core.exceptions import (
    LineNotFoundException,
    StationNotFoundException,
)
from subway_routing.services.pathfinding_factory import get_engine_info, get_route_engine

logger = logging.getLogger(__name__)

# (출발역, 도착역, 경로)
PairRoute = Tuple[str, str, Route]


class PathfindingService:

    def __init__(
        self,
        line_map: Mapping[str, Sequence[str]],
        engine_name: Optional[str] = None,
    ):
        self.network = SubwayNetwork(line_map)
        self.engine_name = engine_name or settings.ROUTING_ENGINE
        self.engine = get_route_engine(self.network, self.engine_name)
        self.engine_info = get_engine_info(self.engine_name)
        logger.info(
            f"PathfindingService 초기화 완료 (engine={self.engine_name}, "
            f"{self.engine_info['description']})"
        )

    def list_line_stations(self, line: str) -> List[str]:
        """
        노선의 전체 역을 정차 순서대로 반환

        Raises:
            LineNotFoundException: 노선을 찾을 수 없을 때
        """
        if not self.network.has_line(line):
            logger.error(f"노선 조회 실패: {line}")
            raise LineNotFoundException(f'No line with name "{line}"')
        return list(self.network.line_stations(line))

    def calculate_route(self, origin: str, destination: str) -> Route:
        """
        두 역 사이 최적 경로 계산

        Args:
            origin: 출발역 이름
            destination: 도착역 이름

        Returns:
            Route => 경로가 없으면 무효 경로 (예외 아님)

        Raises:
            StationNotFoundException: 역을 찾을 수 없을 때
        """
        if not self.network.has_station(origin):
            logger.error(f"경로 계산 실패: 출발역 없음 {origin}")
            raise StationNotFoundException(f'No station with name "{origin}"')
        if not self.network.has_station(destination):
            logger.error(f"경로 계산 실패: 도착역 없음 {destination}")
            raise StationNotFoundException(f'No station with name "{destination}"')

        start_time = time.time()
        route = self.engine.best_route(origin, destination)
        elapsed_time = time.time() - start_time

        logger.info(
            f"경로 계산: {origin} → {destination}, "
            f"길이={route.length()}, 환승={route.transfer_count()}, "
            f"계산시간={elapsed_time * 1000:.1f}ms"
        )
        self._log_route_metrics(
            event="route_calculation",
            response_time_ms=elapsed_time * 1000,
            origin=origin,
            destination=destination,
            found=route.is_valid,
        )
        return route

    def calculate_all_routes(self, max_workers: Optional[int] = None) -> List[PairRoute]:
        """
        모든 (A, B) 역 쌍 (A != B) 의 최적 경로 계산

        역 이름 순서로 쌍을 만들고, 스레드 풀 결과도 같은 순서로 반환한다.
        """
        max_workers = max_workers or settings.ALL_PAIRS_MAX_WORKERS
        stations = self.network.stations()
        pairs = [(a, b) for a in stations for b in stations if a != b]

        logger.info(
            f"전체 경로 계산 시작: 역 {len(stations)}개, 쌍 {len(pairs)}개, "
            f"워커 {max_workers}개"
        )
        start_time = time.time()

        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="route_worker_"
        ) as executor:
            routes = list(executor.map(lambda pair: self.engine.best_route(*pair), pairs))

        results = [(a, b, route) for (a, b), route in zip(pairs, routes)]
        elapsed_time = time.time() - start_time
        unreachable = sum(1 for _, _, route in results if not route.is_valid)

        logger.info(
            f"전체 경로 계산 완료: {len(results)}개, 경로 없음 {unreachable}개, "
            f"총 소요시간={elapsed_time:.2f}s"
        )
        self._log_route_metrics(
            event="all_routes_calculation",
            response_time_ms=elapsed_time * 1000,
            pairs=len(results),
            unreachable_pairs=unreachable,
        )
        return results

    def _log_route_metrics(
        self, event: str, response_time_ms: float, **fields
    ) -> None:
        """경로 계산 메트릭 로깅"""
        if not settings.ENABLE_ROUTE_METRICS:
            return

        metrics = {
            "event": event,
            "engine": self.engine_name,
            "engine_class": self.engine_info["engine_class"],
            "response_time_ms": round(response_time_ms, 2),
        }
        metrics.update(fields)

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")
