# 다중 전략 재귀 경로 탐색 (heuristic 엔진)
import logging
from typing import Dict, FrozenSet, Optional, Tuple

from subway_routing.algorithms.network import SubwayNetwork
from subway_routing.algorithms.route import Route
from subway_routing.core.config import settings

logger = logging.getLogger(__name__)


def _shorter(candidate: Route, best: Route) -> Route:
    """길이가 엄격히 짧을 때만 교체 => 길이가 같으면 먼저 찾은 경로 유지"""
    if candidate.length() < best.length():
        return candidate
    return best


class RouteSearch:
    """
    점점 우회하는 전략을 차례로 시도하며 경유 역 수가 가장 적은 경로를 찾는다

    1. 직통 (환승 0회)
    2. 환승 1회
    3. 출발역에서 가까운 환승역으로 한 칸씩 확장 (재귀)
    4. 도착역에서 가까운 환승역으로 한 칸씩 확장 (재귀)
    5. 양쪽 끝에서 동시에 확장 (재귀)

    재귀 전략은 현재 경로에 이미 있는 역을 다시 방문하지 않고,
    max_depth 이상 깊어지지 않으므로 끊어진 노선망에서도 항상 종료된다.
    """

    def __init__(self, network: SubwayNetwork, max_depth: Optional[int] = None):
        self.network = network
        self.max_depth = (
            max_depth if max_depth is not None else settings.ROUTE_SEARCH_MAX_DEPTH
        )
        # (A, B) -> 단순 경로, 노선망이 불변이므로 경로와 무관하게 재사용 가능
        self._simple_routes: Dict[Tuple[str, str], Route] = {}

    # ------------------------------------------------------------------
    # 단순 경로 (재귀의 base case)
    # ------------------------------------------------------------------

    def best_direct_route(self, station_a: str, station_b: str) -> Route:
        """같은 노선으로 가는 경로 중 가장 짧은 것, 없으면 무효 경로"""
        best = Route.invalid()
        for line in self.network.shared_lines(station_a, station_b):
            best = _shorter(
                self.network.segment_route(line, station_a, station_b), best
            )
        return best

    def best_one_transfer_route(self, station_a: str, station_b: str) -> Route:
        """환승 1회 경로 중 가장 짧은 것"""
        best = Route.invalid()
        for plan in self.network.transfer_plans(station_a, station_b):
            route = self.best_direct_route(station_a, plan.transfer_station).merge(
                self.best_direct_route(plan.transfer_station, station_b)
            )
            best = _shorter(route, best)
        return best

    def best_simple_route(self, station_a: str, station_b: str) -> Route:
        key = (station_a, station_b)
        cached = self._simple_routes.get(key)
        if cached is not None:
            return cached

        best = _shorter(self.best_direct_route(station_a, station_b), Route.invalid())
        best = _shorter(self.best_one_transfer_route(station_a, station_b), best)

        self._simple_routes[key] = best
        return best

    # ------------------------------------------------------------------
    # 재귀 전략
    # ------------------------------------------------------------------

    def extend_from_origin(
        self,
        station_a: str,
        station_b: str,
        visited: Optional[FrozenSet[str]] = None,
        depth: int = 0,
    ) -> Route:
        """A -> AT -> ... -> B, A 쪽에서 가까운 환승역으로 넘어가며 탐색"""
        best = self.best_simple_route(station_a, station_b)
        if best.is_valid or depth >= self.max_depth:
            return best

        if visited is None:
            visited = frozenset([station_a])

        for station_at in self.network.nearby_transfer_stations(station_a):
            if station_at in visited:
                continue
            route = self.best_direct_route(station_a, station_at).merge(
                self.extend_from_origin(
                    station_at, station_b, visited | {station_at}, depth + 1
                )
            )
            best = _shorter(route, best)

        return best

    def extend_from_destination(
        self,
        station_a: str,
        station_b: str,
        visited: Optional[FrozenSet[str]] = None,
        depth: int = 0,
    ) -> Route:
        """A -> ... -> BT -> B, B 쪽에서 가까운 환승역으로 넘어가며 탐색"""
        best = self.best_simple_route(station_a, station_b)
        if best.is_valid or depth >= self.max_depth:
            return best

        if visited is None:
            visited = frozenset([station_b])

        for station_bt in self.network.nearby_transfer_stations(station_b):
            if station_bt in visited:
                continue
            # 재귀 결과(A -> BT)가 앞, 직통(BT -> B)이 뒤
            route = self.extend_from_destination(
                station_a, station_bt, visited | {station_bt}, depth + 1
            ).merge(self.best_direct_route(station_bt, station_b))
            best = _shorter(route, best)

        return best

    def extend_from_both_ends(
        self,
        station_a: str,
        station_b: str,
        visited: Optional[FrozenSet[str]] = None,
        depth: int = 0,
    ) -> Route:
        """A -> AT -> ... -> BT -> B, 양쪽에서 동시에 확장"""
        best = self.best_simple_route(station_a, station_b)
        if best.is_valid or depth >= self.max_depth:
            return best

        if visited is None:
            visited = frozenset([station_a, station_b])

        stations_bt = self.network.nearby_transfer_stations(station_b)
        for station_at in self.network.nearby_transfer_stations(station_a):
            if station_at in visited:
                continue
            for station_bt in stations_bt:
                if station_bt in visited:
                    continue
                route = (
                    self.best_direct_route(station_a, station_at)
                    .merge(
                        self.extend_from_both_ends(
                            station_at,
                            station_bt,
                            visited | {station_at, station_bt},
                            depth + 1,
                        )
                    )
                    .merge(self.best_direct_route(station_bt, station_b))
                )
                best = _shorter(route, best)

        return best

    def best_route(self, station_a: str, station_b: str) -> Route:
        """세 가지 재귀 전략을 모두 시도해서 가장 짧은 경로 반환"""
        # 존재하지 않는 역이면 여기서 예외
        self.network.get_station(station_a)
        self.network.get_station(station_b)

        # 끊어진 노선망이면 재귀 탐색 없이 바로 무효 경로
        if not self.network.is_connected(station_a, station_b):
            logger.debug(f"heuristic 탐색: {station_a} → {station_b}, 연결되지 않은 역")
            return Route.invalid()

        best = Route.invalid()
        best = _shorter(self.extend_from_origin(station_a, station_b), best)
        best = _shorter(self.extend_from_destination(station_a, station_b), best)
        best = _shorter(self.extend_from_both_ends(station_a, station_b), best)

        logger.debug(
            f"heuristic 탐색: {station_a} → {station_b}, "
            f"길이={best.length()}, 환승={best.transfer_count()}"
        )
        return best
