# 최단 경로 탐색 (shortest_path 엔진)
import heapq
import itertools
import logging
from typing import Dict, List, Optional, Set, Tuple

from subway_routing.algorithms.network import SubwayNetwork
from subway_routing.algorithms.route import Route, Segment

logger = logging.getLogger(__name__)

# (station, line)
State = Tuple[str, str]
# (경유 역 수, 환승 횟수) => 사전식 비교
Cost = Tuple[int, int]


class ShortestPathSearch:
    """
    (역, 노선) 상태 위의 label-setting 탐색

    - 같은 노선의 인접역으로 이동: (역 +1, 환승 +0)
    - 같은 역에서 다른 노선으로 환승: (역 +0, 환승 +1)

    비용을 사전식으로 비교하므로 경유 역 수가 최소인 경로 중 환승이 가장 적은
    경로를 반환한다. 확정된 상태는 다시 꺼내지 않으므로 항상 종료된다.
    """

    def __init__(self, network: SubwayNetwork):
        self.network = network

    def _neighbors(self, state: State, cost: Cost):
        station, line = state
        length, transfers = cost

        # 직진 => 앞/뒤 인접역
        stations = self.network.lines_map[line]
        position = self.network.station_order_map[(station, line)]
        for i in (position - 1, position + 1):
            if 0 <= i < len(stations):
                yield (stations[i], line), (length + 1, transfers)

        # 환승
        for other_line in self.network.lines_of(station):
            if other_line != line:
                yield (station, other_line), (length, transfers + 1)

    def best_route(self, station_a: str, station_b: str) -> Route:
        origin_lines = self.network.lines_of(station_a)
        self.network.get_station(station_b)

        if station_a == station_b:
            return Route.single_line(origin_lines[0], [station_a])

        counter = itertools.count()  # 비용이 같으면 먼저 넣은 상태 우선
        best_cost: Dict[State, Cost] = {}
        parent: Dict[State, Optional[State]] = {}
        settled: Set[State] = set()
        heap = []

        for line in origin_lines:
            state = (station_a, line)
            best_cost[state] = (1, 0)
            parent[state] = None
            heapq.heappush(heap, (1, 0, next(counter), state))

        while heap:
            length, transfers, _, state = heapq.heappop(heap)
            if state in settled:
                continue
            settled.add(state)

            if state[0] == station_b:
                route = self._reconstruct(state, parent)
                logger.debug(
                    f"최단 경로 탐색: {station_a} → {station_b}, "
                    f"길이={route.length()}, 환승={route.transfer_count()}, "
                    f"확정 상태={len(settled)}"
                )
                return route

            for next_state, next_cost in self._neighbors(state, (length, transfers)):
                if next_state in settled:
                    continue
                if next_cost < best_cost.get(next_state, (float("inf"), float("inf"))):
                    best_cost[next_state] = next_cost
                    parent[next_state] = state
                    heapq.heappush(heap, (*next_cost, next(counter), next_state))

        logger.debug(f"최단 경로 탐색: {station_a} → {station_b}, 경로 없음")
        return Route.invalid()

    def _reconstruct(self, state: State, parent: Dict[State, Optional[State]]) -> Route:
        """leaf -> root 역추적 후 노선이 바뀌는 지점마다 구간을 나눈다"""
        path: List[State] = []
        cur: Optional[State] = state
        while cur is not None:
            path.append(cur)
            cur = parent[cur]
        path = path[::-1]  # root -> leaf

        segments = []
        current_line = path[0][1]
        current_stations = [path[0][0]]

        for station, line in path[1:]:
            if line == current_line:
                current_stations.append(station)
            else:
                # 환승 => 같은 역에서 새 구간 시작
                segments.append(Segment(line=current_line, stations=tuple(current_stations)))
                current_line = line
                current_stations = [station]

        segments.append(Segment(line=current_line, stations=tuple(current_stations)))
        return Route(segments=tuple(segments))
