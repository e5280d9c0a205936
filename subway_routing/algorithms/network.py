# 지하철 노선망 모델
import logging
from collections import defaultdict, deque
from typing import Dict, List, Mapping, Sequence, Tuple

from subway_routing.algorithms.route import Route
from subway_routing.core.exceptions import (
    LineNotFoundException,
    StationNotFoundException,
)
from subway_routing.models.domain import Station, TransferPlan

logger = logging.getLogger(__name__)


class SubwayNetwork:
    """
    노선 이름 -> 역 순서 맵으로부터 구축되는 읽기 전용 노선망

    구축 이후에는 어떤 상태도 바뀌지 않으므로 여러 스레드가 공유해도 안전하다.
    존재하지 않는 역/노선을 조회하면 즉시 예외를 던진다.
    """

    def __init__(self, line_map: Mapping[str, Sequence[str]]):
        # 노선 이름 순서로 저장 => 역의 노선 목록 순서가 항상 동일
        self.lines_map: Dict[str, Tuple[str, ...]] = {
            line: tuple(line_map[line]) for line in sorted(line_map)
        }

        self._build_stations()
        self._build_positions()
        self._build_components()

        logger.info(
            f"노선망 구축 완료: 노선 {len(self.lines_map)}개, "
            f"역 {len(self.stations_map)}개, "
            f"환승역 {sum(1 for s in self.stations_map.values() if s.is_transfer_station)}개, "
            f"연결 요소 {self.component_count}개"
        )

    def _build_stations(self):
        """역 등록 => 1단계: 역별 노선 수집, 2단계: 불변 Station 생성"""
        station_lines = defaultdict(list)
        for line, stations in self.lines_map.items():
            for station in stations:
                if line not in station_lines[station]:
                    station_lines[station].append(line)

        self.stations_map: Dict[str, Station] = {
            name: Station(name=name, lines=tuple(lines))
            for name, lines in sorted(station_lines.items())
        }

    def _build_positions(self):
        """(역, 노선) -> 노선 위 인덱스 맵"""
        self.station_order_map: Dict[Tuple[str, str], int] = {}
        for line, stations in self.lines_map.items():
            for i, station in enumerate(stations):
                # 중복 역은 처음 위치를 사용
                self.station_order_map.setdefault((station, line), i)

    def _build_components(self):
        """역 -> 연결 요소 번호, 노선 단위 BFS"""
        self.component_map: Dict[str, int] = {}
        visited_lines = set()
        component = 0

        for start in self.stations_map:
            if start in self.component_map:
                continue
            self.component_map[start] = component
            queue = deque([start])
            while queue:
                station = queue.popleft()
                for line in self.stations_map[station].lines:
                    if line in visited_lines:
                        continue
                    visited_lines.add(line)
                    for other in self.lines_map[line]:
                        if other not in self.component_map:
                            self.component_map[other] = component
                            queue.append(other)
            component += 1

        self.component_count = component

    # ------------------------------------------------------------------
    # 조회
    # ------------------------------------------------------------------

    def has_station(self, station: str) -> bool:
        return station in self.stations_map

    def has_line(self, line: str) -> bool:
        return line in self.lines_map

    def stations(self) -> List[str]:
        """전체 역 이름 (정렬)"""
        return list(self.stations_map.keys())

    def lines(self) -> List[str]:
        """전체 노선 이름 (정렬)"""
        return list(self.lines_map.keys())

    def get_station(self, station: str) -> Station:
        try:
            return self.stations_map[station]
        except KeyError:
            raise StationNotFoundException(f"역을 찾을 수 없습니다: {station}")

    def line_stations(self, line: str) -> Tuple[str, ...]:
        try:
            return self.lines_map[line]
        except KeyError:
            raise LineNotFoundException(f"노선을 찾을 수 없습니다: {line}")

    def lines_of(self, station: str) -> Tuple[str, ...]:
        return self.get_station(station).lines

    def is_transfer_station(self, station: str) -> bool:
        return self.get_station(station).is_transfer_station

    def is_connected(self, station_a: str, station_b: str) -> bool:
        """두 역이 환승을 거쳐서라도 이어져 있는지"""
        self.get_station(station_a)
        self.get_station(station_b)
        return self.component_map[station_a] == self.component_map[station_b]

    def _position(self, station: str, line: str) -> int:
        self.line_stations(line)
        position = self.station_order_map.get((station, line))
        if position is None:
            self.get_station(station)
            raise StationNotFoundException(
                f"역이 노선에 없습니다: {station} ({line})"
            )
        return position

    # ------------------------------------------------------------------
    # 구조 질의
    # ------------------------------------------------------------------

    def shared_lines(self, station_a: str, station_b: str) -> List[str]:
        """두 역을 동시에 지나는 모든 노선 (여러 개일 수 있음)"""
        station_b_info = self.get_station(station_b)
        return [
            line
            for line in self.get_station(station_a).lines
            if station_b_info.is_on_line(line)
        ]

    def segment_between(self, line: str, station_a: str, station_b: str) -> List[str]:
        """
        노선 위에서 A부터 B까지의 연속 구간 (양 끝 포함)

        A의 위치가 B보다 뒤면 역순으로 만들어서 구간은 항상 A에서 시작해 B에서 끝난다.
        """
        stations = self.line_stations(line)
        i_a = self._position(station_a, line)
        i_b = self._position(station_b, line)

        if i_a <= i_b:
            return list(stations[i_a : i_b + 1])
        return list(stations[i_b : i_a + 1])[::-1]

    def transfer_stations(self, line_a: str, line_b: str) -> List[str]:
        """두 노선에 모두 속한 역, line_a의 정차 순서대로"""
        self.line_stations(line_b)
        return [
            station
            for station in self.line_stations(line_a)
            if self.stations_map[station].is_on_line(line_b)
        ]

    def transfer_plans(self, station_a: str, station_b: str) -> List[TransferPlan]:
        """A의 노선에서 B의 노선으로 한 번 갈아타는 모든 방법"""
        plans = []
        lines_of_b = self.lines_of(station_b)
        for line_a in self.lines_of(station_a):
            for line_b in lines_of_b:
                if line_a == line_b:
                    continue
                for station_t in self.transfer_stations(line_a, line_b):
                    plans.append(
                        TransferPlan(
                            line_a=line_a, transfer_station=station_t, line_b=line_b
                        )
                    )
        return plans

    def nearby_transfer_stations(self, station: str) -> List[str]:
        """
        역이 속한 각 노선에서 앞/뒤 방향으로 가장 가까운 환승역

        노선당 최대 2개, 여러 노선에서 같은 역이 나오면 한 번만 포함한다.
        """
        nearby = []
        for line in self.lines_of(station):
            stations = self.lines_map[line]
            ipos = self.station_order_map[(station, line)]

            # 앞 방향
            for i in range(ipos + 1, len(stations)):
                if self.stations_map[stations[i]].is_transfer_station:
                    nearby.append(stations[i])
                    break

            # 뒤 방향
            for i in range(ipos - 1, -1, -1):
                if self.stations_map[stations[i]].is_transfer_station:
                    nearby.append(stations[i])
                    break

        # 순서를 유지한 중복 제거
        return list(dict.fromkeys(s for s in nearby if s != station))

    def segment_route(self, line: str, station_a: str, station_b: str) -> Route:
        """segment_between 결과를 단일 노선 경로로 감싼다"""
        return Route.single_line(line, self.segment_between(line, station_a, station_b))
