from dataclasses import dataclass, field
from typing import List, Tuple, Union
import math

EMPTY_SEGMENTS: Tuple["Segment", ...] = ()


@dataclass(frozen=True, slots=True)
class Segment:
    line: str
    # 노선 위의 연속된 역들 => 첫 역은 이전 구간의 마지막 역(환승역)과 같음
    stations: Tuple[str, ...]

    @property
    def first_station(self) -> str:
        return self.stations[0]

    @property
    def last_station(self) -> str:
        return self.stations[-1]


# 구간(segment)이 하나도 없으면 무효 경로 => "경로 없음"을 데이터로 표현
# 한 번 만들어진 경로는 변경하지 않고 merge로 새 경로를 만든다
@dataclass(frozen=True, slots=True)
class Route:
    segments: Tuple[Segment, ...] = field(default_factory=lambda: EMPTY_SEGMENTS)

    @classmethod
    def invalid(cls) -> "Route":
        return cls()

    @classmethod
    def single_line(cls, line: str, stations) -> "Route":
        """단일 노선 경로 생성, 역이 비어 있으면 무효 경로"""
        stations = tuple(stations)
        if not stations:
            return cls.invalid()
        return cls(segments=(Segment(line=line, stations=stations),))

    @property
    def is_valid(self) -> bool:
        return bool(self.segments)

    @property
    def lines(self) -> List[str]:
        return [segment.line for segment in self.segments]

    @property
    def origin(self) -> str:
        return self.segments[0].first_station

    @property
    def destination(self) -> str:
        return self.segments[-1].last_station

    def transfer_count(self) -> int:
        """환승 횟수 = 구간 수 - 1 (무효 경로는 0)"""
        if not self.segments:
            return 0
        return len(self.segments) - 1

    def length(self) -> Union[int, float]:
        """
        경유하는 역의 개수, 환승역은 한 번만 센다

        무효 경로는 math.inf => 최솟값 비교에서 절대 선택되지 않음
        """
        if not self.segments:
            return math.inf

        length = 1
        for segment in self.segments:
            length += len(segment.stations) - 1
        return length

    def merge(self, other: "Route") -> "Route":
        """두 경로를 이어 붙인 새 경로, 한쪽이라도 무효면 무효"""
        if not self.is_valid or not other.is_valid:
            return Route.invalid()
        return Route(segments=self.segments + other.segments)

    def station_sequence(self) -> List[str]:
        """출발역부터 도착역까지 전체 역 순서 (환승역 중복 제거)"""
        if not self.segments:
            return []

        sequence = list(self.segments[0].stations)
        for segment in self.segments[1:]:
            sequence.extend(segment.stations[1:])
        return sequence

    def transfer_stations(self) -> List[str]:
        return [segment.first_station for segment in self.segments[1:]]

    def render(self, sep: str = "\n", invalid_token: str = "ERROR") -> str:
        """
        경로를 문자열로 출력

        길이, 첫 구간의 모든 역, 이후 구간마다 환승 노선 이름과
        (환승역을 제외한) 구간의 역 순서로 출력한다.
        """
        if not self.segments:
            return invalid_token

        tokens = [str(self.length())]
        tokens.extend(self.segments[0].stations)

        for segment in self.segments[1:]:
            tokens.append(segment.line)
            # 환승 후 첫 역은 출력하지 않음
            tokens.extend(segment.stations[1:])

        return sep.join(tokens)
