from typing import Tuple
from dataclasses import dataclass, field

# domain 정의


@dataclass(frozen=True)
class Station:
    name: str  # 역 이름이 곧 key
    # 역이 속한 노선 => 노선 이름 순서로 정렬되어 있음
    lines: Tuple[str, ...] = field(default_factory=tuple)

    def is_on_line(self, line: str) -> bool:
        return line in self.lines

    @property
    def is_transfer_station(self) -> bool:
        """두 개 이상의 노선이 지나가면 환승역"""
        return len(self.lines) > 1


# 환승 1회 탐색에서만 쓰이는 임시 구조
@dataclass(frozen=True)
class TransferPlan:
    line_a: str
    transfer_station: str
    line_b: str
