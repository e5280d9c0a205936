from typing import List, Optional
from pydantic import BaseModel, Field

# 출력 포맷(json) 별 응답 구조 정의


# 경로를 구성하는 단일 노선 구간
class SegmentInfo(BaseModel):
    line: str = Field(..., description="노선 이름")
    stations: List[str] = Field(..., description="구간의 역 순서 (환승역 포함)")


# 두 역 사이 최적 경로
class RouteResponse(BaseModel):
    origin: str = Field(..., description="출발역")
    destination: str = Field(..., description="도착역")
    found: bool = Field(..., description="경로 존재 여부")
    length: Optional[int] = Field(None, description="경유 역 수 (경로가 없으면 null)")
    transfers: int = Field(default=0, description="환승 횟수")
    segments: List[SegmentInfo] = Field(default_factory=list, description="노선 구간 리스트")


# 전체 역 쌍 경로
class AllRoutesResponse(BaseModel):
    total_pairs: int = Field(..., description="계산한 역 쌍 수")
    unreachable_pairs: int = Field(..., description="경로가 없는 역 쌍 수")
    routes: List[RouteResponse] = Field(default_factory=list, description="경로 리스트")


# 노선의 역 목록
class LineStationsResponse(BaseModel):
    line: str = Field(..., description="노선 이름")
    count: int = Field(..., description="역 수")
    stations: List[str] = Field(..., description="역 순서")
