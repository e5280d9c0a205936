# 결과 출력 서비스 => 텍스트/JSON 렌더링 및 파일 쓰기

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from subway_routing.algorithms.route import Route
from subway_routing.core.config import (
    ALL_PAIRS_HEADER,
    ALL_PAIRS_SEPARATOR,
    NO_ROUTE_TOKEN,
    settings,
)
from subway_routing.core.exceptions import OutputWriteException
from subway_routing.models.responses import (
    AllRoutesResponse,
    LineStationsResponse,
    RouteResponse,
    SegmentInfo,
)

logger = logging.getLogger(__name__)


def render_route(route: Route, sep: str = "\n") -> str:
    """-b 모드 출력, 경로가 없으면 ERROR"""
    return route.render(sep=sep, invalid_token=NO_ROUTE_TOKEN)


def render_pair_route(origin: str, destination: str, route: Route) -> str:
    """전체 역 쌍 모드의 한 줄 => [A->B, N 次中转]: 길이, 역, ..."""
    header = ALL_PAIRS_HEADER.format(
        origin=origin, destination=destination, transfers=route.transfer_count()
    )
    return header + render_route(route, sep=ALL_PAIRS_SEPARATOR)


def render_all_routes(results: Sequence[Tuple[str, str, Route]]) -> str:
    return "".join(
        render_pair_route(origin, destination, route) + "\n"
        for origin, destination, route in results
    )


def render_line_stations(stations: Sequence[str]) -> str:
    return "".join(f"{station}\n" for station in stations)


def route_to_response(origin: str, destination: str, route: Route) -> RouteResponse:
    if not route.is_valid:
        return RouteResponse(origin=origin, destination=destination, found=False)

    return RouteResponse(
        origin=origin,
        destination=destination,
        found=True,
        length=int(route.length()),
        transfers=route.transfer_count(),
        segments=[
            SegmentInfo(line=segment.line, stations=list(segment.stations))
            for segment in route.segments
        ],
    )


def all_routes_to_response(
    results: Sequence[Tuple[str, str, Route]]
) -> AllRoutesResponse:
    routes: List[RouteResponse] = [
        route_to_response(origin, destination, route)
        for origin, destination, route in results
    ]
    return AllRoutesResponse(
        total_pairs=len(routes),
        unreachable_pairs=sum(1 for r in routes if not r.found),
        routes=routes,
    )


def line_stations_to_response(line: str, stations: Sequence[str]) -> LineStationsResponse:
    return LineStationsResponse(line=line, count=len(stations), stations=list(stations))


def write_output(
    path: Union[str, Path], content: str, encoding: Optional[str] = None
) -> None:
    """
    결과를 출력 파일에 기록, 실패하면 OutputWriteException

    인코딩을 먼저 끝낸 뒤 파일을 열기 때문에 인코딩 실패 시 기존 파일은 그대로 남는다.
    """
    path = Path(path)
    encoding = encoding or settings.MAP_FILE_ENCODING
    try:
        data = content.encode(encoding)
        with open(path, "wb") as f:
            f.write(data)
    except (OSError, UnicodeError, LookupError) as e:
        logger.error(f"출력 파일 쓰기 실패: {path}: {e}")
        raise OutputWriteException(f'write output file "{path}" failed: {e}')

    logger.info(f"출력 파일 기록 완료: {path} ({len(content)}자)")
