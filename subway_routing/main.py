"""
Subway Routing - CLI

노선도 파일을 읽어서
- 노선의 전체 역 출력 (-a)
- 두 역 사이 최적 경로 출력 (-b)
- 모든 역 쌍의 최적 경로 출력 (기본)
"""

import argparse
import logging
import sys
from typing import List, Optional

from subway_routing.core.config import (
    OUTPUT_FORMATS,
    ROUTING_ENGINES,
    USAGE,
    settings,
)
from subway_routing.core.exceptions import (
    ConfigurationException,
    SubwayRoutingException,
)
from subway_routing.services import report_service
from subway_routing.services.line_parser_service import get_line_parser_service
from subway_routing.services.pathfinding_service import PathfindingService

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    # 로깅 설정
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subway-routing",
        description="지하철 노선도 최적 경로 탐색",
        allow_abbrev=False,
    )
    parser.add_argument("-map", dest="map_path", metavar="PATH", help="노선도 파일")
    parser.add_argument("-o", dest="output_path", metavar="PATH", help="출력 파일")

    process = parser.add_mutually_exclusive_group()
    process.add_argument("-a", dest="line", metavar="LINE", help="노선의 전체 역 출력")
    process.add_argument(
        "-b",
        dest="stations",
        nargs=2,
        metavar=("STATION_A", "STATION_B"),
        help="두 역 사이 최적 경로 출력",
    )

    parser.add_argument(
        "-engine",
        choices=ROUTING_ENGINES,
        default=None,
        help=f"경로 탐색 엔진 (기본: {settings.ROUTING_ENGINE})",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help=f"전체 역 쌍 계산 워커 수 (기본: {settings.ALL_PAIRS_MAX_WORKERS})",
    )
    parser.add_argument(
        "-format", choices=OUTPUT_FORMATS, default="text", help="출력 형식"
    )
    return parser


def _check_paths(args: argparse.Namespace) -> None:
    """입출력 파일 경로가 지정되었는지 확인"""
    if not args.map_path:
        raise ConfigurationException("the path of input data file is unknown !")
    if not args.output_path:
        raise ConfigurationException("the path of output result file is unknown !")
    if args.workers is not None and args.workers < 1:
        raise ConfigurationException("-workers must be a positive integer")


def process_line_stations(args: argparse.Namespace) -> None:
    """-a: 노선의 전체 역 출력"""
    line_map = get_line_parser_service().load(args.map_path)
    service = PathfindingService(line_map, engine_name=args.engine)

    # 노선이 없으면 출력 파일을 건드리기 전에 실패
    stations = service.list_line_stations(args.line)

    if args.format == "json":
        content = report_service.line_stations_to_response(
            args.line, stations
        ).model_dump_json(indent=2)
    else:
        content = report_service.render_line_stations(stations)
    report_service.write_output(args.output_path, content)


def process_best_route(args: argparse.Namespace) -> None:
    """-b: 두 역 사이 최적 경로 출력"""
    origin, destination = args.stations
    line_map = get_line_parser_service().load(args.map_path)
    service = PathfindingService(line_map, engine_name=args.engine)

    route = service.calculate_route(origin, destination)

    if args.format == "json":
        content = report_service.route_to_response(
            origin, destination, route
        ).model_dump_json(indent=2)
    else:
        content = report_service.render_route(route)
    report_service.write_output(args.output_path, content)


def process_all_routes(args: argparse.Namespace) -> None:
    """기본: 모든 역 쌍의 최적 경로 출력"""
    line_map = get_line_parser_service().load(args.map_path)
    service = PathfindingService(line_map, engine_name=args.engine)

    results = service.calculate_all_routes(max_workers=args.workers)

    if args.format == "json":
        content = report_service.all_routes_to_response(results).model_dump_json(
            indent=2
        )
    else:
        content = report_service.render_all_routes(results)
    report_service.write_output(args.output_path, content)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI 실행, 종료 코드 반환 (성공 0, 실패 1)"""
    args = build_parser().parse_args(argv)

    try:
        _check_paths(args)

        if args.line is not None:
            process_line_stations(args)
        elif args.stations is not None:
            process_best_route(args)
        else:
            process_all_routes(args)

    except ConfigurationException as e:
        print(f"ERROR: {e.message}\n{USAGE}", file=sys.stderr)
        return 1
    except SubwayRoutingException as e:
        logger.error(f"실행 실패 [{e.code}]: {e.message}")
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
