import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "Subway Routing"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # 경로 탐색 엔진 => shortest_path(기본) / heuristic
    ROUTING_ENGINE: str = os.getenv("ROUTING_ENGINE", "shortest_path")

    # heuristic 엔진의 재귀 깊이 제한
    # 연결된 역 쌍이라도 환승역이 많으면 탐색량이 깊이에 대해 지수적으로 늘어남
    ROUTE_SEARCH_MAX_DEPTH: int = int(os.getenv("ROUTE_SEARCH_MAX_DEPTH", 8))

    # 전체 역 쌍 계산 시 워커 수
    ALL_PAIRS_MAX_WORKERS: int = int(os.getenv("ALL_PAIRS_MAX_WORKERS", 4))

    MAP_FILE_ENCODING: str = os.getenv("MAP_FILE_ENCODING", "utf-8")

    # 메트릭 로그 활성화 플래그
    ENABLE_ROUTE_METRICS: bool = (
        os.getenv("ENABLE_ROUTE_METRICS", "true").lower() == "true"
    )


settings = Settings()  # 모듈화


ROUTING_ENGINES = ["shortest_path", "heuristic"]

OUTPUT_FORMATS = ["text", "json"]

# 경로를 찾지 못한 경우 출력 토큰
NO_ROUTE_TOKEN = "ERROR"

# 전체 역 쌍 출력 => [A->B, N 次中转]: ...
ALL_PAIRS_SEPARATOR = ", "
ALL_PAIRS_HEADER = "[{origin}->{destination}, {transfers} 次中转]: "

USAGE = (
    "\nlist stations of LINE:\n\n"
    "  > subway-routing -a LINE -map INPUT.txt -o OUTPUT.txt\n\n"
    "best path from STATION_A to STATION_B:\n\n"
    "  > subway-routing -b STATION_A STATION_B -map INPUT.txt -o OUTPUT.txt\n\n"
    "best paths between every pair of stations:\n\n"
    "  > subway-routing -map INPUT.txt -o OUTPUT.txt\n"
)
