"""
Subway Routing - 지하철 노선도 기반 최적 경로 탐색

노선 이름 -> 역 순서 맵으로 노선망을 구축하고
경유 역 수가 가장 적은(동률이면 환승이 적은) 경로를 찾는다.
"""

__version__ = "1.0.0"
