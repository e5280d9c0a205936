"""
Pytest 설정 및 공통 Fixture
"""

import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from subway_routing.algorithms.network import SubwayNetwork  # noqa: E402


@pytest.fixture
def simple_line_map():
    """환승 1회 시나리오: L1과 L2가 C에서 만남"""
    return {
        "L1": ["A", "B", "C"],
        "L2": ["C", "D", "E"],
    }


@pytest.fixture
def disjoint_line_map():
    """서로 연결되지 않은 두 노선"""
    return {
        "L1": ["A", "B"],
        "L2": ["C", "D"],
    }


@pytest.fixture
def two_transfer_line_map():
    """A -> E 는 환승 2회가 필요 (T1, T2)"""
    return {
        "L1": ["A", "B", "T1"],
        "L2": ["T1", "C", "T2"],
        "L3": ["T2", "D", "E"],
    }


@pytest.fixture
def cyclic_transfer_line_map():
    """
    환승역 T1, T2가 서로를 가까운 환승역으로 가리키는 노선망
    X, Y는 어디와도 연결되지 않음
    """
    return {
        "L1": ["A", "T1", "T2"],
        "L2": ["T1", "T2"],
        "L3": ["X", "Y"],
    }


@pytest.fixture
def parallel_line_map():
    """A와 D를 동시에 지나는 완행(L1)과 급행(L2)"""
    return {
        "L1": ["A", "B", "C", "D"],
        "L2": ["A", "D"],
    }


@pytest.fixture
def seoul_line_map():
    """테스트용 샘플 노선도 (서울 지하철 일부)"""
    return {
        "1호선": ["소요산", "동두천", "서울역", "시청", "종각", "종로3가"],
        "2호선": ["시청", "을지로입구", "을지로3가", "동대문역사문화공원", "강남"],
        "3호선": ["구파발", "종로3가", "을지로3가", "충무로", "양재"],
        "4호선": ["당고개", "동대문역사문화공원", "충무로", "서울역", "사당"],
    }


@pytest.fixture
def simple_network(simple_line_map):
    return SubwayNetwork(simple_line_map)


@pytest.fixture
def seoul_network(seoul_line_map):
    return SubwayNetwork(seoul_line_map)


@pytest.fixture
def seoul_map_text(seoul_line_map):
    """노선도 파일 형식 => 노선마다 한 줄, 콤마로 구분"""
    return "\n".join(
        ",".join([line] + stations) for line, stations in seoul_line_map.items()
    ) + "\n"


@pytest.fixture
def seoul_map_file(tmp_path, seoul_map_text):
    path = tmp_path / "subway.txt"
    path.write_text(seoul_map_text, encoding="utf-8")
    return path


@pytest.fixture
def simple_map_file(tmp_path):
    path = tmp_path / "simple.txt"
    path.write_text("L1,A,B,C L2,C,D,E\n", encoding="utf-8")
    return path


@pytest.fixture
def disjoint_map_file(tmp_path):
    path = tmp_path / "disjoint.txt"
    path.write_text("L1,A,B\nL2,C,D\n", encoding="utf-8")
    return path


@pytest.fixture
def twin_grid_line_map():
    """서로 끊어진 5x5 격자 두 개 (가로/세로 노선), 모든 교차점이 환승역"""
    line_map = {}
    for prefix in ("P", "Q"):
        for i in range(5):
            line_map[f"{prefix}row{i}"] = [f"{prefix}{i}_{j}" for j in range(5)]
            line_map[f"{prefix}col{i}"] = [f"{prefix}{j}_{i}" for j in range(5)]
    return line_map
