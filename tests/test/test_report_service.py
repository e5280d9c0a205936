"""
report_service 테스트
"""

import pytest

from subway_routing.algorithms.route import Route
from subway_routing.core.exceptions import OutputWriteException
from subway_routing.models.responses import RouteResponse
from subway_routing.services import report_service


@pytest.fixture
def transfer_route():
    return Route.single_line("L1", ["A", "B", "C"]).merge(
        Route.single_line("L2", ["C", "D"])
    )


class TestRendering:
    """텍스트 렌더링 테스트"""

    def test_render_route_newline(self, transfer_route):
        assert report_service.render_route(transfer_route) == "4\nA\nB\nC\nL2\nD"

    def test_render_route_invalid(self):
        assert report_service.render_route(Route.invalid()) == "ERROR"

    def test_render_pair_route(self, transfer_route):
        line = report_service.render_pair_route("A", "D", transfer_route)

        assert line == "[A->D, 1 次中转]: 4, A, B, C, L2, D"

    def test_render_pair_route_unreachable(self):
        line = report_service.render_pair_route("A", "Z", Route.invalid())

        assert line == "[A->Z, 0 次中转]: ERROR"

    def test_render_all_routes(self, transfer_route):
        content = report_service.render_all_routes(
            [("A", "D", transfer_route), ("A", "Z", Route.invalid())]
        )

        assert content.splitlines() == [
            "[A->D, 1 次中转]: 4, A, B, C, L2, D",
            "[A->Z, 0 次中转]: ERROR",
        ]
        assert content.endswith("\n")

    def test_render_line_stations(self):
        assert report_service.render_line_stations(["A", "B"]) == "A\nB\n"


class TestResponses:
    """pydantic 응답 변환 테스트"""

    def test_route_to_response(self, transfer_route):
        response = report_service.route_to_response("A", "D", transfer_route)

        assert response.found is True
        assert response.length == 4
        assert response.transfers == 1
        assert [s.line for s in response.segments] == ["L1", "L2"]
        assert response.segments[1].stations == ["C", "D"]

    def test_route_to_response_not_found(self):
        response = report_service.route_to_response("A", "Z", Route.invalid())

        assert response.found is False
        assert response.length is None
        assert response.segments == []

    def test_response_json_roundtrip(self, transfer_route):
        response = report_service.route_to_response("A", "D", transfer_route)

        assert RouteResponse.model_validate_json(response.model_dump_json()) == response

    def test_all_routes_to_response(self, transfer_route):
        response = report_service.all_routes_to_response(
            [("A", "D", transfer_route), ("A", "Z", Route.invalid())]
        )

        assert response.total_pairs == 2
        assert response.unreachable_pairs == 1

    def test_line_stations_to_response(self):
        response = report_service.line_stations_to_response("L1", ("A", "B", "C"))

        assert response.count == 3
        assert response.stations == ["A", "B", "C"]


class TestWriteOutput:
    """출력 파일 쓰기 테스트"""

    def test_write_output(self, tmp_path):
        path = tmp_path / "out.txt"

        report_service.write_output(path, "서울역\n")

        assert path.read_text(encoding="utf-8") == "서울역\n"

    def test_write_output_overwrites(self, tmp_path):
        path = tmp_path / "out.txt"
        path.write_text("old", encoding="utf-8")

        report_service.write_output(path, "new")

        assert path.read_text(encoding="utf-8") == "new"

    def test_write_output_missing_directory(self, tmp_path):
        with pytest.raises(OutputWriteException) as exc_info:
            report_service.write_output(tmp_path / "no" / "such" / "out.txt", "x")

        assert exc_info.value.code == "OUTPUT_WRITE_ERROR"

    def test_write_output_unencodable_keeps_previous(self, tmp_path):
        """인코딩할 수 없는 내용이면 실패, 기존 파일은 그대로"""
        path = tmp_path / "out.txt"
        path.write_text("previous", encoding="utf-8")

        with pytest.raises(OutputWriteException) as exc_info:
            report_service.write_output(path, "[A->B, 0 次中转]: 2, A, B", encoding="latin-1")

        assert exc_info.value.code == "OUTPUT_WRITE_ERROR"
        assert path.read_text(encoding="utf-8") == "previous"

    def test_write_output_unknown_encoding(self, tmp_path):
        path = tmp_path / "out.txt"

        with pytest.raises(OutputWriteException):
            report_service.write_output(path, "A\n", encoding="no-such-codec")

        assert not path.exists()
