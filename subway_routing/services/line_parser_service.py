import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from subway_routing.core.config import settings
from subway_routing.core.exceptions import MapFileException

logger = logging.getLogger(__name__)


class LineParserService:
    """
    노선도 파일 파싱 서비스
    지원 데이터 포맷: 공백(띄어쓰기/줄바꿈)으로 구분된 `노선,역1,역2,...` 토큰
    예) "1号线,刘园,西横堤,果酒厂 2号线,曹庄,卞兴,芥园西道"
    """

    FIELD_DELIMITER = ","

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or settings.MAP_FILE_ENCODING

    def parse(self, text: str) -> Dict[str, List[str]]:
        """
        노선도 텍스트를 노선 이름 -> 역 순서 맵으로 변환

        필드가 2개 미만이거나 노선 이름/역이 비어 있는 토큰은 무시하고,
        같은 노선이 다시 나오면 나중 것으로 덮어쓴다.
        """
        line_map: Dict[str, List[str]] = {}
        skipped = 0

        for token in text.split():
            words = token.split(self.FIELD_DELIMITER)
            if len(words) < 2:
                skipped += 1
                continue

            line_name = words[0]
            stations = [w for w in words[1:] if w]
            if not line_name or not stations:
                skipped += 1
                continue
            if line_name in line_map:
                logger.warning(f"중복된 노선 정의, 마지막 정의 사용: {line_name}")
            line_map[line_name] = stations

        if skipped:
            logger.debug(f"형식이 맞지 않는 토큰 {skipped}개 무시")
        return line_map

    def load(self, path: Union[str, Path]) -> Dict[str, List[str]]:
        """노선도 파일을 읽어서 파싱, 읽을 수 없으면 MapFileException"""
        path = Path(path)
        try:
            with open(path, "r", encoding=self.encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"노선도 파일 읽기 실패: {path}: {e}")
            raise MapFileException(f'read input file "{path}" failed: {e}')

        line_map = self.parse(text)
        logger.info(f"노선도 로드 완료: {path}, 노선 {len(line_map)}개")
        return line_map


_line_parser_service: Optional[LineParserService] = None


def get_line_parser_service() -> LineParserService:
    """line parser 서비스 싱글톤 인스턴스 반환"""
    global _line_parser_service
    if _line_parser_service is None:
        _line_parser_service = LineParserService()
    return _line_parser_service
