# custom exception 정의 및 관리


class SubwayRoutingException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationException(SubwayRoutingException):
    def __init__(self, message: str = "필수 경로가 지정되지 않았습니다"):
        super().__init__(message, code="CONFIGURATION_ERROR")


class StationNotFoundException(SubwayRoutingException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


class LineNotFoundException(SubwayRoutingException):
    def __init__(self, message: str = "노선을 찾을 수 없습니다"):
        super().__init__(message, code="LINE_NOT_FOUND")


class MapFileException(SubwayRoutingException):
    def __init__(self, message: str = "노선도 파일을 읽을 수 없습니다"):
        super().__init__(message, code="MAP_FILE_ERROR")


class OutputWriteException(SubwayRoutingException):
    def __init__(self, message: str = "출력 파일을 쓸 수 없습니다"):
        super().__init__(message, code="OUTPUT_WRITE_ERROR")


class UnknownEngineException(SubwayRoutingException):
    def __init__(self, message: str = "알 수 없는 경로 탐색 엔진입니다"):
        super().__init__(message, code="UNKNOWN_ENGINE")
