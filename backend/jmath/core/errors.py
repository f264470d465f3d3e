from typing import Optional

MISSING_API_KEY_MESSAGE = "서버에 API 키가 설정되지 않았습니다."
MALFORMED_RESPONSE_MESSAGE = "AI 답변의 형식이 올바르지 않습니다."
INTERNAL_ERROR_MESSAGE = "서버 내부 오류: {detail}"


class ApiError(Exception):
    """Error that maps directly onto an `{"error": message}` response"""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(ApiError):
    status_code = 400


class ConfigurationError(ApiError):
    status_code = 500

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(message)


class UpstreamError(ApiError):
    """Non-success answer from the completion API, passed through with its status"""

    def __init__(self, status_code: int, upstream_message: str):
        super().__init__(f"API 호출 실패: {upstream_message}", status_code)
        self.upstream_message = upstream_message


class EmptyCompletionError(ApiError):
    status_code = 500


class MalformedResponseError(ApiError):
    status_code = 500

    def __init__(self, message: str = MALFORMED_RESPONSE_MESSAGE):
        super().__init__(message)
