"""
lambstock/exceptions.py - 통합 예외 계층 구조

lambstock 전체에서 사용되는 예외 클래스들을 정의합니다.
모든 예외는 종료 코드(exit_code)를 가지며, CLI 최상위에서 잡혀
stderr 메시지와 함께 프로세스를 종료시킵니다.

예외 계층 구조:
    LambstockError (베이스, exit 1)
    ├── ArgError (인자/태그 필터 형식 오류, exit 2)
    ├── AuthError (자격 증명 확인 실패, exit 3)
    ├── NetworkError (요청 실패/타임아웃, exit 4)
    └── APIError (업스트림 에러 응답/잘못된 페이로드, exit 5)

Usage:
    from lambstock.exceptions import translate_error

    try:
        for page in paginator.paginate():
            ...
    except (ClientError, BotoCoreError) as e:
        raise translate_error(e, "lambda", "list_functions") from e
"""

from __future__ import annotations

from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    HTTPClientError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
    ProfileNotFound,
    SSOError,
    TokenRetrievalError,
)

# =============================================================================
# 베이스 예외
# =============================================================================


class LambstockError(Exception):
    """lambstock 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    exit_code = 1

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


class ArgError(LambstockError):
    """잘못된 서브명령/옵션/태그 필터 형식

    reason은 오류 종류 식별자(tag_format, tag_empty_key, tag_empty_value, sort_key)로,
    CLI가 사용자 언어로 메시지를 다시 만들 때 사용합니다.
    """

    exit_code = 2

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        reason: str | None = None,
        params: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.argument = argument
        self.reason = reason
        self.params = params or {}
        if argument is not None:
            self.details["argument"] = argument
        if reason is not None:
            self.details["reason"] = reason


class AuthError(LambstockError):
    """자격 증명 확인 실패 (프로파일 없음, 키 없음, 토큰 만료, 권한 없음 등)"""

    exit_code = 3


class NetworkError(LambstockError):
    """요청 실패 또는 타임아웃"""

    exit_code = 4


class APIError(LambstockError):
    """AWS API 호출 실패

    업스트림이 에러 응답을 돌려주었거나 응답 형식이 예상과 다른 경우입니다.
    """

    exit_code = 5

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        return self.message


# =============================================================================
# botocore 예외 변환
# =============================================================================

# 자격 증명 관련 에러 코드 키워드 (소문자 비교)
_AUTH_CODE_KEYWORDS = (
    "accessdenied",
    "unauthorized",
    "forbidden",
    "unrecognizedclient",
    "invalidclienttokenid",
    "expiredtoken",
    "signaturedoesnotmatch",
    "missingauthenticationtoken",
    "authfailure",
)

# 네트워크 관련 에러 코드 키워드
_NETWORK_CODE_KEYWORDS = ("timeout", "timedout", "requesttimeout")

_AUTH_EXCEPTIONS = (
    NoCredentialsError,
    PartialCredentialsError,
    ProfileNotFound,
    NoRegionError,
    SSOError,
    TokenRetrievalError,
)


def is_auth_error_code(error_code: str) -> bool:
    """에러 코드가 자격 증명/권한 문제를 나타내는지 확인"""
    code = error_code.lower()
    return any(x in code for x in _AUTH_CODE_KEYWORDS)


def is_network_error_code(error_code: str) -> bool:
    """에러 코드가 타임아웃 등 네트워크 문제를 나타내는지 확인"""
    code = error_code.lower()
    return any(x in code for x in _NETWORK_CODE_KEYWORDS)


def translate_error(error: Exception, service: str, operation: str) -> LambstockError:
    """botocore 예외를 lambstock 예외로 변환

    예외 타입을 먼저 보고, ClientError는 에러 코드 키워드로 분류합니다.

    Args:
        error: boto3/botocore 호출 중 발생한 예외
        service: AWS 서비스 이름 (lambda, resourcegroupstaggingapi)
        operation: API 작업 이름 (list_functions, get_resources)

    Returns:
        AuthError, NetworkError 또는 APIError
    """
    if isinstance(error, LambstockError):
        return error

    if isinstance(error, _AUTH_EXCEPTIONS):
        return AuthError(f"{service}.{operation}", cause=error)

    if isinstance(error, (BotoConnectionError, HTTPClientError)):
        return NetworkError(f"{service}.{operation}", cause=error)

    if isinstance(error, ClientError):
        error_info = error.response.get("Error", {})
        error_code = error_info.get("Code", "Unknown")
        error_message = error_info.get("Message", str(error))

        if is_auth_error_code(error_code):
            return AuthError(
                f"{service}.{operation} ({error_code})",
                cause=error,
                details={"error_code": error_code},
            )
        if is_network_error_code(error_code):
            return NetworkError(
                f"{service}.{operation} ({error_code})",
                cause=error,
                details={"error_code": error_code},
            )
        return APIError(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=error,
        )

    if isinstance(error, BotoCoreError):
        return APIError(service=service, operation=operation, error_message=str(error), cause=error)

    return LambstockError(f"{service}.{operation}", cause=error)


__all__ = [
    "LambstockError",
    "ArgError",
    "AuthError",
    "NetworkError",
    "APIError",
    "translate_error",
    "is_auth_error_code",
    "is_network_error_code",
]
