"""
lambstock/types.py - 데이터 모델

Lambda 함수, 태그, 태그 필터, 정렬 키를 정의합니다.
모든 모델은 불변(frozen)이며 실행할 때마다 API 응답으로부터 새로 만들어집니다.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ArgError


@dataclass(frozen=True)
class Function:
    """Lambda 함수

    Attributes:
        name: 함수 이름
        arn: 함수 ARN (결과 집합 내에서 유일)
        runtime: 런타임 (컨테이너 이미지 함수는 빈 문자열)
        code_size: 배포 패키지 크기 (bytes)
    """

    name: str
    arn: str
    runtime: str
    code_size: int

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Function:
        """ListFunctions 응답의 FunctionConfiguration 항목으로부터 생성

        Raises:
            KeyError: FunctionName 또는 FunctionArn이 없는 경우
        """
        return cls(
            name=data["FunctionName"],
            arn=data["FunctionArn"],
            runtime=data.get("Runtime") or "",
            code_size=int(data.get("CodeSize") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "arn": self.arn,
            "runtime": self.runtime,
            "code_size": self.code_size,
        }


@dataclass(frozen=True, order=True)
class Tag:
    """리소스 태그 (key/value, 대상 리소스 ARN)"""

    key: str
    value: str
    resource_arn: str = ""

    @property
    def pair(self) -> tuple[str, str]:
        return self.key, self.value

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class TagFilter:
    """태그 필터 - 단일 key=value 일치 조건 (대소문자 구분)"""

    key: str
    value: str

    @classmethod
    def parse(cls, expression: str) -> TagFilter:
        """KEY=VALUE 문자열 파싱

        첫 번째 '=' 기준으로 분리하므로 값에 '='이 포함될 수 있습니다.

        Raises:
            ArgError: '=' 누락, 빈 키 또는 빈 값
        """
        key, sep, value = expression.partition("=")
        if not sep:
            raise ArgError(
                f"태그 필터는 KEY=VALUE 형식이어야 합니다: '{expression}'",
                argument=expression,
                reason="tag_format",
            )
        if not key:
            raise ArgError(
                f"태그 필터의 키가 비어 있습니다: '{expression}'",
                argument=expression,
                reason="tag_empty_key",
            )
        if not value:
            raise ArgError(
                f"태그 필터의 값이 비어 있습니다: '{expression}'",
                argument=expression,
                reason="tag_empty_value",
            )
        return cls(key=key, value=value)

    def matches(self, tags: Iterable[Tag]) -> bool:
        """태그 집합에 key, value가 모두 정확히 일치하는 항목이 있는지 확인"""
        return any(tag.key == self.key and tag.value == self.value for tag in tags)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class SortKey(Enum):
    """정렬 키 (값은 CLI 표기)"""

    NAME = "name"
    CODE_SIZE = "codesize"
    RUNTIME = "runtime"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: str) -> SortKey:
        """CLI 표기 문자열을 SortKey로 변환

        Raises:
            ArgError: 지원하지 않는 정렬 키
        """
        try:
            return cls(value)
        except ValueError:
            raise ArgError(
                f"지원하지 않는 정렬 키: '{value}' (가능: {', '.join(cls.choices())})",
                argument=value,
                reason="sort_key",
                params={"choices": ", ".join(cls.choices())},
            ) from None


# ARN -> 태그 집합
TagMap = dict[str, frozenset[Tag]]
