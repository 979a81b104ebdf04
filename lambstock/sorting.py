"""
lambstock/sorting.py - 함수 목록 정렬

sorted()는 안정 정렬이므로 같은 키를 가진 항목은 입력 순서를 유지합니다.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from .types import Function, SortKey

_SORT_KEYS: dict[SortKey, Callable[[Function], Any]] = {
    SortKey.NAME: lambda func: func.name,
    SortKey.CODE_SIZE: lambda func: func.code_size,
    SortKey.RUNTIME: lambda func: func.runtime,
}


def sort_functions(functions: Sequence[Function], key: SortKey | None = None) -> list[Function]:
    """함수 목록을 정렬합니다.

    Args:
        functions: 대상 함수 목록
        key: 정렬 키 (None이면 입력 순서 유지)
            - NAME: 이름 오름차순 (대소문자 구분)
            - CODE_SIZE: 코드 크기 오름차순
            - RUNTIME: 런타임 오름차순 (같은 런타임끼리 묶임)
    """
    if key is None:
        return list(functions)
    return sorted(functions, key=_SORT_KEYS[key])
