"""
lambstock/filter.py - 태그 필터

순수 함수이며 입력 순서를 유지합니다.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet

from .types import Function, Tag, TagFilter


def filter_functions(
    functions: Sequence[Function],
    tag_map: Mapping[str, AbstractSet[Tag]],
    predicate: TagFilter | None = None,
) -> list[Function]:
    """태그 조건에 맞는 함수만 남깁니다.

    Args:
        functions: 대상 함수 목록
        tag_map: ARN -> 태그 집합
        predicate: 태그 필터 (None이면 입력을 그대로 반환)

    Returns:
        조건을 만족하는 함수 목록 (입력 순서 유지). 태그가 없는 함수는 항상 제외.
    """
    if predicate is None:
        return list(functions)
    return [func for func in functions if predicate.matches(tag_map.get(func.arn, ()))]
