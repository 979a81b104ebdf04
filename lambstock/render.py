"""
lambstock/render.py - 출력 포맷팅

함수 목록과 태그 목록을 텍스트로 변환합니다. 출력은 하지 않고 문자열만 반환합니다.

지원 형식:
    - table: rich Table을 색상 없이 텍스트로 렌더링
    - json: JSON 배열
"""

from __future__ import annotations

import io
import json
from collections.abc import Iterable, Mapping, Sequence
from collections.abc import Set as AbstractSet
from typing import Any

from rich.cells import cell_len
from rich.console import Console
from rich.markup import escape
from rich.measure import Measurement
from rich.table import Table

from .types import Function, Tag

FORMAT_TABLE = "table"
FORMAT_JSON = "json"
FORMATS = (FORMAT_TABLE, FORMAT_JSON)

LIST_COLUMNS = ("Name", "Runtime", "Code Size", "Tags")
TAG_COLUMNS = ("Key", "Value")

# 테이블 최소 폭 측정 시 사용하는 상한
MAX_TABLE_WIDTH = 10_000


def format_bytes(b: int | None) -> str:
    """바이트 수를 사람이 읽기 쉬운 문자열로 변환 (1024 단위)"""
    if b is None:
        return "0 B"
    if b >= 1024**3:
        return f"{b / 1024**3:.2f} GB"
    elif b >= 1024**2:
        return f"{b / 1024**2:.2f} MB"
    elif b >= 1024:
        return f"{b / 1024:.2f} KB"
    return f"{b} B"


def distinct_tags(tag_map: Mapping[str, AbstractSet[Tag]]) -> list[Tag]:
    """전체 함수의 태그를 (key, value) 기준으로 중복 제거

    resource_arn은 버리고 key, value 순으로 정렬합니다.
    """
    pairs = {tag.pair for tags in tag_map.values() for tag in tags}
    return [Tag(key=key, value=value) for key, value in sorted(pairs)]


def _format_tags(tags: Iterable[Tag]) -> str:
    return ", ".join(str(tag) for tag in sorted(tags))


def _to_text(table: Table, width: int | None = None) -> str:
    """Table을 텍스트로 렌더링

    폭이 테이블 최소 폭보다 좁으면 최소 폭까지 넓혀, no_wrap 컬럼 값이 잘리지 않게 합니다.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        color_system=None,
        force_terminal=False,
        highlight=False,
        emoji=False,
    )
    minimum = Measurement.get(console, console.options.update_width(MAX_TABLE_WIDTH), table).minimum
    if minimum > console.width:
        console.width = minimum
    console.print(table)
    return buffer.getvalue()


def _to_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def render_list(
    functions: Sequence[Function],
    tag_map: Mapping[str, AbstractSet[Tag]] | None = None,
    fmt: str = FORMAT_TABLE,
    width: int | None = None,
) -> str:
    """함수 목록 렌더링

    Args:
        functions: 출력할 함수 목록 (이미 필터/정렬된 순서)
        tag_map: ARN -> 태그 집합 (None이면 태그 컬럼을 비움)
        fmt: 출력 형식 (table, json)
        width: table 렌더링 폭 (None이면 rich 기본값)

    Returns:
        렌더링된 텍스트. table 형식에서 함수가 없으면 빈 문자열.
    """
    tag_map = tag_map or {}

    if fmt == FORMAT_JSON:
        rows = []
        for func in functions:
            row = func.to_dict()
            row["tags"] = {tag.key: tag.value for tag in sorted(tag_map.get(func.arn, ()))}
            rows.append(row)
        return _to_json(rows)

    if not functions:
        return ""

    rows = [
        (
            func.name,
            func.runtime or "-",
            format_bytes(func.code_size),
            escape(_format_tags(tag_map.get(func.arn, ()))),
        )
        for func in functions
    ]

    # Tags 외 컬럼은 줄바꿈/생략 없이 가장 긴 값 폭을 유지
    def fixed_width(index: int) -> int:
        return max(cell_len(value) for value in (LIST_COLUMNS[index], *(row[index] for row in rows)))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column(LIST_COLUMNS[0], style="cyan", no_wrap=True, min_width=fixed_width(0))
    table.add_column(LIST_COLUMNS[1], style="yellow", no_wrap=True, min_width=fixed_width(1))
    table.add_column(LIST_COLUMNS[2], justify="right", no_wrap=True, min_width=fixed_width(2))
    table.add_column(LIST_COLUMNS[3], style="dim", overflow="fold")

    for row in rows:
        table.add_row(*row)

    return _to_text(table, width)


def render_tags(
    tags: Iterable[Tag],
    keys_only: bool = False,
    fmt: str = FORMAT_TABLE,
    width: int | None = None,
) -> str:
    """태그 목록 렌더링

    입력 태그는 (key, value) 기준으로 전역 중복 제거 후 정렬됩니다.
    keys_only이면 서로 다른 키만 출력합니다.

    Returns:
        렌더링된 텍스트. table 형식에서 태그가 없으면 빈 문자열.
    """
    pairs = sorted({tag.pair for tag in tags})

    if keys_only:
        keys = sorted({key for key, _ in pairs})
        if fmt == FORMAT_JSON:
            return _to_json(keys)
        if not keys:
            return ""
        return "".join(f"{key}\n" for key in keys)

    if fmt == FORMAT_JSON:
        return _to_json([{"key": key, "value": value} for key, value in pairs])

    if not pairs:
        return ""

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column(TAG_COLUMNS[0], style="cyan", overflow="fold")
    table.add_column(TAG_COLUMNS[1], style="white", overflow="fold")
    for key, value in pairs:
        table.add_row(escape(key), escape(value))

    return _to_text(table, width)
