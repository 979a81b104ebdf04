"""
lambstock/stock.py - 조회 파이프라인

수집 → 필터 → 정렬 → 렌더링 순서로 단계가 한 방향으로만 진행됩니다.
재시도하지 않으며, 실패는 Fetching 단계에서만 발생하고 그대로 호출자에게 전파됩니다.

Usage:
    from lambstock.stock import StockQuery, run_list

    query = StockQuery(profile="dev", tag_filter=TagFilter("team", "x"), sort_key=SortKey.NAME)
    text = run_list(query)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .client import get_session
from .collector import fetch_functions, fetch_tags
from .exceptions import LambstockError
from .filter import filter_functions
from .render import FORMAT_TABLE, distinct_tags, render_list, render_tags
from .sorting import sort_functions
from .types import SortKey, TagFilter

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


class Stage(Enum):
    """파이프라인 단계"""

    PARSING_ARGS = "parsing_args"
    FETCHING = "fetching"
    FILTERING = "filtering"
    SORTING = "sorting"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class StockQuery:
    """조회 조건 (CLI 인자 파싱 결과)"""

    profile: str | None = None
    region: str | None = None
    tag_filter: TagFilter | None = None
    sort_key: SortKey | None = None
    fmt: str = FORMAT_TABLE
    keys_only: bool = False


SessionFactory = Callable[..., "boto3.Session"]


def enter_stage(stage: Stage) -> None:
    logger.debug("stage: %s", stage.value)


def _open_session(query: StockQuery, session_factory: SessionFactory | None) -> boto3.Session:
    factory = session_factory or get_session
    return factory(profile=query.profile, region=query.region)


def run_list(query: StockQuery, session_factory: SessionFactory | None = None) -> str:
    """list 서브명령 파이프라인

    Returns:
        렌더링된 함수 목록 텍스트

    Raises:
        AuthError, NetworkError, APIError: 수집 실패
    """
    enter_stage(Stage.FETCHING)
    try:
        session = _open_session(query, session_factory)
        functions = fetch_functions(session, region=query.region)
        tag_map = fetch_tags(session, arns=[func.arn for func in functions], region=query.region)
    except LambstockError:
        enter_stage(Stage.FAILED)
        raise

    enter_stage(Stage.FILTERING)
    retained = filter_functions(functions, tag_map, query.tag_filter)
    logger.debug("Retained %d of %d functions (filter=%s)", len(retained), len(functions), query.tag_filter)

    enter_stage(Stage.SORTING)
    ordered = sort_functions(retained, query.sort_key)

    enter_stage(Stage.RENDERING)
    text = render_list(ordered, tag_map, fmt=query.fmt)

    enter_stage(Stage.DONE)
    return text


def run_tags(query: StockQuery, session_factory: SessionFactory | None = None) -> str:
    """tags 서브명령 파이프라인

    전체 Lambda 함수 태그를 전역으로 중복 제거해 렌더링합니다.

    Raises:
        AuthError, NetworkError, APIError: 수집 실패
    """
    enter_stage(Stage.FETCHING)
    try:
        session = _open_session(query, session_factory)
        tag_map = fetch_tags(session, region=query.region)
    except LambstockError:
        enter_stage(Stage.FAILED)
        raise

    enter_stage(Stage.RENDERING)
    text = render_tags(distinct_tags(tag_map), keys_only=query.keys_only, fmt=query.fmt)

    enter_stage(Stage.DONE)
    return text
