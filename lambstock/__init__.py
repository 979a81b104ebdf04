"""
lambstock - AWS Lambda 재고 관리 도구

배포된 Lambda 함수를 조회하고 태그로 필터링, 속성으로 정렬해 출력합니다.

Usage:
    from lambstock import StockQuery, run_list

    print(run_list(StockQuery(sort_key=SortKey.CODE_SIZE)))
"""

from .config import get_version
from .exceptions import APIError, ArgError, AuthError, LambstockError, NetworkError
from .stock import Stage, StockQuery, run_list, run_tags
from .types import Function, SortKey, Tag, TagFilter

__version__ = get_version()

__all__: list[str] = [
    "__version__",
    # types
    "Function",
    "Tag",
    "TagFilter",
    "SortKey",
    # pipeline
    "Stage",
    "StockQuery",
    "run_list",
    "run_tags",
    # exceptions
    "LambstockError",
    "ArgError",
    "AuthError",
    "NetworkError",
    "APIError",
]
