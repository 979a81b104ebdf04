"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(sample_functions, sample_tag_map):
        # sample_functions: Function 목록 (API 응답 순서)
        # sample_tag_map: ARN -> 태그 집합
        pass
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from lambstock.types import Function, Tag  # noqa: E402

ACCOUNT_ID = "123456789012"
REGION = "ap-northeast-2"


def make_arn(name: str) -> str:
    return f"arn:aws:lambda:{REGION}:{ACCOUNT_ID}:function:{name}"


def make_function(name: str, code_size: int = 1024, runtime: str = "python3.12") -> Function:
    return Function(name=name, arn=make_arn(name), runtime=runtime, code_size=code_size)


def make_tags(name: str, **pairs: str) -> frozenset[Tag]:
    arn = make_arn(name)
    return frozenset(Tag(key=key, value=value, resource_arn=arn) for key, value in pairs.items())


def function_item(name: str, code_size: int = 1024, runtime: str | None = "python3.12") -> dict:
    """ListFunctions 응답의 FunctionConfiguration 항목"""
    item = {
        "FunctionName": name,
        "FunctionArn": make_arn(name),
        "CodeSize": code_size,
        "MemorySize": 128,
        "Timeout": 3,
    }
    if runtime is not None:
        item["Runtime"] = runtime
    return item


def tag_mapping(name: str, **pairs: str) -> dict:
    """GetResources 응답의 ResourceTagMapping 항목"""
    return {
        "ResourceARN": make_arn(name),
        "Tags": [{"Key": key, "Value": value} for key, value in pairs.items()],
    }


def client_error(code: str, operation: str = "ListFunctions", message: str = "boom") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("LAMBSTOCK_LANG", raising=False)

    yield

    from cli.i18n import set_lang

    set_lang("ko")


# =============================================================================
# 데이터 픽스처
# =============================================================================


@pytest.fixture
def sample_functions():
    """API 응답 순서의 함수 목록"""
    return [
        make_function("b", code_size=200, runtime="nodejs20.x"),
        make_function("a", code_size=100, runtime="python3.12"),
        make_function("c", code_size=150, runtime="nodejs20.x"),
    ]


@pytest.fixture
def sample_tag_map():
    """ARN -> 태그 집합 (c는 태그 없음)"""
    return {
        make_arn("a"): make_tags("a", team="x", env="prod"),
        make_arn("b"): make_tags("b", team="y", env="prod"),
        make_arn("c"): frozenset(),
    }


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_session():
    """boto3.Session 모킹"""
    session = MagicMock()
    session.region_name = REGION
    return session


def paginated_client(pages):
    """get_paginator().paginate()가 주어진 페이지들을 돌려주는 클라이언트

    pages가 callable이면 제너레이터 함수로 간주하여 호출 시마다 새로 생성합니다.
    """
    client = MagicMock()
    paginator = MagicMock()
    if callable(pages):
        paginator.paginate.side_effect = lambda **kwargs: pages()
    else:
        paginator.paginate.return_value = pages
    client.get_paginator.return_value = paginator
    return client
