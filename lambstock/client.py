"""
lambstock/client.py - boto3 session/client 생성 헬퍼

자격 증명은 boto3 표준 체인(환경 변수, 프로파일, SSO, 인스턴스 역할 등)에 위임합니다.

주요 구성 요소:
- get_session: 프로파일/리전이 적용된 boto3 Session 생성
- get_client: 재시도 + 타임아웃이 설정된 boto3 client 생성

Example:
    from lambstock.client import get_client, get_session

    session = get_session(profile="dev")
    lambda_client = get_client(session, "lambda")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from botocore.exceptions import BotoCoreError

from .config import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_RETRY_MODE,
    env_profile,
    env_region,
)
from .exceptions import translate_error

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


def get_session(profile: str | None = None, region: str | None = None) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile: 프로파일 이름 (None이면 AWS_PROFILE, 그마저 없으면 기본 체인)
        region: 리전 (None이면 AWS_REGION/AWS_DEFAULT_REGION, 그마저 없으면 프로파일 설정)

    Raises:
        AuthError: 프로파일을 찾을 수 없는 경우
    """
    import boto3

    profile = profile or env_profile()
    region = region or env_region()
    logger.debug("Creating session (profile=%s, region=%s)", profile or "<default>", region or "<default>")

    try:
        return boto3.Session(profile_name=profile, region_name=region)
    except BotoCoreError as e:
        raise translate_error(e, "sts", "session") from e


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: str = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """재시도/타임아웃이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (lambda, resourcegroupstaggingapi)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: SDK 최대 시도 횟수
        retry_mode: botocore 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Raises:
        AuthError: 리전을 결정할 수 없는 경우 등 자격 증명 체인 문제
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    try:
        return session.client(  # pyright: ignore[reportCallIssue]
            cast(Any, service_name),
            region_name=region_name,
            config=config,
            **kwargs,
        )
    except BotoCoreError as e:
        raise translate_error(e, service_name, "client") from e
