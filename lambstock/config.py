"""
lambstock/config.py - 설정 상수 및 환경 변수 조회

설정 파일은 사용하지 않습니다. 모든 설정은 상수, 환경 변수, CLI 옵션으로만 결정됩니다.

환경 변수:
    AWS_PROFILE: 자격 증명 프로파일 (-p/--profile로 덮어쓰기 가능)
    AWS_REGION / AWS_DEFAULT_REGION: 리전 (-r/--region으로 덮어쓰기 가능)
    LAMBSTOCK_LANG: 기본 UI 언어 (ko, en), --lang으로 덮어쓰기 가능
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

PROG_NAME = "lambstock"

# 페이지 크기 (ListFunctions MaxItems 상한 50, GetResources ResourcesPerPage 상한 100)
FUNCTIONS_PAGE_SIZE = 50
TAGS_PAGE_SIZE = 50

# Resource Groups Tagging API 리소스 타입 필터
LAMBDA_RESOURCE_TYPE = "lambda:function"

# botocore 클라이언트 설정 (재시도는 SDK 레벨에서만 수행)
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_MODE = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초

ENV_PROFILE = "AWS_PROFILE"
ENV_REGIONS = ("AWS_REGION", "AWS_DEFAULT_REGION")
ENV_LANG = "LAMBSTOCK_LANG"


def get_version() -> str:
    """버전 문자열 반환

    패키지 디렉토리의 version.txt 파일에서 버전을 읽어옴
    """
    version_file = Path(__file__).resolve().parent / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug("Failed to read version file: %s", e)
    return "0.0.0"


def env_profile() -> str | None:
    """AWS_PROFILE 환경 변수 (비어 있으면 None)"""
    return os.environ.get(ENV_PROFILE) or None


def env_region() -> str | None:
    """AWS_REGION, AWS_DEFAULT_REGION 순서로 리전 조회"""
    for name in ENV_REGIONS:
        value = os.environ.get(name)
        if value:
            return value
    return None
