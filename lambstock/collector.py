"""
lambstock/collector.py - Lambda 함수 및 태그 수집

두 개의 AWS API를 호출해 데이터 모델로 변환합니다.

- fetch_functions: lambda:ListFunctions (NextMarker 페이지네이션)
- fetch_tags: tag:GetResources (PaginationToken 페이지네이션)

페이지네이션은 boto3 paginator가 토큰이 없을 때까지 따라갑니다.
중간 페이지에서 실패하면 전체 호출이 실패하며 부분 결과는 반환하지 않습니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from .client import get_client
from .config import FUNCTIONS_PAGE_SIZE, LAMBDA_RESOURCE_TYPE, TAGS_PAGE_SIZE
from .exceptions import APIError, translate_error
from .types import Function, Tag, TagMap

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)

LAMBDA_SERVICE = "lambda"
TAGGING_SERVICE = "resourcegroupstaggingapi"


def fetch_functions(session: boto3.Session, region: str | None = None) -> list[Function]:
    """Lambda 함수 목록을 수집합니다.

    Args:
        session: boto3 Session 객체
        region: AWS 리전 코드 (None이면 세션 기본값)

    Returns:
        API 응답 순서의 Function 목록 (ARN 중복은 첫 항목만 유지)

    Raises:
        AuthError, NetworkError, APIError
    """
    lambda_client = get_client(session, LAMBDA_SERVICE, region_name=region)
    functions: list[Function] = []
    seen: set[str] = set()
    pages = 0

    try:
        paginator = lambda_client.get_paginator("list_functions")
        for page in paginator.paginate(PaginationConfig={"PageSize": FUNCTIONS_PAGE_SIZE}):
            pages += 1
            for item in page.get("Functions", []):
                func = Function.from_api(item)
                if func.arn in seen:
                    logger.debug("Duplicate function ARN skipped: %s", func.arn)
                    continue
                seen.add(func.arn)
                functions.append(func)
    except (ClientError, BotoCoreError) as e:
        raise translate_error(e, LAMBDA_SERVICE, "list_functions") from e
    except (KeyError, TypeError, ValueError) as e:
        raise APIError(
            service=LAMBDA_SERVICE,
            operation="list_functions",
            error_code="MalformedResponse",
            error_message=str(e),
            cause=e,
        ) from e

    logger.debug("Fetched %d functions in %d page(s)", len(functions), pages)
    return functions


def fetch_tags(
    session: boto3.Session,
    arns: Iterable[str] | None = None,
    region: str | None = None,
) -> TagMap:
    """Lambda 함수 태그를 수집합니다.

    GetResources를 lambda:function 타입으로 조회한 뒤 ARN별 태그 집합으로 묶습니다.

    Args:
        session: boto3 Session 객체
        arns: 대상 함수 ARN 목록. 지정하면 결과는 정확히 이 ARN들만 포함하며
            태그가 없는 함수는 빈 집합으로 매핑됩니다. None이면 조회된 전체.
        region: AWS 리전 코드 (None이면 세션 기본값)

    Returns:
        ARN -> frozenset[Tag]

    Raises:
        AuthError, NetworkError, APIError
    """
    tagging = get_client(session, TAGGING_SERVICE, region_name=region)
    collected: dict[str, set[Tag]] = {}
    pages = 0

    try:
        paginator = tagging.get_paginator("get_resources")
        for page in paginator.paginate(
            ResourceTypeFilters=[LAMBDA_RESOURCE_TYPE],
            ResourcesPerPage=TAGS_PAGE_SIZE,
        ):
            pages += 1
            for mapping in page.get("ResourceTagMappingList", []):
                arn = mapping["ResourceARN"]
                bucket = collected.setdefault(arn, set())
                for tag in mapping.get("Tags", []):
                    bucket.add(Tag(key=tag["Key"], value=tag["Value"], resource_arn=arn))
    except (ClientError, BotoCoreError) as e:
        raise translate_error(e, TAGGING_SERVICE, "get_resources") from e
    except (KeyError, TypeError) as e:
        raise APIError(
            service=TAGGING_SERVICE,
            operation="get_resources",
            error_code="MalformedResponse",
            error_message=str(e),
            cause=e,
        ) from e

    logger.debug("Fetched tags for %d resources in %d page(s)", len(collected), pages)

    if arns is None:
        return {arn: frozenset(tags) for arn, tags in collected.items()}
    return {arn: frozenset(collected.get(arn, ())) for arn in arns}
