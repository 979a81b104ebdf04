"""
cli/i18n/messages/common.py - Common Messages

Error labels shared by every subcommand.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    # =========================================================================
    # Errors (one per exception class)
    # =========================================================================
    "error_arg": {
        "ko": "인자 오류: {message}",
        "en": "Argument error: {message}",
    },
    "error_auth": {
        "ko": "인증 오류: {message}",
        "en": "Authentication error: {message}",
    },
    "error_network": {
        "ko": "네트워크 오류: {message}",
        "en": "Network error: {message}",
    },
    "error_api": {
        "ko": "AWS API 오류: {message}",
        "en": "AWS API error: {message}",
    },
    "error_unknown": {
        "ko": "오류: {message}",
        "en": "Error: {message}",
    },
    # =========================================================================
    # Argument errors (ArgError.reason)
    # =========================================================================
    "arg_tag_format": {
        "ko": "태그 필터는 KEY=VALUE 형식이어야 합니다: '{argument}'",
        "en": "Tag filter must be KEY=VALUE: '{argument}'",
    },
    "arg_tag_empty_key": {
        "ko": "태그 필터의 키가 비어 있습니다: '{argument}'",
        "en": "Tag filter key is empty: '{argument}'",
    },
    "arg_tag_empty_value": {
        "ko": "태그 필터의 값이 비어 있습니다: '{argument}'",
        "en": "Tag filter value is empty: '{argument}'",
    },
    "arg_sort_key": {
        "ko": "지원하지 않는 정렬 키: '{argument}' (가능: {choices})",
        "en": "Unsupported sort key: '{argument}' (choices: {choices})",
    },
    # =========================================================================
    # Hints
    # =========================================================================
    "hint_auth": {
        "ko": "AWS_PROFILE 또는 --profile, 자격 증명 설정을 확인하세요.",
        "en": "Check AWS_PROFILE / --profile and your credential configuration.",
    },
    "hint_network": {
        "ko": "네트워크 연결과 리전 설정을 확인하세요.",
        "en": "Check your network connection and region settings.",
    },
    "hint_debug": {
        "ko": "자세한 내용은 --debug 옵션으로 다시 실행하세요.",
        "en": "Re-run with --debug for details.",
    },
    "cancelled": {
        "ko": "취소되었습니다.",
        "en": "Cancelled.",
    },
}
