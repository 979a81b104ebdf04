"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI commands, help text, and result messages.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "배포된 AWS Lambda 함수를 조회하고\n태그로 필터링하거나 속성으로 정렬합니다.",
        "en": "Lists deployed AWS Lambda functions,\noptionally filtered by tag and sorted by attribute.",
    },
    "help_basic_usage": {
        "ko": "[기본 사용법]",
        "en": "[Basic Usage]",
    },
    "help_list": {
        "ko": "Lambda 함수 목록",
        "en": "List Lambda functions",
    },
    "help_list_filtered": {
        "ko": "태그로 필터링 + 코드 크기순 정렬",
        "en": "Filter by tag and sort by code size",
    },
    "help_tags": {
        "ko": "Lambda 함수 태그 목록 (전체 중복 제거)",
        "en": "List Lambda function tags (globally deduplicated)",
    },
    "help_env": {
        "ko": "[환경 변수]",
        "en": "[Environment]",
    },
    "help_env_profile": {
        "ko": "AWS_PROFILE: 자격 증명 프로파일 선택",
        "en": "AWS_PROFILE: selects the credential profile",
    },
    # =========================================================================
    # Results
    # =========================================================================
    "no_functions": {
        "ko": "조회된 Lambda 함수가 없습니다.",
        "en": "No Lambda functions found.",
    },
    "no_tags": {
        "ko": "조회된 태그가 없습니다.",
        "en": "No tags found.",
    },
    "unknown_command": {
        "ko": "알 수 없는 명령어: {name}",
        "en": "Unknown command: {name}",
    },
}
