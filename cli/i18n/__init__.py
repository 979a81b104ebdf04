"""
cli/i18n/__init__.py - Internationalization (i18n) Module

Provides translation support for the lambstock CLI.
Korean (ko) is the default language, with English (en) as an option.

Architecture:
    - Messages are organized by namespace (cli, common)
    - Translation function t() supports format string interpolation
    - Language is selected once per invocation via --lang / LAMBSTOCK_LANG

Usage:
    from cli.i18n import t, set_lang, get_lang

    # Basic translation
    print(t("cli.no_functions"))  # "조회된 Lambda 함수가 없습니다"

    # With interpolation
    set_lang("en")
    print(t("common.error_auth", message="no credentials"))  # "Authentication error: no credentials"
"""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import Any

# Supported languages
SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"

_current_lang: ContextVar[str] = ContextVar("lang", default=DEFAULT_LANG)


def get_lang() -> str:
    """Get current language from context variable."""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """Set current language in context variable.

    Args:
        lang: Language code ("ko" or "en"). Unknown codes fall back to DEFAULT_LANG.
    """
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG
    _current_lang.set(lang)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key to the current language.

    Args:
        key: Message key in namespace.key format (e.g., "cli.no_tags")
        lang: Optional language override. If not provided, uses context variable.
        **kwargs: Format string arguments for interpolation

    Returns:
        Translated string, or key if translation not found

    Examples:
        >>> t("cli.no_tags", lang="en")
        "No tags found"

        >>> t("common.error_api", lang="ko", message="lambda.list_functions")
        "AWS API 오류: lambda.list_functions"
    """
    from cli.i18n.messages import MESSAGES

    if lang is None:
        lang = get_lang()

    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    msg_dict = MESSAGES.get(key)
    if msg_dict is None:
        return key

    text = msg_dict.get(lang)
    if text is None:
        # Fallback to Korean if English not available
        text = msg_dict.get(DEFAULT_LANG, key)

    if kwargs:
        with contextlib.suppress(KeyError, ValueError):
            text = text.format(**kwargs)

    return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
