"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    lambstock list [--tag KEY=VALUE] [--sort name|codesize|runtime]   # 함수 목록 (별칭: ls)
    lambstock tags [--keys-only]                                       # 태그 목록
    lambstock help [COMMAND]                                           # 도움말
    lambstock --help, -h
    lambstock --version, -V

종료 코드:
    0: 성공
    1: 기타 오류
    2: 인자 오류 (잘못된 서브명령/옵션/태그 필터)
    3: 인증 오류
    4: 네트워크 오류
    5: AWS API 오류
    130: 사용자 중단

Usage:
    $ lambstock list --tag team=platform --sort codesize
    $ AWS_PROFILE=prod lambstock tags -f json
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NoReturn

import click
from click import Command, Context, Parameter

from cli.i18n import SUPPORTED_LANGS, set_lang, t
from cli.ui import setup_logging
from lambstock.config import ENV_LANG, PROG_NAME, get_version
from lambstock.exceptions import APIError, ArgError, AuthError, LambstockError, NetworkError
from lambstock.render import FORMAT_TABLE, FORMATS
from lambstock.stock import Stage, StockQuery, enter_stage, run_list, run_tags
from lambstock.types import SortKey, TagFilter

logger = logging.getLogger(__name__)

VERSION = get_version()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# 예외 클래스 -> (메시지 키, 힌트 키)
ERROR_MESSAGES: dict[type[LambstockError], tuple[str, str | None]] = {
    ArgError: ("common.error_arg", None),
    AuthError: ("common.error_auth", "common.hint_auth"),
    NetworkError: ("common.error_network", "common.hint_network"),
    APIError: ("common.error_api", "common.hint_debug"),
}


class StockGroup(click.Group):
    """명령어 별칭(ls -> list)을 지원하는 Click 그룹"""

    ALIASES = {"ls": "list"}

    def get_command(self, ctx: Context, cmd_name: str) -> Command | None:
        """명령어 조회 - 등록된 이름이 없으면 별칭으로 재조회"""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd

        alias = self.ALIASES.get(cmd_name)
        if alias is not None:
            return super().get_command(ctx, alias)

        return None

    def resolve_command(self, ctx: Context, args: list[str]) -> tuple[str | None, Command | None, list[str]]:
        # 별칭으로 실행해도 원래 명령 이름 사용
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


def _build_help_text(lang: str = "ko") -> str:
    """help 텍스트 생성"""
    lines = [
        f"{PROG_NAME} - stock management for your AWS lambda",
        "",
        t("cli.help_intro", lang=lang),
        "",
        "\b",  # Click 줄바꿈 유지 마커
        t("cli.help_basic_usage", lang=lang),
        f"  {PROG_NAME} list                                {t('cli.help_list', lang=lang)}",
        f"  {PROG_NAME} list --tag team=x --sort codesize   {t('cli.help_list_filtered', lang=lang)}",
        f"  {PROG_NAME} tags                                {t('cli.help_tags', lang=lang)}",
        "",
        "\b",
        t("cli.help_env", lang=lang),
        f"  {t('cli.help_env_profile', lang=lang)}",
    ]
    return "\n".join(lines)


def _arg_message(error: ArgError) -> str:
    """ArgError.reason에 해당하는 현재 언어 메시지 (없으면 원문)"""
    if error.reason is None:
        return error.message
    return t(f"common.arg_{error.reason}", argument=error.argument, **error.params)


def _fail(error: LambstockError) -> NoReturn:
    """에러 메시지를 stderr로 출력하고 에러별 종료 코드로 종료"""
    logger.debug("%s", error.to_dict(), exc_info=error)
    message_key, hint_key = ERROR_MESSAGES.get(type(error), ("common.error_unknown", "common.hint_debug"))
    message = _arg_message(error) if isinstance(error, ArgError) else str(error)
    click.echo(t(message_key, message=message), err=True)
    if hint_key:
        click.echo(t(hint_key), err=True)
    raise SystemExit(error.exit_code)


def _execute(runner: Callable[[StockQuery], str], query: StockQuery, empty_key: str) -> None:
    """파이프라인 실행 후 결과 출력

    실패 시 아무것도 stdout에 출력하지 않습니다.
    """
    try:
        text = runner(query)
    except LambstockError as e:
        _fail(e)
    except KeyboardInterrupt:
        click.echo(t("common.cancelled"), err=True)
        raise SystemExit(130) from None

    if text:
        click.echo(text, nl=False)
    else:
        click.echo(t(empty_key))


def _parse_tag_filter(ctx: Context, param: Parameter, value: str | None) -> TagFilter | None:
    if value is None:
        return None
    try:
        return TagFilter.parse(value)
    except ArgError as e:
        raise click.BadParameter(_arg_message(e), ctx=ctx, param=param) from e


def _parse_sort_key(ctx: Context, param: Parameter, value: str | None) -> SortKey | None:
    if value is None:
        return None
    try:
        return SortKey.parse(value)
    except ArgError as e:
        raise click.BadParameter(_arg_message(e), ctx=ctx, param=param) from e


@click.group(cls=StockGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(VERSION, "-V", "--version", prog_name=PROG_NAME)
@click.option(
    "--lang",
    type=click.Choice(SUPPORTED_LANGS),
    default="ko",
    envvar=ENV_LANG,
    show_envvar=True,
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("-p", "--profile", default=None, help="AWS 프로파일 (기본: AWS_PROFILE)")
@click.option("-r", "--region", default=None, help="AWS 리전 (기본: AWS_REGION / 프로파일 설정)")
@click.option("--debug", is_flag=True, help="디버그 로그 출력 (stderr)")
@click.pass_context
def cli(ctx: Context, lang: str, profile: str | None, region: str | None, debug: bool) -> None:
    """lambstock - AWS Lambda stock management"""
    set_lang(lang)
    setup_logging(debug)
    enter_stage(Stage.PARSING_ARGS)

    ctx.ensure_object(dict)
    ctx.obj.update({"lang": lang, "profile": profile, "region": region, "debug": debug})


# help 텍스트 동적 설정
cli.help = _build_help_text()


@cli.command("list")
@click.option(
    "-t",
    "--tag",
    "tag_filter",
    metavar="KEY=VALUE",
    default=None,
    callback=_parse_tag_filter,
    help="태그 key=value가 정확히 일치하는 함수만 표시 (대소문자 구분)",
)
@click.option(
    "-s",
    "--sort",
    "sort_key",
    type=click.Choice(SortKey.choices()),
    default=None,
    callback=_parse_sort_key,
    help="정렬 기준 (기본: API 응답 순서)",
)
@click.option("-f", "--format", "fmt", type=click.Choice(FORMATS), default=FORMAT_TABLE, help="출력 형식")
@click.pass_context
def list_command(ctx: Context, tag_filter: TagFilter | None, sort_key: SortKey | None, fmt: str) -> None:
    """Lambda 함수 목록

    \b
    Examples:
        lambstock list
        lambstock ls --sort runtime
        lambstock list --tag team=platform --sort codesize -f json
    """
    query = StockQuery(
        profile=ctx.obj["profile"],
        region=ctx.obj["region"],
        tag_filter=tag_filter,
        sort_key=sort_key,
        fmt=fmt,
    )
    _execute(run_list, query, "cli.no_functions")


@cli.command("tags")
@click.option("-k", "--keys-only", is_flag=True, help="서로 다른 태그 키만 표시")
@click.option("-f", "--format", "fmt", type=click.Choice(FORMATS), default=FORMAT_TABLE, help="출력 형식")
@click.pass_context
def tags_command(ctx: Context, keys_only: bool, fmt: str) -> None:
    """Lambda 함수 태그 목록 (전체 중복 제거)

    \b
    Examples:
        lambstock tags
        lambstock tags --keys-only
    """
    query = StockQuery(
        profile=ctx.obj["profile"],
        region=ctx.obj["region"],
        fmt=fmt,
        keys_only=keys_only,
    )
    _execute(run_tags, query, "cli.no_tags")


@cli.command("help")
@click.argument("command", required=False)
@click.pass_context
def help_command(ctx: Context, command: str | None) -> None:
    """도움말 표시

    \b
    Examples:
        lambstock help
        lambstock help list
    """
    parent = ctx.parent
    assert parent is not None

    if command is None:
        click.echo(parent.get_help())
        return

    cmd = cli.get_command(parent, command)
    if cmd is None:
        raise click.UsageError(t("cli.unknown_command", name=command), ctx=ctx)

    with click.Context(cmd, info_name=cmd.name, parent=parent) as sub_ctx:
        click.echo(cmd.get_help(sub_ctx))


if __name__ == "__main__":
    cli(prog_name=PROG_NAME)
