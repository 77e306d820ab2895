from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable, Iterable
from enum import Enum
from typing import Annotated, TypeVar

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from bubblehearth.core.localization import Locale, LocaleValue, PerLocale, PlainLocale
from bubblehearth.infra.battlenet import (
    BattleNetClient,
    BattleNetClientError,
    build_battlenet_client,
)
from bubblehearth.infra.classic import Realm, WorldOfWarcraftClassicConnector
from bubblehearth.shared.config import get_settings
from bubblehearth.shared.exceptions import ConfigurationError
from bubblehearth.shared.logging import configure_logging, get_logger

T = TypeVar("T")


class OutputFormat(str, Enum):
    """出力形式。"""

    TABLE = "table"
    JSON = "json"


app = typer.Typer(help="World of Warcraft Classic の Game Data API")


def _run(action: Callable[[WorldOfWarcraftClassicConnector], Awaitable[T]], command: str) -> T:
    logger = get_logger(f"cli.classic.{command}")

    async def _execute() -> T:
        settings = get_settings()
        configure_logging(level=settings.log_level, json_output=settings.json_logs)
        client: BattleNetClient = build_battlenet_client(settings=settings, logger=logger)
        async with client:
            return await action(WorldOfWarcraftClassicConnector(client))

    try:
        return asyncio.run(_execute())
    except ConfigurationError as exc:
        logger.error("設定の読み込みに失敗", error=str(exc))
        typer.echo(f"設定が不足しています: {exc}")
        raise typer.Exit(code=2) from exc
    except BattleNetClientError as exc:
        logger.error("Battle.net リクエストに失敗", error=str(exc))
        typer.echo(f"Battle.net API の呼び出しに失敗しました: {exc}")
        raise typer.Exit(code=1) from exc


def _format_text(value: LocaleValue | None, locale: Locale = Locale.EN_US) -> str:
    if value is None:
        return "-"
    if isinstance(value, PlainLocale):
        return value.value
    if isinstance(value, PerLocale):
        text = value.resolve(locale)
        if text is not None:
            return text
        return next(iter(value.values.values()), "-")
    return str(value)


def _render_realms(realms: Iterable[Realm]) -> None:
    console = Console(force_terminal=False, color_system=None, width=160)
    table = Table(title="WoW Classic Realms")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Slug")
    table.add_column("Category")
    table.add_column("Timezone")
    table.add_column("Type")

    for realm in realms:
        table.add_row(
            str(realm.id),
            _format_text(realm.name),
            realm.slug,
            _format_text(realm.category),
            realm.timezone.value if realm.timezone else "-",
            _format_text(realm.realm_type.name) if realm.realm_type else "-",
        )

    console.print(table)


def _render_json(model: BaseModel) -> None:
    payload = model.model_dump(mode="json", by_alias=True)
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command("realms")
def list_realms(
    all_locales: Annotated[
        bool,
        typer.Option("--all-locales", help="locale を指定せず全ロケールの名前を取得する"),
    ] = False,
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """realm の一覧を取得する。"""

    index = _run(lambda connector: connector.get_realms(all_locales=all_locales), "realms")

    if output is OutputFormat.JSON:
        _render_json(index)
    else:
        _render_realms(index.realms)


@app.command("realm")
def show_realm(
    slug: Annotated[str, typer.Argument(help="realm の slug (例: atiesh)")],
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """slug を指定して realm を取得する。"""

    realm = _run(lambda connector: connector.get_realm(slug), "realm")
    if realm is None:
        typer.echo(f"realm が見つかりません: {slug}")
        raise typer.Exit(code=1)

    if output is OutputFormat.JSON:
        _render_json(realm)
    else:
        _render_realms((realm,))


@app.command("regions")
def list_regions() -> None:
    """region index のリンクを一覧表示する。"""

    index = _run(lambda connector: connector.get_regions(), "regions")
    for key in index.regions:
        typer.echo(key.href)
