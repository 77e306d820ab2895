from __future__ import annotations

import asyncio

import typer

from bubblehearth.infra.battlenet import BattleNetClientError, build_battlenet_client
from bubblehearth.shared.config import get_settings
from bubblehearth.shared.exceptions import ConfigurationError
from bubblehearth.shared.logging import configure_logging, get_logger


def fetch_token() -> None:
    """client credentials でトークンを取得し、有効期限を表示する。

    トークン文字列そのものは先頭数文字のみ表示する。
    """

    logger = get_logger("cli.token")

    async def _acquire() -> tuple[str, str]:
        settings = get_settings()
        configure_logging(level=settings.log_level, json_output=settings.json_logs)
        async with build_battlenet_client(settings=settings, logger=logger) as client:
            token = await client.get_access_token()
            cached = client.token_cache().try_current()
            expires_at = cached.expires_at.isoformat() if cached else "-"
            return token, expires_at

    try:
        token, expires_at = asyncio.run(_acquire())
    except ConfigurationError as exc:
        typer.echo(f"設定が不足しています: {exc}")
        raise typer.Exit(code=2) from exc
    except BattleNetClientError as exc:
        logger.error("トークン取得に失敗", error=str(exc))
        typer.echo(f"トークン取得に失敗しました: {exc}")
        raise typer.Exit(code=1) from exc

    typer.echo(f"token: {token[:6]}... (expires_at={expires_at})")
