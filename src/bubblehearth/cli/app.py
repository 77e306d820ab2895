from __future__ import annotations

import typer

from bubblehearth.cli.commands import classic, token
from bubblehearth.shared.logging import configure_logging

app = typer.Typer(help="Blizzard Game Data API クライアントの CLI")

app.command("token", help="アクセストークンの取得確認")(token.fetch_token)
app.add_typer(classic.app, name="classic", help="WoW Classic の Game Data API")


def main() -> None:
    """エントリポイント。"""

    configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover - CLI エントリ
    main()
