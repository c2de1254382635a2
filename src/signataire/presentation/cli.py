"""
Signataire CLI.

Usage:
    signataire wallet [--config CONFIG]
    signataire create-wallet [--config CONFIG]
    signataire sign [--hash HASH] [--config CONFIG]
"""

import asyncio
import sys
from typing import Awaitable, Callable, Optional

import click

from signataire.application.wallet_session import WalletSession
from signataire.config.settings import load_config
from signataire.di.container import DIContainer
from signataire.infrastructure.monitoring import setup_logging

SessionAction = Callable[[WalletSession], Awaitable[None]]


def _run(ctx: click.Context, action: SessionAction) -> None:
    """Log in, run one action, print the final status."""
    container: DIContainer = ctx.obj["container"]

    async def runner() -> None:
        session = container.wallet_session
        try:
            await session.login()
            await action(session)
        finally:
            await container.shutdown()

    asyncio.run(runner())

    status = container.status_channel.current
    if status:
        click.echo(status)
    if container.status_channel.is_failure:
        sys.exit(1)


@click.group()
@click.option("--config", "-c", "config_file", default=None, help="Config file")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str]):
    """Signataire - Stellar embedded wallet signing."""
    ctx.ensure_object(dict)
    if "container" not in ctx.obj:
        settings = load_config(config_file)
        setup_logging(
            settings.log_level,
            json_logs=settings.json_logs,
            log_dir=settings.log_dir,
        )
        ctx.obj["container"] = DIContainer(settings=settings)


@cli.command()
@click.pass_context
def wallet(ctx: click.Context):
    """Show the active Stellar wallet."""

    async def show(session: WalletSession) -> None:
        active = session.active_wallet
        if active is None:
            click.echo("No Stellar wallet")
        else:
            click.echo(f"Stellar address: {active.address}")

    _run(ctx, show)


@cli.command("create-wallet")
@click.pass_context
def create_wallet(ctx: click.Context):
    """Create a Stellar wallet if none exists."""

    async def create(session: WalletSession) -> None:
        if session.active_wallet is not None:
            click.echo(f"Stellar address: {session.active_wallet.address}")
            return
        await session.create_wallet()

    _run(ctx, create)


@cli.command()
@click.option("--hash", "hash_", default=None, help="0x-prefixed hash to sign")
@click.pass_context
def sign(ctx: click.Context, hash_: Optional[str]):
    """Sign a hash (example hash by default) and verify it."""

    async def sign_hash(session: WalletSession) -> None:
        if session.active_wallet is None:
            click.echo("No Stellar wallet; run create-wallet first", err=True)
            return
        await session.sign(hash_)

    _run(ctx, sign_hash)


def main():
    """CLI entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
