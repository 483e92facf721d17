"""Warden CLI application using Typer.

Operator utilities: secret generation, schema management, and manual
registration / login / token and session inspection against the
configured database.
"""

import asyncio
import json
import logging
import secrets
import sys
from collections.abc import Awaitable, Callable
from typing import NoReturn, TypeVar

import typer
from pydantic import ValidationError as SettingsError
from rich.console import Console

from warden.container import AuthServices, build_jwt_service, build_sqlalchemy_services
from warden.infrastructure import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
    session_scope,
)
from warden_auth import AuthError, SessionNotFoundError
from warden_config import get_settings
from warden_identity import SessionDTO

T = TypeVar("T")

app = typer.Typer(
    name="warden",
    help="Warden - credential and session management CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(name="secrets", help="Secret generation utilities", no_args_is_help=True)
db_app = typer.Typer(name="db", help="Database schema management", no_args_is_help=True)
users_app = typer.Typer(name="users", help="Register and log in identities", no_args_is_help=True)
tokens_app = typer.Typer(name="tokens", help="Inspect signed tokens", no_args_is_help=True)
sessions_app = typer.Typer(name="sessions", help="Inspect and expire sessions", no_args_is_help=True)

app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(users_app)
app.add_typer(tokens_app)
app.add_typer(sessions_app)

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    """Configure console logging for the warden packages."""
    log_level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    for name in ("warden", "warden_auth", "warden_identity"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def _fail(error: AuthError) -> NoReturn:
    console.print(f"[red]{error.kind.value}[/red]: {error.message}")
    raise typer.Exit(code=1)


def _run_with_services(work: Callable[[AuthServices], Awaitable[T]]) -> T:
    """Run ``work`` inside one committed unit of work."""
    settings = get_settings()

    async def _main() -> T:
        engine = create_engine(settings)
        try:
            async with session_scope(create_session_maker(engine)) as session:
                return await work(build_sqlalchemy_services(session, settings))
        finally:
            await engine.dispose()

    try:
        return asyncio.run(_main())
    except AuthError as e:
        _fail(e)


@app.callback()
def main() -> None:
    """Configure logging before any subcommand runs."""
    try:
        level_name = get_settings().log_level
    except SettingsError:
        # secrets generate must work before JWT_SECRET_KEY exists
        level_name = "INFO"
    _configure_logging(level_name)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a JWT signing secret for the .env file."""
    # 64 bytes -> 86 url-safe characters
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")
    console.print(
        "[yellow]Keep this secret secure and never commit it to version control![/yellow]"
    )


@db_app.command("init")
def init_db() -> None:
    """Create all missing tables."""
    settings = get_settings()

    async def _main() -> None:
        engine = create_engine(settings)
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_main())
    console.print("[green]Database initialized[/green]")


@db_app.command("drop")
def drop_db(
    yes: bool = typer.Option(False, "--yes", help="Skip the confirmation prompt"),
) -> None:
    """Drop all warden tables."""
    if not yes:
        typer.confirm("Drop all warden tables?", abort=True)
    settings = get_settings()

    async def _main() -> None:
        engine = create_engine(settings)
        try:
            await drop_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_main())
    console.print("[yellow]Database tables dropped[/yellow]")


@users_app.command("register")
def register_user(
    email: str,
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
) -> None:
    """Register a new identity."""
    identity = _run_with_services(lambda s: s.registration.register(email, password))
    console.print(f"[green]Registered[/green] {identity.email} ({identity.id})")


@users_app.command("login")
def login_user(
    email: str,
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Log in and print the token and session id."""
    result = _run_with_services(lambda s: s.login.login(email, password))
    console.print(f"[cyan]identity[/cyan]   {result.identity.email} ({result.identity.id})")
    console.print(f"[cyan]token[/cyan]      {result.token}")
    console.print(f"[cyan]session_id[/cyan] {result.session_id}")


@tokens_app.command("verify")
def verify_token(token: str) -> None:
    """Verify a token's signature and expiry and print its claims."""
    jwt_service = build_jwt_service(get_settings())
    try:
        payload = jwt_service.verify_token(token)
    except AuthError as e:
        _fail(e)
    console.print_json(
        json.dumps(
            {
                "claims": payload.claims,
                "issued_at": payload.issued_at.isoformat(),
                "expires_at": payload.expires_at.isoformat(),
            }
        )
    )


@sessions_app.command("show")
def show_session(session_id: str) -> None:
    """Resolve a live session."""

    async def _resolve(services: AuthServices) -> SessionDTO | None:
        # Swallow not-found inside the unit of work so a lazy purge still commits
        try:
            return await services.sessions.resolve(session_id)
        except SessionNotFoundError:
            return None

    session = _run_with_services(_resolve)
    if session is None:
        _fail(SessionNotFoundError())
    console.print_json(json.dumps(session.to_dict()))


@sessions_app.command("revoke")
def revoke_session(session_id: str) -> None:
    """Delete a session (logout)."""
    removed = _run_with_services(lambda s: s.sessions.end_session(session_id))
    if removed:
        console.print("[green]Session revoked[/green]")
    else:
        console.print("[yellow]No such session[/yellow]")


@sessions_app.command("sweep")
def sweep_sessions() -> None:
    """Delete every expired session."""
    count = _run_with_services(lambda s: s.sessions.purge_expired())
    console.print(f"Removed [bold]{count}[/bold] expired sessions")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
