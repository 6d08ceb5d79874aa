"""Management commands for the case-card engine."""

from __future__ import annotations

import json
import os

import click
from dotenv import load_dotenv

# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()

from case_cards.core import config  # noqa: E402
from case_cards.core.exceptions import CaseCardError  # noqa: E402
from case_cards.core.logging_config import setup_logging  # noqa: E402
from case_cards.db.session import create_tables  # noqa: E402
from case_cards.services.case_card_composer import (  # noqa: E402
    compose_case_card_version,
)
from case_cards.services.section_classifier import classify  # noqa: E402


@click.group()
@click.option("--log-level", default=None, help="Overrides LOG_LEVEL.")
@click.option("--sql-echo", is_flag=True, default=False, help="Log SQL queries.")
def cli(log_level: str | None, sql_echo: bool) -> None:
    """Entry point for management commands."""
    setup_logging(
        log_level=log_level or config.LOG_LEVEL,
        enable_sql_echo=sql_echo,
        use_json_format=config.LOG_JSON,
    )
    config.log_composition_config()


@cli.command("init-db")
def init_db() -> None:
    """Create the case-card tables if they do not exist."""
    create_tables()
    click.echo("Tables created.")


@cli.command("compose")
@click.argument("version_id")
@click.option("--indent", default=2, show_default=True, help="JSON indentation.")
def compose(version_id: str, indent: int) -> None:
    """Compose a case-card version and print the result as JSON."""
    try:
        result = compose_case_card_version(version_id)
    except CaseCardError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(result.to_dict(), indent=indent, default=str))


@cli.command("classify")
@click.argument("hint")
def classify_hint(hint: str) -> None:
    """Show which section a preference item with HINT would be routed to."""
    click.echo(classify({"section": hint}))


if __name__ == "__main__":
    cli()
