"""Command line entry point for the Fleep step."""

from __future__ import annotations

import os
import sys

import click
from colorama import init, Fore, Style

from fleep_notify import __version__
from fleep_notify.config import ENV_REQUEST_TIMEOUT
from fleep_notify.console import setup_logging
from fleep_notify.errors import (
    ConfigError,
    PayloadBuildError,
    RequestTransportError,
    WebhookRejected,
)
from fleep_notify.models import StepConfig
from fleep_notify.step import run_step

init(autoreset=True)


def print_config(config: StepConfig) -> None:
    click.echo()
    click.echo(f"{Fore.BLUE}Fleep configs:{Style.RESET_ALL}")
    click.echo(f" - WebhookURL: {config.webhook_url}")
    click.echo(f" - FromUsername: {config.from_username}")
    click.echo(f" - FromUsernameOnError: {config.from_username_on_error}")
    click.echo(f" - Message: {config.message}")
    click.echo(f" - MessageOnError: {config.message_on_error}")
    click.echo()
    click.echo(f"{Fore.BLUE}Other configs:{Style.RESET_ALL}")
    click.echo(f" - IsDebugMode: {config.is_debug_mode}")
    click.echo(f" - IsBuildFailed: {config.is_build_failed}")
    click.echo()


def fail(title: str, detail: str = "") -> None:
    click.echo(err=True)
    click.echo(f"{Fore.RED}{title}{Style.RESET_ALL} {detail}".rstrip(), err=True)
    click.echo(err=True)
    sys.exit(1)


@click.command()
@click.version_option(version=__version__, prog_name="fleep-notify")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    envvar=ENV_REQUEST_TIMEOUT,
    default=None,
    help="Seconds to wait for Fleep to answer (default: no explicit limit)",
)
def cli(timeout: float | None) -> None:
    """Send a message to a Fleep conversation through its incoming webhook.

    Inputs are read from the step environment variables.
    """
    config = StepConfig.from_env(os.environ)
    setup_logging(config.is_debug_mode)
    print_config(config)

    try:
        run_step(config, timeout=timeout)
    except ConfigError as e:
        fail("Issue with input:", str(e))
    except PayloadBuildError as e:
        fail("Failed to create JSON payload:", str(e))
    except RequestTransportError as e:
        fail("Failed to send the request:", str(e))
    except WebhookRejected as e:
        click.echo(err=True)
        click.echo(f"{Fore.RED}Request failed{Style.RESET_ALL}", err=True)
        click.echo(f"Response from Fleep ({e.status_code}): {e.body}", err=True)
        click.echo(err=True)
        sys.exit(1)

    click.echo()
    click.echo(f"{Fore.GREEN}Fleep message successfully sent! 🚀")
    click.echo()


def main() -> None:
    cli()
