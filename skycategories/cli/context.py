"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

CLI context for the Sky Categories client.

Provides shared context object and helpers for CLI commands.
"""

import functools
import logging
import sys
import uuid
from typing import Optional

import click

from skycategories.config.settings import ClientConfig
from skycategories.exceptions import SkyCategoriesError
from skycategories.sdk.client import CategoriesClient


class CLIContext:
    """Context object for CLI commands."""

    def __init__(self):
        self.config = None
        self.config_path = None
        self.verbose = False
        # Effective client settings after command-line overrides
        self.client_config: Optional[ClientConfig] = None

    def create_client(self) -> CategoriesClient:
        """Build a CategoriesClient from the effective client settings."""
        if self.client_config is None:
            raise click.UsageError("client configuration has not been loaded")
        return CategoriesClient.from_config(self.client_config)


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


def validate_uuid(ctx, param, value):
    """
    Validate that a value is a valid UUID.

    Returns:
        The value as a uuid.UUID

    Raises:
        click.BadParameter: If value is not a valid UUID
    """
    if value is None:
        return value

    try:
        return uuid.UUID(value)
    except (ValueError, TypeError):
        raise click.BadParameter(f"must be a valid UUID, got {value}")


def handle_errors(func):
    """
    Decorator to handle SkyCategoriesError exceptions in CLI commands.

    Prints a one-line error to stderr and exits with status 1.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SkyCategoriesError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        except click.ClickException:
            raise
        except Exception as e:
            click.echo(f"Unexpected error: {e}", err=True)
            if logging.getLogger("skycategories").isEnabledFor(logging.DEBUG):
                import traceback
                traceback.print_exc()
            sys.exit(1)

    return wrapper
