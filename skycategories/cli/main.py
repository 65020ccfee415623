"""
CLI entry point for the Sky Categories client.

Provides command-line access to the categories service: creating and fetching
categories and managing their project and skill associations.
"""

import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from skycategories._version import __version__
from skycategories.config.settings import get_default_config_path, load_config
from skycategories.exceptions import InvalidConfigurationError
from skycategories.logging_config import setup_logging
from skycategories.cli.context import CLIContext, pass_context


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (overrides configuration)',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.option(
    '--base-url',
    envvar='SKYCATEGORIES_BASE_URL',
    default=None,
    help='Root URL of the categories service',
)
@click.option(
    '--api-key',
    envvar='SKYCATEGORIES_API_KEY',
    default=None,
    help='API key sent as X-API-Key',
)
@click.option(
    '--token',
    envvar='SKYCATEGORIES_TOKEN',
    default=None,
    help='Authorization header value (e.g. "Bearer <jwt>")',
)
@click.version_option(version=__version__, prog_name='skycategories')
@pass_context
def cli(
    ctx: CLIContext,
    config: Optional[Path],
    log_level: Optional[str],
    verbose: bool,
    base_url: Optional[str],
    api_key: Optional[str],
    token: Optional[str],
):
    """
    Sky Categories - command-line client for the categories service.

    Creates and reads categories and manages their associations with
    projects and skills.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None

    try:
        ctx.config = load_config(ctx.config_path)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    overrides = {
        key: value
        for key, value in (('base_url', base_url), ('api_key', api_key), ('token', token))
        if value is not None
    }
    ctx.client_config = dataclasses.replace(ctx.config.client, **overrides)

    effective_log_level = log_level.upper() if log_level else ctx.config.logging.level.upper()
    log_file = Path(ctx.config.logging.file) if ctx.config.logging.file else None
    setup_logging(
        level=effective_log_level,
        log_file=log_file,
        json_format=ctx.config.logging.format == "json",
    )

    if verbose:
        logger = logging.getLogger("skycategories")
        logger.info(f"Loaded configuration from: {ctx.config_path or 'defaults'}")
        logger.info(f"Service: {ctx.client_config.base_url}")


@cli.group()
def category():
    """Create and inspect categories."""
    pass


from skycategories.cli.category import create, get, projects, skills
category.add_command(create)
category.add_command(get)
category.add_command(projects)
category.add_command(skills)


@cli.group()
def project():
    """Manage category/project associations."""
    pass


from skycategories.cli import project as project_commands
project.add_command(project_commands.categories)
project.add_command(project_commands.associate)
project.add_command(project_commands.disassociate)


@cli.group()
def skill():
    """Manage category/skill associations."""
    pass


from skycategories.cli import skill as skill_commands
skill.add_command(skill_commands.categories)
skill.add_command(skill_commands.associate)
skill.add_command(skill_commands.disassociate)


if __name__ == '__main__':
    cli()
