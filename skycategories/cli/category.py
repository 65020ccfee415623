"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

CLI commands for categories.

Provides commands for creating and fetching categories and for listing the
projects and skills a category is associated with.
"""

import json
from typing import List
from uuid import UUID

import click

from skycategories.cli.context import handle_errors, validate_uuid
from skycategories.logging_config import get_logger
from skycategories.sdk.models import (
    Category,
    CreateCategoryRequest,
    GetSkillIDsForCategoryRequest,
)

logger = get_logger(__name__)


format_option = click.option(
    '--format',
    '-f',
    type=click.Choice(['table', 'json'], case_sensitive=False),
    default='table',
    help='Output format (default: table)',
)


def echo_category(category: Category, format: str) -> None:
    """Print a single category."""
    if format.lower() == 'json':
        click.echo(json.dumps(category.to_dict(), indent=2))
        return

    click.echo("Category Details")
    click.echo("=" * 50)
    click.echo(f"Category ID: {category.id}")
    click.echo(f"Name:        {category.name}")
    click.echo(f"Version:     {category.version}")
    click.echo(f"Created:     {category.created_at or '-'}")
    click.echo(f"Updated:     {category.updated_at or '-'}")


def echo_categories(categories: List[Category], format: str) -> None:
    """Print a list of categories as a table or JSON array."""
    if format.lower() == 'json':
        click.echo(json.dumps([c.to_dict() for c in categories], indent=2))
        return

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"Total categories: {len(categories)}")
    click.echo()

    name_width = max(max(len(c.name) for c in categories), len("Name"))
    id_width = 36

    header = f"{'Category ID':<{id_width}}  {'Name':<{name_width}}  Version"
    click.echo(header)
    click.echo("-" * len(header))
    for category in categories:
        click.echo(
            f"{str(category.id):<{id_width}}  "
            f"{category.name:<{name_width}}  "
            f"{category.version}"
        )


def echo_ids(ids: List[UUID], label: str, format: str) -> None:
    """Print a list of IDs, one per line, or as a JSON array."""
    if format.lower() == 'json':
        click.echo(json.dumps([str(i) for i in ids], indent=2))
        return

    if not ids:
        click.echo(f"No {label} found.")
        return

    for i in ids:
        click.echo(str(i))


@click.command('create')
@click.option('--name', '-n', required=True, help='Category name')
@format_option
@click.pass_context
@handle_errors
def create(ctx, name: str, format: str):
    """
    Create a new category.

    Examples:

        skycategories category create --name Sales
    """
    with ctx.obj.create_client() as client:
        category = client.create_category(CreateCategoryRequest(name=name))
    echo_category(category, format)


@click.command('get')
@click.option(
    '--category-id',
    '-c',
    required=True,
    callback=validate_uuid,
    help='Category ID (UUID)',
)
@format_option
@click.pass_context
@handle_errors
def get(ctx, category_id: UUID, format: str):
    """
    Get details for a specific category.

    Examples:

        skycategories category get --category-id 11111111-1111-1111-1111-111111111111
    """
    with ctx.obj.create_client() as client:
        category = client.get_category(category_id)
    echo_category(category, format)


@click.command('projects')
@click.option(
    '--category-id',
    '-c',
    required=True,
    callback=validate_uuid,
    help='Category ID (UUID)',
)
@format_option
@click.pass_context
@handle_errors
def projects(ctx, category_id: UUID, format: str):
    """List the IDs of projects associated with a category."""
    with ctx.obj.create_client() as client:
        project_ids = client.get_project_ids_for_category(category_id)
    echo_ids(project_ids, "projects", format)


@click.command('skills')
@click.option(
    '--category-id',
    '-c',
    required=True,
    callback=validate_uuid,
    help='Category ID (UUID)',
)
@format_option
@click.pass_context
@handle_errors
def skills(ctx, category_id: UUID, format: str):
    """List the IDs of skills associated with a category."""
    with ctx.obj.create_client() as client:
        response = client.get_skill_ids_for_category(
            GetSkillIDsForCategoryRequest(category_id=category_id)
        )
    echo_ids(response.skill_ids, "skills", format)
