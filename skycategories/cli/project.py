"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

CLI commands for category/project associations.
"""

from uuid import UUID

import click

from skycategories.cli.category import echo_categories, format_option
from skycategories.cli.context import handle_errors, validate_uuid


category_id_option = click.option(
    '--category-id',
    '-c',
    required=True,
    callback=validate_uuid,
    help='Category ID (UUID)',
)

project_id_option = click.option(
    '--project-id',
    '-p',
    required=True,
    callback=validate_uuid,
    help='Project ID (UUID)',
)


@click.command('categories')
@project_id_option
@format_option
@click.pass_context
@handle_errors
def categories(ctx, project_id: UUID, format: str):
    """
    List the categories associated with a project.

    Examples:

        skycategories project categories --project-id 22222222-2222-2222-2222-222222222222
    """
    with ctx.obj.create_client() as client:
        result = client.get_categories_for_project(project_id)
    echo_categories(result, format)


@click.command('associate')
@category_id_option
@project_id_option
@click.pass_context
@handle_errors
def associate(ctx, category_id: UUID, project_id: UUID):
    """Associate a category with a project."""
    with ctx.obj.create_client() as client:
        client.associate_category_with_project(category_id, project_id)
    click.echo(f"Associated category {category_id} with project {project_id}")


@click.command('disassociate')
@category_id_option
@project_id_option
@click.pass_context
@handle_errors
def disassociate(ctx, category_id: UUID, project_id: UUID):
    """Remove the association between a category and a project."""
    with ctx.obj.create_client() as client:
        client.disassociate_category_from_project(category_id, project_id)
    click.echo(f"Disassociated category {category_id} from project {project_id}")
