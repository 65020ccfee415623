"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

CLI commands for category/skill associations.
"""

from uuid import UUID

import click

from skycategories.cli.category import echo_categories, format_option
from skycategories.cli.context import handle_errors, validate_uuid
from skycategories.cli.project import category_id_option
from skycategories.sdk.models import (
    AssociateCategoryWithSkillRequest,
    DisassociateCategoryFromSkillRequest,
    GetCategoriesForSkillRequest,
)


skill_id_option = click.option(
    '--skill-id',
    '-s',
    required=True,
    callback=validate_uuid,
    help='Skill ID (UUID)',
)


@click.command('categories')
@skill_id_option
@format_option
@click.pass_context
@handle_errors
def categories(ctx, skill_id: UUID, format: str):
    """
    List the categories associated with a skill.

    Examples:

        skycategories skill categories --skill-id 33333333-3333-3333-3333-333333333333
    """
    with ctx.obj.create_client() as client:
        response = client.get_categories_for_skill(
            GetCategoriesForSkillRequest(skill_id=skill_id)
        )
    echo_categories(response.categories, format)


@click.command('associate')
@category_id_option
@skill_id_option
@click.pass_context
@handle_errors
def associate(ctx, category_id: UUID, skill_id: UUID):
    """Associate a category with a skill."""
    with ctx.obj.create_client() as client:
        client.associate_category_with_skill(
            AssociateCategoryWithSkillRequest(category_id=category_id, skill_id=skill_id)
        )
    click.echo(f"Associated category {category_id} with skill {skill_id}")


@click.command('disassociate')
@category_id_option
@skill_id_option
@click.pass_context
@handle_errors
def disassociate(ctx, category_id: UUID, skill_id: UUID):
    """Remove the association between a category and a skill."""
    with ctx.obj.create_client() as client:
        client.disassociate_category_from_skill(
            DisassociateCategoryFromSkillRequest(category_id=category_id, skill_id=skill_id)
        )
    click.echo(f"Disassociated category {category_id} from skill {skill_id}")
