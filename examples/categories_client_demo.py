"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

Demo script for the CategoriesClient SDK.

Walks through every operation of the categories service.

Requirements:
- Categories service running at http://localhost:8080 (or SKYCATEGORIES_BASE_URL)
- SKYCATEGORIES_TOKEN and SKYCATEGORIES_API_KEY set if the service checks them
"""

import os
from uuid import uuid4

from skycategories.exceptions import SDKError, UnexpectedStatusError
from skycategories.logging_config import set_correlation_id, setup_logging
from skycategories.sdk import (
    AssociateCategoryWithSkillRequest,
    CategoriesClient,
    CreateCategoryRequest,
    DisassociateCategoryFromSkillRequest,
    GetCategoriesForSkillRequest,
    GetSkillIDsForCategoryRequest,
)


def demo_categories(client: CategoriesClient) -> None:
    """Create a category and link it to a project and a skill."""
    project_id = uuid4()
    skill_id = uuid4()

    # 1. Create a category
    print("1. Creating category...")
    category = client.create_category(CreateCategoryRequest(name="Sales"))
    print(f"   Category ID: {category.id} (version {category.version})\n")

    # 2. Read it back
    print("2. Fetching category...")
    fetched = client.get_category(category.id)
    print(f"   Name: {fetched.name}, created {fetched.created_at}\n")

    # 3. Project associations
    print("3. Associating with project...")
    client.associate_category_with_project(category.id, project_id)
    categories = client.get_categories_for_project(project_id)
    print(f"   Project {project_id} has {len(categories)} category(ies)")
    project_ids = client.get_project_ids_for_category(category.id)
    print(f"   Category is on {len(project_ids)} project(s)")
    client.disassociate_category_from_project(category.id, project_id)
    print("   Disassociated\n")

    # 4. Skill associations
    print("4. Associating with skill...")
    client.associate_category_with_skill(
        AssociateCategoryWithSkillRequest(category_id=category.id, skill_id=skill_id)
    )
    by_skill = client.get_categories_for_skill(GetCategoriesForSkillRequest(skill_id=skill_id))
    print(f"   Skill {skill_id} has {len(by_skill.categories)} category(ies)")
    by_category = client.get_skill_ids_for_category(
        GetSkillIDsForCategoryRequest(category_id=category.id)
    )
    print(f"   Category has {len(by_category.skill_ids)} skill(s)")
    client.disassociate_category_from_skill(
        DisassociateCategoryFromSkillRequest(category_id=category.id, skill_id=skill_id)
    )
    print("   Disassociated\n")


def demo_error_handling(client: CategoriesClient) -> None:
    """Show how an unexpected status is reported."""
    print("5. Fetching a category that does not exist...")
    try:
        client.get_category(uuid4())
    except UnexpectedStatusError as e:
        print(f"   Got {e.status_code} (expected {e.expected_status}): {e.body}\n")


if __name__ == "__main__":
    print("Sky Categories Client SDK Demo")
    print("=" * 50)
    print()

    setup_logging(level="INFO", json_format=False)
    set_correlation_id()

    base_url = os.environ.get("SKYCATEGORIES_BASE_URL", "http://localhost:8080")

    with CategoriesClient(
        base_url=base_url,
        token=os.environ.get("SKYCATEGORIES_TOKEN", ""),
        api_key=os.environ.get("SKYCATEGORIES_API_KEY", ""),
    ) as client:
        try:
            demo_categories(client)
            demo_error_handling(client)
        except SDKError as e:
            print(f"Error: {e}")
            print(f"\nMake sure the categories service is running at {base_url}!")
