"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

Python SDK for the categories microservice.
"""

from skycategories.sdk.client import CategoriesClient
from skycategories.sdk.models import (
    AssociateCategoryWithProjectRequest,
    AssociateCategoryWithSkillRequest,
    Category,
    CreateCategoryRequest,
    DisassociateCategoryFromSkillRequest,
    GetCategoriesForSkillRequest,
    GetCategoriesForSkillResponse,
    GetSkillIDsForCategoryRequest,
    GetSkillIDsForCategoryResponse,
)

__all__ = [
    "CategoriesClient",
    "AssociateCategoryWithProjectRequest",
    "AssociateCategoryWithSkillRequest",
    "Category",
    "CreateCategoryRequest",
    "DisassociateCategoryFromSkillRequest",
    "GetCategoriesForSkillRequest",
    "GetCategoriesForSkillResponse",
    "GetSkillIDsForCategoryRequest",
    "GetSkillIDsForCategoryResponse",
]
