"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

Wire records exchanged with the categories service.

Every record converts to and from the service's JSON shape with
``to_dict()`` / ``from_dict()``. Keys on the wire are lower snake case.
``from_dict`` raises ``KeyError``, ``TypeError`` or ``ValueError`` when the
payload does not have the expected shape; the client reports those as
decode failures.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID


_RFC3339 = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>[Zz]|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an RFC 3339 timestamp into an aware datetime.

    Fractional seconds beyond microsecond precision are truncated.
    """
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")

    match = _RFC3339.match(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")

    date_part, time_part = match.group("base")[:10], match.group("base")[11:]
    base = datetime.strptime(f"{date_part}T{time_part}", "%Y-%m-%dT%H:%M:%S")

    frac = match.group("frac")
    if frac:
        base = base.replace(microsecond=int((frac + "000000")[:6]))

    tz = match.group("tz")
    if tz in ("Z", "z"):
        tzinfo = timezone.utc
    else:
        sign = 1 if tz[0] == "+" else -1
        offset = timedelta(hours=int(tz[1:3]), minutes=int(tz[4:6]))
        tzinfo = timezone.utc if not offset else timezone(sign * offset)

    return base.replace(tzinfo=tzinfo)


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as RFC 3339.

    UTC (and naive) values get a ``Z`` suffix.
    """
    offset = value.utcoffset()
    if offset is None:
        return value.isoformat() + "Z"
    if offset == timedelta(0):
        return value.replace(tzinfo=None).isoformat() + "Z"
    return value.isoformat()


def parse_uuid(value: Any) -> UUID:
    """Parse a UUID from its JSON string form."""
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        raise TypeError(f"UUID must be a string, got {type(value).__name__}")
    return UUID(value)


def parse_uuid_list(value: Any) -> List[UUID]:
    """Parse a JSON array of UUID strings. ``null`` decodes to an empty list."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a list of UUIDs, got {type(value).__name__}")
    return [parse_uuid(item) for item in value]


def parse_category_list(value: Any) -> List["Category"]:
    """Parse a JSON array of categories. ``null`` decodes to an empty list."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a list of categories, got {type(value).__name__}")
    return [Category.from_dict(item) for item in value]


@dataclass
class Category:
    """
    A named tag entity owned by the categories service.

    Attributes:
        id: Category identifier
        name: Display name (omitted on the wire when empty)
        created_at: Creation timestamp
        updated_at: Last update timestamp
        version: Optimistic-concurrency counter
    """
    id: UUID
    name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {"id": str(self.id)}
        if self.name:
            data["name"] = self.name
        if self.created_at is not None:
            data["created_at"] = format_timestamp(self.created_at)
        if self.updated_at is not None:
            data["updated_at"] = format_timestamp(self.updated_at)
        data["version"] = self.version
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        """Create Category from dictionary."""
        if not isinstance(data, dict):
            raise TypeError(f"category must be an object, got {type(data).__name__}")

        name = data.get("name")
        if name is None:
            name = ""
        if not isinstance(name, str):
            raise TypeError(f"category name must be a string, got {type(name).__name__}")

        version = data.get("version", 0)
        if isinstance(version, bool) or not isinstance(version, int):
            raise TypeError(f"category version must be an integer, got {version!r}")

        created_at = data.get("created_at")
        updated_at = data.get("updated_at")

        return cls(
            id=parse_uuid(data["id"]),
            name=name,
            created_at=parse_timestamp(created_at) if created_at is not None else None,
            updated_at=parse_timestamp(updated_at) if updated_at is not None else None,
            version=version,
        )


@dataclass
class CreateCategoryRequest:
    """Body of a create-category call."""
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name} if self.name else {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateCategoryRequest":
        return cls(name=data.get("name") or "")


@dataclass
class AssociateCategoryWithProjectRequest:
    """
    Links a category to a project.

    The same body is used to remove the link again.
    """
    category_id: UUID
    project_id: UUID

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category_id": str(self.category_id),
            "project_id": str(self.project_id),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssociateCategoryWithProjectRequest":
        return cls(
            category_id=parse_uuid(data["category_id"]),
            project_id=parse_uuid(data["project_id"]),
        )


@dataclass
class AssociateCategoryWithSkillRequest:
    """Links a category to a skill."""
    category_id: UUID
    skill_id: UUID

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category_id": str(self.category_id),
            "skill_id": str(self.skill_id),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssociateCategoryWithSkillRequest":
        return cls(
            category_id=parse_uuid(data["category_id"]),
            skill_id=parse_uuid(data["skill_id"]),
        )


@dataclass
class DisassociateCategoryFromSkillRequest:
    """Removes the link between a category and a skill."""
    category_id: UUID
    skill_id: UUID

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category_id": str(self.category_id),
            "skill_id": str(self.skill_id),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DisassociateCategoryFromSkillRequest":
        return cls(
            category_id=parse_uuid(data["category_id"]),
            skill_id=parse_uuid(data["skill_id"]),
        )


@dataclass
class GetCategoriesForSkillRequest:
    skill_id: UUID


@dataclass
class GetCategoriesForSkillResponse:
    categories: List[Category] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"categories": [category.to_dict() for category in self.categories]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GetCategoriesForSkillResponse":
        if not isinstance(data, dict):
            raise TypeError(f"response must be an object, got {type(data).__name__}")
        return cls(categories=parse_category_list(data.get("categories")))


@dataclass
class GetSkillIDsForCategoryRequest:
    category_id: UUID


@dataclass
class GetSkillIDsForCategoryResponse:
    skill_ids: List[UUID] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"skill_ids": [str(skill_id) for skill_id in self.skill_ids]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GetSkillIDsForCategoryResponse":
        if not isinstance(data, dict):
            raise TypeError(f"response must be an object, got {type(data).__name__}")
        return cls(skill_ids=parse_uuid_list(data.get("skill_ids")))
