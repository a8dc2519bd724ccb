"""Record types exchanged between the pipeline stages.

The field names produced by ``to_dict`` are the intermediate store contract:
any producer/consumer pair must agree on exactly these names and shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from techies_site.exceptions import DataValidationError

PERSON_FIELDS: tuple[str, ...] = (
    "slug",
    "post_id",
    "name",
    "hero_image",
    "thumbnail",
    "years_in_tech",
    "role",
    "location",
    "interview_date",
    "abstract",
    "personal_links",
    "interview_content",
    "prev",
    "next",
    "title",
)
CATEGORY_FIELDS: tuple[str, ...] = ("slug", "display_name", "post_ids")


@dataclass(frozen=True)
class PersonalLink:
    """One entry of a person's ordered link list."""

    url: str
    label: str

    def to_dict(self) -> dict[str, str]:
        """Serialize as a store object."""
        return {"url": self.url, "label": self.label}


@dataclass(frozen=True)
class NavLink:
    """Weak reference to a chronologically adjacent person.

    The slug is not validated against the collection; it may dangle.
    """

    name: str
    slug: str

    def to_dict(self) -> dict[str, str]:
        """Serialize as a store object."""
        return {"name": self.name, "slug": self.slug}


@dataclass
class PersonRecord:
    """A single interviewed person.

    ``post_id`` of ``0`` means the legacy identifier was not found and must be
    backfilled from the listing before the record is persisted.
    """

    slug: str
    post_id: int
    name: str = ""
    title: str = ""
    role: str = ""
    location: str = ""
    years_in_tech: str = ""
    interview_date: str = ""
    hero_image: str = ""
    thumbnail: str = ""
    abstract: str = ""
    interview_content: str = ""
    personal_links: list[PersonalLink] = field(default_factory=list)
    prev: NavLink | None = None
    next: NavLink | None = None

    @property
    def canonical_path(self) -> str:
        """Root-relative clean URL of this person's page."""
        return f"/{self.slug}/"

    @property
    def card_marker(self) -> str:
        """Attribute text identifying this person's gallery card."""
        return f'id="post-{self.post_id}"'

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the store field names, in contract order."""
        return {
            "slug": self.slug,
            "post_id": self.post_id,
            "name": self.name,
            "hero_image": self.hero_image,
            "thumbnail": self.thumbnail,
            "years_in_tech": self.years_in_tech,
            "role": self.role,
            "location": self.location,
            "interview_date": self.interview_date,
            "abstract": self.abstract,
            "personal_links": [link.to_dict() for link in self.personal_links],
            "interview_content": self.interview_content,
            "prev": self.prev.to_dict() if self.prev else None,
            "next": self.next.to_dict() if self.next else None,
            "title": self.title,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PersonRecord:
        """Build a record from a store mapping.

        Raises
        ------
        DataValidationError
            If ``slug`` is missing, ``post_id`` is not an integer, or a
            link list, link entry or neighbour entry is malformed.
        """
        slug = _require_str(data, "slug", "person")
        post_id = _require_int(data.get("post_id"), f"person {slug!r} post_id")
        raw_links = data.get("personal_links") or []
        if not isinstance(raw_links, list):
            raise DataValidationError(f"person {slug!r} personal_links must be a list")
        links = [_link_from_dict(item, slug) for item in raw_links]
        return cls(
            slug=slug,
            post_id=post_id,
            name=str(data.get("name") or ""),
            title=str(data.get("title") or ""),
            role=str(data.get("role") or ""),
            location=str(data.get("location") or ""),
            years_in_tech=str(data.get("years_in_tech") or ""),
            interview_date=str(data.get("interview_date") or ""),
            hero_image=str(data.get("hero_image") or ""),
            thumbnail=str(data.get("thumbnail") or ""),
            abstract=str(data.get("abstract") or ""),
            interview_content=str(data.get("interview_content") or ""),
            personal_links=links,
            prev=_nav_from_dict(data.get("prev"), f"person {slug!r} prev"),
            next=_nav_from_dict(data.get("next"), f"person {slug!r} next"),
        )


@dataclass
class CategoryRecord:
    """A named grouping of people; ``post_ids`` order is display order."""

    slug: str
    display_name: str
    post_ids: list[int] = field(default_factory=list)

    @property
    def canonical_path(self) -> str:
        """Root-relative clean URL of this category's page."""
        return f"/category/{self.slug}/"

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the store field names."""
        return {
            "slug": self.slug,
            "display_name": self.display_name,
            "post_ids": list(self.post_ids),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CategoryRecord:
        """Build a category from a store mapping, validating its ids."""
        slug = _require_str(data, "slug", "category")
        post_ids = [
            _require_int(value, f"category {slug!r} post_ids")
            for value in data.get("post_ids") or []
        ]
        return cls(
            slug=slug,
            display_name=str(data.get("display_name") or slug),
            post_ids=post_ids,
        )


def _require_str(data: Mapping[str, Any], key: str, kind: str) -> str:
    if not isinstance(data, Mapping):
        raise DataValidationError(f"Expected an object for {kind} record")
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise DataValidationError(
            f"{kind} record is missing '{key}'", context={"record": dict(data)}
        )
    return value


def _require_int(value: Any, what: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataValidationError(f"{what} must be an integer, got {value!r}")
    return value


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DataValidationError(f"{what} must be an object, got {value!r}")
    return value


def _link_from_dict(value: Any, slug: str) -> PersonalLink:
    item = _require_mapping(value, f"person {slug!r} personal_links entry")
    return PersonalLink(url=str(item.get("url", "")), label=str(item.get("label", "")))


def _nav_from_dict(value: Any, what: str) -> NavLink | None:
    if not value:
        return None
    value = _require_mapping(value, what)
    return NavLink(name=str(value.get("name", "")), slug=str(value.get("slug", "")))
