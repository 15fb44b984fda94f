"""
Job listing query builder.

Turns the optional ``GET /api/jobs`` parameters into a ``JobQuery`` and
compiles it to a MongoDB filter and sort. The filter is first expressed as
tagged clauses so its shape can be inspected and tested without Mongo
operator syntax:

    JobQuery.from_params(keyword="python", category="Engineering").clauses()
    -> [AnyOf(title|company|description CONTAINS "python"),
        AnyOf(category|categories CONTAINS "Engineering")]

Clause groups are always combined with AND.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pymongo import DESCENDING

KEYWORD_FIELDS = ("title", "company", "description")
CATEGORY_FIELDS = ("category", "categories")
SORT_FIELD = "created_at"

# Largest value BSON can encode as an integer
MAX_LIMIT = 2 ** 63 - 1


class MatchKind(str, Enum):
    """How a field is compared against a value."""
    CONTAINS = "contains"  # case-insensitive substring
    EQUALS = "equals"      # exact value


@dataclass(frozen=True)
class FieldMatch:
    """A single field condition."""
    field: str
    kind: MatchKind
    value: Any

    def to_mongo(self) -> Dict[str, Any]:
        if self.kind == MatchKind.CONTAINS:
            # Applied to an array field, $regex matches if any element matches
            return {self.field: {"$regex": re.escape(self.value), "$options": "i"}}
        return {self.field: self.value}


@dataclass(frozen=True)
class AnyOf:
    """Logical OR over field conditions."""
    clauses: Tuple[FieldMatch, ...]

    def to_mongo(self) -> Dict[str, Any]:
        if len(self.clauses) == 1:
            return self.clauses[0].to_mongo()
        return {"$or": [clause.to_mongo() for clause in self.clauses]}


Clause = Union[FieldMatch, AnyOf]


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_limit(value: Optional[str]) -> int:
    """
    Positive integer limit, or 0 (unlimited) for anything else.

    Values too large for a BSON int64 also mean unlimited.
    """
    if value is None:
        return 0
    try:
        limit = int(str(value).strip())
    except ValueError:
        return 0
    return limit if 0 < limit <= MAX_LIMIT else 0


@dataclass
class JobQuery:
    """
    Parsed job listing parameters.

    Attributes:
        keyword: Substring searched in title, company and description
        location: Substring searched in location
        category: Substring searched in category / categories
        featured: Only featured jobs when True
        limit: Maximum results (0 = no limit)
        sort: Requested ordering. Results are always newest first.
    """
    keyword: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    featured: bool = False
    limit: int = 0
    sort: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        keyword: Optional[str] = None,
        location: Optional[str] = None,
        category: Optional[str] = None,
        featured: Optional[str] = None,
        limit: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> "JobQuery":
        """Build from raw query-string values."""
        return cls(
            keyword=_clean(keyword),
            location=_clean(location),
            category=_clean(category),
            featured=featured == "true",
            limit=parse_limit(limit),
            sort=_clean(sort),
        )

    def clauses(self) -> List[Clause]:
        clauses: List[Clause] = []

        if self.keyword:
            clauses.append(AnyOf(tuple(
                FieldMatch(field, MatchKind.CONTAINS, self.keyword) for field in KEYWORD_FIELDS
            )))
        if self.location:
            clauses.append(FieldMatch("location", MatchKind.CONTAINS, self.location))
        if self.category:
            clauses.append(AnyOf(tuple(
                FieldMatch(field, MatchKind.CONTAINS, self.category) for field in CATEGORY_FIELDS
            )))
        if self.featured:
            clauses.append(FieldMatch("featured", MatchKind.EQUALS, True))

        return clauses

    def to_filter(self) -> Dict[str, Any]:
        """Compile to a MongoDB filter. No clauses matches everything."""
        conditions = [clause.to_mongo() for clause in self.clauses()]

        if len(conditions) > 1:
            return {"$and": conditions}
        if len(conditions) == 1:
            return conditions[0]
        return {}

    def sort_spec(self) -> List[tuple]:
        # Only newest-first ordering is supported
        return [(SORT_FIELD, DESCENDING)]
