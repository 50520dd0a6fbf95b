"""Value types for ordering comment listings."""

from enum import Enum


class SortField(str, Enum):
    """Timestamp field used to order root comments."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
