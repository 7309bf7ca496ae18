"""User lookup predicate value object."""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Pattern, Tuple

from .credentials import AccessLevel, is_number

USER_OBJECT_TYPE = "user"


@dataclass(frozen=True)
class UserPredicate:
    """Selects the user record a set of credentials proves.

    A record matches when its type is ``object_type``, its username or email
    fully matches ``identifier_pattern``, its stored password equals
    ``password`` and, when ``min_access_level`` is set, its access level is
    at least that value.

    Lookup collaborators may evaluate the predicate directly (``matches``),
    render it as a document filter (``as_filter``) or compile it into their
    own query language from the public fields.
    """

    identifier_pattern: Pattern[str]
    password: str
    object_type: str = USER_OBJECT_TYPE
    min_access_level: Optional[AccessLevel] = None

    IDENTIFIER_FIELDS: ClassVar[Tuple[str, ...]] = ("username", "email")
    PASSWORD_FIELD: ClassVar[str] = "password"
    ACCESS_LEVEL_FIELD: ClassVar[str] = "access_level"
    TYPE_FIELD: ClassVar[str] = "object_type"

    def as_filter(self) -> Dict[str, Any]:
        """Render the predicate as a document-store filter."""
        query: Dict[str, Any] = {
            self.TYPE_FIELD: self.object_type,
            "$or": [{name: self.identifier_pattern} for name in self.IDENTIFIER_FIELDS],
            self.PASSWORD_FIELD: self.password,
        }
        if self.min_access_level is not None:
            query[self.ACCESS_LEVEL_FIELD] = {"$gte": self.min_access_level}
        return query

    def matches(self, record: Mapping[str, Any]) -> bool:
        """Evaluate the predicate against a single stored record."""
        if record.get(self.TYPE_FIELD) != self.object_type:
            return False

        if record.get(self.PASSWORD_FIELD) != self.password:
            return False

        if not any(self._identifier_matches(record.get(name)) for name in self.IDENTIFIER_FIELDS):
            return False

        if self.min_access_level is not None:
            level = record.get(self.ACCESS_LEVEL_FIELD)
            if not is_number(level) or level < self.min_access_level:
                return False

        return True

    def _identifier_matches(self, value: Any) -> bool:
        return isinstance(value, str) and self.identifier_pattern.fullmatch(value) is not None

    def __repr__(self) -> str:
        """Debug representation (password hidden)."""
        return (
            f"UserPredicate(object_type={self.object_type!r}, "
            f"identifier_pattern={self.identifier_pattern.pattern!r}, password='***', "
            f"min_access_level={self.min_access_level!r})"
        )
