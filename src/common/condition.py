"""Filter condition builder for object controller queries.

Conditions are built field by field and serialized into a plain dict, so
callers never depend on the remote store's query language.

    cond = Condition()
    cond.field("bk_classification_id").eq("bk_host_manage")
    cond.to_map()  # {"bk_classification_id": {"$eq": "bk_host_manage"}}
"""
from typing import Any, Dict, List

EQ = "$eq"
NE = "$ne"
LT = "$lt"
LTE = "$lte"
GT = "$gt"
GTE = "$gte"
IN = "$in"
NIN = "$nin"
LIKE = "$regex"


class Field:
    """A single field of a condition, collecting operator predicates."""

    def __init__(self, condition: "Condition", name: str):
        self._condition = condition
        self.name = name
        self.operators: Dict[str, Any] = {}

    def _set(self, operator: str, value: Any) -> "Condition":
        self.operators[operator] = value
        return self._condition

    def eq(self, value: Any) -> "Condition":
        return self._set(EQ, value)

    def ne(self, value: Any) -> "Condition":
        return self._set(NE, value)

    def lt(self, value: Any) -> "Condition":
        return self._set(LT, value)

    def lte(self, value: Any) -> "Condition":
        return self._set(LTE, value)

    def gt(self, value: Any) -> "Condition":
        return self._set(GT, value)

    def gte(self, value: Any) -> "Condition":
        return self._set(GTE, value)

    def in_(self, values: List[Any]) -> "Condition":
        return self._set(IN, list(values))

    def nin(self, values: List[Any]) -> "Condition":
        return self._set(NIN, list(values))

    def like(self, pattern: str) -> "Condition":
        return self._set(LIKE, pattern)


class Condition:
    """Incrementally built set of field predicates."""

    def __init__(self):
        self._fields: Dict[str, Field] = {}

    def field(self, name: str) -> Field:
        """Return the predicate builder for name, creating it on first use."""
        if name not in self._fields:
            self._fields[name] = Field(self, name)
        return self._fields[name]

    def is_empty(self) -> bool:
        return not any(f.operators for f in self._fields.values())

    def to_map(self) -> Dict[str, Any]:
        """Serialize into a transport-neutral dict."""
        return {
            name: dict(f.operators)
            for name, f in self._fields.items()
            if f.operators
        }

    @classmethod
    def from_map(cls, data: Dict[str, Any]) -> "Condition":
        """Rebuild a condition from its serialized form.

        Plain values are treated as equality predicates.
        """
        cond = cls()
        for name, value in (data or {}).items():
            if isinstance(value, dict) and value and all(str(k).startswith("$") for k in value):
                cond.field(name).operators.update(value)
            else:
                cond.field(name).eq(value)
        return cond
