"""Validation of task input arriving from untyped sources (dashboard, forms).

Each field follows one policy from FIELD_POLICIES: REJECT fails the whole
input, COERCE substitutes a default or cleans the value. FIELD_RULES holds the
check and the coercion for each field.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from forge.core.models import Priority

T = TypeVar("T")

MAX_TITLE_LENGTH = 500


class Policy(str, Enum):
    REJECT = "reject"
    COERCE = "coerce"


FIELD_POLICIES: dict[str, Policy] = {
    "title": Policy.REJECT,
    "priority": Policy.COERCE,
    "tags": Policy.COERCE,
    "creator": Policy.COERCE,
    "description": Policy.COERCE,
}


@dataclass(frozen=True)
class Validation(Generic[T]):
    value: T | None = None
    error: str | None = None
    field_name: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def valid(cls, value: T) -> "Validation[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, field_name: str, error: str) -> "Validation[T]":
        return cls(error=error, field_name=field_name)


@dataclass(frozen=True)
class NewTask:
    title: str
    creator: str
    description: str | None = None
    priority: Priority = Priority.MEDIUM
    tags: list[str] = field(default_factory=list)


def split_tags(text: str) -> list[str]:
    return [t.strip() for t in text.split(",") if t.strip()]


def check_title(raw: Any) -> Validation[str]:
    if not isinstance(raw, str) or not raw.strip():
        return Validation.invalid("title", "Title is required")
    if len(raw) > MAX_TITLE_LENGTH:
        return Validation.invalid("title", f"Title too long (max {MAX_TITLE_LENGTH} chars)")
    return Validation.valid(raw.strip())


def check_priority(raw: Any) -> Validation[Priority]:
    if raw is None:
        return Validation.valid(Priority.MEDIUM)
    try:
        return Validation.valid(Priority(raw))
    except ValueError:
        return Validation.invalid("priority", f"Unknown priority: {raw}")


def check_tags(raw: Any) -> Validation[list[str]]:
    if raw is None:
        return Validation.valid([])
    if isinstance(raw, str):
        return Validation.valid(split_tags(raw))
    if isinstance(raw, list) and all(isinstance(t, str) for t in raw):
        return Validation.valid([t.strip() for t in raw if t.strip()])
    return Validation.invalid("tags", "Tags must be a string or a list of strings")


def _text_check(name: str) -> Callable[[Any], Validation[str | None]]:
    def check(raw: Any) -> Validation[str | None]:
        if raw is None or isinstance(raw, str):
            return Validation.valid(raw or None)
        return Validation.invalid(name, f"{name.capitalize()} must be a string")

    return check


def coerce_title(raw: Any) -> str:
    text = raw.strip() if isinstance(raw, str) else ""
    return text[:MAX_TITLE_LENGTH] or "Untitled"


def coerce_priority(raw: Any) -> Priority:
    try:
        return Priority(raw)
    except ValueError:
        return Priority.MEDIUM


def coerce_tags(raw: Any) -> list[str]:
    if isinstance(raw, str):
        return split_tags(raw)
    if isinstance(raw, list):
        return [t.strip() for t in raw if isinstance(t, str) and t.strip()]
    return []


def coerce_text(raw: Any) -> str | None:
    if isinstance(raw, str) and raw:
        return raw
    return None


@dataclass(frozen=True)
class FieldRule:
    check: Callable[[Any], Validation]
    coerce: Callable[[Any], Any]


FIELD_RULES: dict[str, FieldRule] = {
    "title": FieldRule(check_title, coerce_title),
    "priority": FieldRule(check_priority, coerce_priority),
    "tags": FieldRule(check_tags, coerce_tags),
    "creator": FieldRule(_text_check("creator"), coerce_text),
    "description": FieldRule(_text_check("description"), coerce_text),
}


def validate_new_task(payload: Any, *, default_creator: str) -> Validation[NewTask]:
    """Run every field through its rule under the policy FIELD_POLICIES assigns it.

    The first REJECT field that fails its check fails the whole payload.
    """
    if not isinstance(payload, dict):
        payload = {}

    values: dict[str, Any] = {}
    for name, policy in FIELD_POLICIES.items():
        rule = FIELD_RULES[name]
        raw = payload.get(name)
        checked = rule.check(raw)
        if checked.ok:
            values[name] = checked.value
        elif policy is Policy.REJECT:
            return Validation.invalid(checked.field_name, checked.error)
        else:
            values[name] = rule.coerce(raw)

    values["creator"] = values["creator"] or default_creator
    return Validation.valid(NewTask(**values))
