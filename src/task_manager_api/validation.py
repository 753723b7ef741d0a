"""Request body validation and identifier checks for task routes.

Validation is a pure function over the submitted body: each field carries an
ordered list of rules, every rule returns a message when it fails, and only
the first failing rule of a field is reported. Violations come back in field
declaration order.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence
from uuid import UUID

from .models.task import TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH

Rule = Callable[[Any], Optional[str]]

MISSING = object()

TITLE_REQUIRED = "El título es obligatorio"
TITLE_TOO_LONG = f"El título no puede tener más de {TITLE_MAX_LENGTH} caracteres"
TITLE_NOT_STRING = "El título debe ser una cadena de texto"
DESCRIPTION_TOO_LONG = f"La descripción no puede tener más de {DESCRIPTION_MAX_LENGTH} caracteres"
DESCRIPTION_NOT_STRING = "La descripción debe ser una cadena de texto"
COMPLETED_NOT_BOOLEAN = "El estado debe ser un booleano"
BODY_NOT_OBJECT = "El cuerpo de la solicitud debe ser un objeto JSON"


@dataclass(frozen=True)
class Violation:
    """A single failed rule for one field of the request body."""
    field: str
    msg: str
    value: Any = MISSING
    location: str = "body"

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": "field", "msg": self.msg, "path": self.field, "location": self.location}
        if self.value is not MISSING:
            data["value"] = self.value
        return data


@dataclass(frozen=True)
class FieldRules:
    """Ordered rules for one field.

    ``optional`` controls when the rules are skipped entirely:
    ``None`` never skips, ``"absent"`` skips missing or null values and
    ``"falsy"`` also skips empty strings, zero and False.
    """
    field: str
    rules: Sequence[Rule]
    optional: Optional[str] = None

    def skips(self, value: Any) -> bool:
        if self.optional is None:
            return False
        if value is MISSING or value is None:
            return True
        return self.optional == "falsy" and not value


def required(message: str) -> Rule:
    def check(value):
        if value is MISSING or value is None:
            return message
        if isinstance(value, str) and not value.strip():
            return message
        return None
    return check


def is_string(message: str) -> Rule:
    def check(value):
        return None if isinstance(value, str) else message
    return check


def max_length(limit: int, message: str) -> Rule:
    def check(value):
        if isinstance(value, str) and len(value) > limit:
            return message
        return None
    return check


BOOLEAN_STRINGS = {"true": True, "false": False}


def is_boolean(message: str) -> Rule:
    """Accept JSON booleans and the literal strings "true" and "false"."""
    def check(value):
        if isinstance(value, bool) or (isinstance(value, str) and value in BOOLEAN_STRINGS):
            return None
        return message
    return check


def as_boolean(value: Any) -> Any:
    """Convert "true"/"false" to bool; any other value is returned unchanged."""
    if isinstance(value, str):
        return BOOLEAN_STRINGS.get(value, value)
    return value


CREATE_TASK_RULES = (
    FieldRules("title", (
        required(TITLE_REQUIRED),
        is_string(TITLE_NOT_STRING),
        max_length(TITLE_MAX_LENGTH, TITLE_TOO_LONG),
    )),
    FieldRules("description", (
        is_string(DESCRIPTION_NOT_STRING),
        max_length(DESCRIPTION_MAX_LENGTH, DESCRIPTION_TOO_LONG),
    ), optional="falsy"),
)

UPDATE_TASK_RULES = (
    FieldRules("title", (
        is_string(TITLE_NOT_STRING),
        required(TITLE_REQUIRED),
        max_length(TITLE_MAX_LENGTH, TITLE_TOO_LONG),
    ), optional="absent"),
    FieldRules("description", (
        is_string(DESCRIPTION_NOT_STRING),
        max_length(DESCRIPTION_MAX_LENGTH, DESCRIPTION_TOO_LONG),
    ), optional="absent"),
    FieldRules("completed", (
        is_boolean(COMPLETED_NOT_BOOLEAN),
    ), optional="absent"),
)


def validate(body: Mapping[str, Any], field_rules: Sequence[FieldRules]) -> List[Violation]:
    """Evaluate field rules against a request body.

    Args:
        body: Submitted field names mapped to their values
        field_rules: Rules per field, in the order violations should be reported

    Returns:
        List of violations, empty when the body passes every rule
    """
    violations = []
    for spec in field_rules:
        value = body.get(spec.field, MISSING)
        if spec.skips(value):
            continue
        for rule in spec.rules:
            message = rule(value)
            if message is not None:
                violations.append(Violation(field=spec.field, msg=message, value=value))
                break
    return violations


def parse_task_id(value: str) -> Optional[UUID]:
    """Parse a path parameter as a task identifier.

    Returns the UUID when the string has the identifier syntax, None otherwise.
    The store is never consulted.
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None
