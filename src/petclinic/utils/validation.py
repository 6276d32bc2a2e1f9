"""
Validation utilities for clinic forms.

Validators never raise for bad input. They return a ``ValidationResult``
holding the checked value together with a list of ``FieldError`` entries,
which the web layer renders next to the offending form fields.

Error codes:
    required      a mandatory field is empty
    typeMismatch  a value could not be converted (e.g. an unparseable date)
    duplicate     a new pet reuses a name already taken by the owner
    digits        the telephone number is not up to ten digits
    size          a value is longer than its column allows
"""

import re
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..models import Owner

# Type variable for generic validation results
T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

REQUIRED = "required"
TYPE_MISMATCH = "typeMismatch"
DUPLICATE = "duplicate"
DIGITS = "digits"
SIZE = "size"

TELEPHONE_PATTERN = re.compile(r"[0-9]{1,10}")


class FieldError:
    """A single field-level validation failure."""

    def __init__(self, field: str, code: str, message: str):
        self.field = field
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"FieldError(field={self.field!r}, code={self.code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.field, self.code, self.message) == (
            other.field,
            other.code,
            other.message,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary format."""
        return {"field": self.field, "code": self.code, "message": self.message}


class ValidationResult(Generic[T]):
    """Result of a validation operation."""

    def __init__(
        self, value: Optional[T] = None, errors: Optional[List[FieldError]] = None
    ):
        self.value = value
        self.errors = errors or []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field: str, code: str, message: str) -> None:
        """Add an error to the result."""
        self.errors.append(FieldError(field, code, message))

    def extend(self, other: "ValidationResult[Any]") -> None:
        """Merge the errors of another result into this one."""
        self.errors.extend(other.errors)

    def errors_for(self, field: str) -> List[FieldError]:
        """Errors reported against one field, in the order they were added."""
        return [error for error in self.errors if error.field == field]

    def has_error(self, field: str, code: Optional[str] = None) -> bool:
        """True if ``field`` has an error, optionally with the given code."""
        return any(
            code is None or error.code == code for error in self.errors_for(field)
        )

    def as_dict(self) -> Dict[str, List[str]]:
        """Messages grouped by field, as consumed by the templates."""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


def bind_form(schema_cls: Type[M], data: Mapping[str, Any]) -> ValidationResult[M]:
    """
    Bind submitted form data to a pydantic form schema.

    Values that cannot be converted are reported and dropped, so the returned
    form always holds every field that did convert. A missing value is
    ``required``, an over-long one ``size`` and anything else
    ``typeMismatch``.

    Args:
        schema_cls: Form schema to bind to
        data: Raw submitted values

    Returns:
        ValidationResult whose value is the (possibly partial) form
    """
    result: ValidationResult[M] = ValidationResult()
    fields = schema_cls.model_fields
    values = {key: value for key, value in data.items() if key in fields}

    try:
        result.value = schema_cls.model_validate(values)
        return result
    except PydanticValidationError as e:
        failed = set()
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            failed.add(field)
            if error["type"] == "missing":
                result.add_error(field, REQUIRED, "required")
            elif error["type"] == "string_too_long":
                max_length = error.get("ctx", {}).get("max_length")
                result.add_error(
                    field, SIZE, f"size must be between 0 and {max_length}"
                )
            else:
                result.add_error(field, TYPE_MISMATCH, error["msg"])

    result.value = schema_cls.model_validate(
        {key: value for key, value in values.items() if key not in failed}
    )
    return result


def validate_required(
    result: ValidationResult[Any],
    field: str,
    value: Any,
    message: str = "must not be empty",
) -> bool:
    """
    Record a ``required`` error when ``value`` is None or blank.

    A field that already has an error (typically because it failed to bind
    and was dropped) is not reported a second time.

    Returns:
        True if the value is present
    """
    if result.has_error(field):
        return False
    if value is None or (isinstance(value, str) and not value.strip()):
        result.add_error(field, REQUIRED, message)
        return False
    return True


def validate_telephone(result: ValidationResult[Any], telephone: str) -> bool:
    """
    Check that a telephone number is one to ten digits.

    Returns:
        True if the number is acceptable
    """
    if not validate_required(result, "telephone", telephone):
        return False
    if not TELEPHONE_PATTERN.fullmatch(telephone):
        result.add_error(
            "telephone",
            DIGITS,
            "numeric value out of bounds (<10 digits>.<0 digits> expected)",
        )
        return False
    return True


def validate_owner(
    form: Any, result: Optional[ValidationResult[Any]] = None
) -> ValidationResult[Any]:
    """
    Validate an owner form.

    First name, last name, address and city are required; the telephone
    must be present and numeric with at most ten digits.

    Args:
        form: Bound owner form
        result: Result to add to, usually the one returned by ``bind_form``
    """
    result = result if result is not None else ValidationResult(form)
    validate_required(result, "first_name", form.first_name)
    validate_required(result, "last_name", form.last_name)
    validate_required(result, "address", form.address)
    validate_required(result, "city", form.city)
    validate_telephone(result, form.telephone)
    return result


def validate_pet(
    form: Any, is_new: bool, result: Optional[ValidationResult[Any]] = None
) -> ValidationResult[Any]:
    """
    Validate a pet form.

    The name and birth date are always required; the type only when the
    pet is being created.

    Args:
        form: Bound pet form
        is_new: Whether the pet has not been persisted yet
        result: Result to add to, usually the one returned by ``bind_form``
    """
    result = result if result is not None else ValidationResult(form)
    validate_required(result, "name", form.name, "required")
    if is_new:
        validate_required(result, "type", form.type, "required")
    validate_required(result, "birth_date", form.birth_date, "required")
    return result


def validate_visit(
    form: Any, result: Optional[ValidationResult[Any]] = None
) -> ValidationResult[Any]:
    """Validate a visit form: the description is required."""
    result = result if result is not None else ValidationResult(form)
    validate_required(result, "description", form.description)
    return result


def check_duplicate_pet_name(
    result: ValidationResult[Any], owner: Owner, name: Optional[str], is_new: bool
) -> bool:
    """
    Reject a new pet whose name the owner already uses.

    The comparison ignores case and only considers the owner's persisted
    pets. Existing pets keep their own name without complaint.

    Returns:
        True if the name is acceptable
    """
    if name and is_new and owner.get_pet(name, ignore_new=True) is not None:
        result.add_error("name", DUPLICATE, "already exists")
        return False
    return True
