import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, ClassVar, Dict, Generic, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_NUMBER_ERRORS = {"float_parsing", "float_type", "finite_number"}
_INTEGER_ERRORS = {"int_parsing", "int_type", "int_from_float", "int_parsing_size"}


class FormSchema(BaseModel):
    """Base for schemas decoded from submitted form fields.

    Field names are snake_case in Python and camelCase on the wire.
    ``field_labels`` names a field in generated messages and
    ``field_messages`` replaces every non-missing error for a field.
    """

    field_labels: ClassVar[Dict[str, str]] = {}
    field_messages: ClassVar[Dict[str, str]] = {}

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
        extra="ignore",
    )

    @classmethod
    def label_for(cls, path: str) -> str:
        if path in cls.field_labels:
            return cls.field_labels[path]
        words = re.sub(r"(?<!^)(?=[A-Z])", " ", path).lower()
        return words[:1].upper() + words[1:]


class ResponseSchema(BaseModel):
    """Base for records handed back to views and API callers."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


SchemaType = TypeVar("SchemaType", bound=FormSchema)


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class Decoded(Generic[SchemaType]):
    record: SchemaType
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Rejected:
    errors: List[FieldError]
    ok: bool = field(default=False, init=False)


DecodeResult = Union[Decoded[SchemaType], Rejected]


def clean_form(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Drops blank values so that an empty input counts as a missing one."""
    cleaned: Dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        elif value is None:
            continue
        cleaned[key] = value
    return cleaned


def decode_form(schema: Type[SchemaType], raw: Mapping[str, Any]) -> DecodeResult:
    """Decodes raw form fields into ``schema``.

    Never raises for invalid input: the result is either ``Decoded`` with the
    typed record or ``Rejected`` with ``(path, message)`` pairs in the order
    the schema reported them.
    """
    try:
        record = schema.model_validate(clean_form(raw))
    except ValidationError as exc:
        return Rejected(errors=field_errors(schema, exc))
    return Decoded(record=record)


def field_errors(schema: Type[FormSchema], exc: ValidationError) -> List[FieldError]:
    errors: List[FieldError] = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "form"
        errors.append(FieldError(path=path, message=_message_for(schema, path, error)))
    return errors


def _message_for(schema: Type[FormSchema], path: str, error: Dict[str, Any]) -> str:
    kind = error["type"]
    label = schema.label_for(path)
    if kind == "missing":
        return f"{label} is required"
    if path in schema.field_messages:
        return schema.field_messages[path]
    if kind == "value_error":
        return str(error.get("ctx", {}).get("error") or error["msg"])
    if kind in _NUMBER_ERRORS:
        return f"{label} must be a number"
    if kind in _INTEGER_ERRORS:
        return f"{label} must be a whole number"
    if kind == "bool_parsing":
        return f"{label} must be yes or no"
    if kind == "enum":
        return f"{label} must be one of {error['ctx']['expected']}"
    return error["msg"]


def parse_calendar_date(value: Any, *, strict: bool = False) -> date:
    """Parses a submitted date, accepting ISO timestamps unless ``strict``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if strict:
        if not ISO_DATE_PATTERN.match(text):
            raise ValueError("Date must be in YYYY-MM-DD format")
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise ValueError("Date is not a valid calendar date") from None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValueError("Invalid date format, expected YYYY-MM-DD") from None


def ensure_not_future(value: date, message: str) -> date:
    if value > date.today():
        raise ValueError(message)
    return value
