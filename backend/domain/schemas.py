"""
Validation schemas shared by the form controllers and the mutation actions.

Both sides validate with the same classes, so a value the client accepts is
never rejected by the server for its shape.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

FieldErrors = Dict[str, List[str]]

REQUIRED_MESSAGE = "required"


class _FormParams(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class InsertAuthorParams(_FormParams):
    name: str = Field(max_length=255)


class UpdateAuthorParams(InsertAuthorParams):
    id: str


class InsertBookParams(_FormParams):
    title: str = Field(max_length=255)
    completed: bool = False
    author_id: str


class UpdateBookParams(InsertBookParams):
    id: str


class InsertReviewParams(_FormParams):
    content: str
    book_id: str


class UpdateReviewParams(InsertReviewParams):
    id: str


class InsertQuoteParams(_FormParams):
    content: str
    page: Optional[int] = Field(default=None, ge=1)
    book_id: str


class UpdateQuoteParams(InsertQuoteParams):
    id: str


class InsertReflectionParams(_FormParams):
    content: str
    book_id: str


class UpdateReflectionParams(InsertReflectionParams):
    id: str


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def clean_payload(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop blank form values so required fields report as missing."""
    return {key: value for key, value in payload.items() if not _is_blank(value)}


def flatten_errors(exc: ValidationError) -> FieldErrors:
    """Map a pydantic error into field name -> ordered list of messages."""
    errors: FieldErrors = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        name = str(loc[0])
        message = REQUIRED_MESSAGE if err.get("type") == "missing" else err.get("msg", "invalid")
        errors.setdefault(name, []).append(message)
    return errors


def validate_params(
    schema: Type[BaseModel], payload: Mapping[str, Any], partial: bool = False
) -> Tuple[Optional[Dict[str, Any]], FieldErrors]:
    """
    Validate a flat form payload.

    Returns (values, {}) on success and (None, field_errors) on failure. With
    `partial` only the fields present in the payload are returned, so an update
    never resets an omitted field to its schema default.
    """
    try:
        parsed = schema.model_validate(clean_payload(payload))
    except ValidationError as exc:
        return None, flatten_errors(exc)
    return parsed.model_dump(exclude_unset=partial), {}


def validate_field(schema: Type[BaseModel], name: str, value: Any) -> List[str]:
    """Validate one field in isolation; errors on other fields are ignored."""
    _, errors = validate_params(schema, {name: value})
    return errors.get(name, [])


def summarize_errors(errors: FieldErrors) -> str:
    return "; ".join(f"{name}: {', '.join(messages)}" for name, messages in errors.items())
