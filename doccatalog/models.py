# doccatalog/models.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    ValidationInfo,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from .config import get_settings
from .errors import ValidationError


class DocumentStatus(str, Enum):
    AVAILABLE = "available"
    BORROWED = "borrowed"


class _Identified(BaseModel):
    """Frozen model with a generated identity.

    The identity lives in a private attribute, so it is never a constructor
    argument: every instance gets a fresh one, and two instances built from
    identical fields are still different objects to the catalog and ledger.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    _id: str = PrivateAttr(default_factory=lambda: uuid4().hex)

    @property
    def id(self) -> str:
        return self._id


class _DocumentBase(_Identified):
    """Fields shared by every kind of catalog document.

    Documents are frozen: the factory is the only place they are created
    and nothing mutates them afterwards.
    """

    title: str
    author: str
    year: int
    category: str = ""

    @field_validator("title", "author")
    @classmethod
    def _require_text(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return value

    def late_fee(self, days_late: int) -> float:
        """Fee owed for returning this document ``days_late`` days late."""
        if days_late < 0:
            raise ValidationError(f"days_late must be >= 0, got {days_late}")
        return days_late * get_settings().LATE_FEE_PER_DAY


class Book(_DocumentBase):
    kind: Literal["book"] = "book"
    isbn: Optional[str] = None


class Periodical(_DocumentBase):
    kind: Literal["periodical"] = "periodical"
    issue: Optional[int] = Field(default=None, ge=1)


Document = Annotated[Union[Book, Periodical], Field(discriminator="kind")]


class _UserBase(_Identified):
    name: str

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value


class Student(_UserBase):
    kind: Literal["student"] = "student"


class Staff(_UserBase):
    kind: Literal["staff"] = "staff"


User = Annotated[Union[Student, Staff], Field(discriminator="kind")]

_document_adapter: TypeAdapter = TypeAdapter(Document)
_user_adapter: TypeAdapter = TypeAdapter(User)


def _format_errors(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def build(
    title: str,
    author: str,
    year: int,
    category: str = "",
    kind: str = "book",
    **kind_fields: Any,
) -> Document:
    """Validate the given fields and return a new frozen document.

    ``kind`` selects the document variant ("book" or "periodical") and
    ``kind_fields`` carries its specific fields, e.g. ``isbn="123"``.
    Raises ``ValidationError`` when ``title`` or ``author`` is empty, the
    kind is unknown or any field fails validation.
    """
    payload = {
        "kind": kind,
        "title": title,
        "author": author,
        "year": year,
        "category": category,
        **kind_fields,
    }
    try:
        return _document_adapter.validate_python(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_format_errors(exc)) from exc


def build_user(name: str, kind: str = "student") -> User:
    """Return a new frozen user of the given kind ("student" or "staff")."""
    try:
        return _user_adapter.validate_python({"kind": kind, "name": name})
    except PydanticValidationError as exc:
        raise ValidationError(_format_errors(exc)) from exc
