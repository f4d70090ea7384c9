from enum import Enum
from typing import Any, Dict, Optional, Set

from email_validator import validate_email
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator


FIELDS = ("name", "email", "age", "course")


class Phase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    ERROR = "error"


def check_address(value: str) -> str:
    """Return the normalized address; display-name forms are rejected."""
    return validate_email(value, check_deliverability=False).normalized


class RegistrationRecord(BaseModel):
    """A registration that passed every field check.

    Course membership depends on the catalog, so the allowed ids must be
    supplied as ``context={"courses": ...}`` when building one.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=2, max_length=50, description="Student's full name")
    email: EmailStr = Field(..., description="Contact email")
    age: int = Field(..., ge=16, le=99, description="Age in whole years")
    course: str = Field(..., min_length=1, description="Course code from the catalog")

    @field_validator("email", mode="before")
    @classmethod
    def bare_address(cls, value: Any) -> Any:
        if isinstance(value, str):
            check_address(value)
        return value

    @field_validator("course")
    @classmethod
    def course_in_catalog(cls, value: str, info: ValidationInfo) -> str:
        courses = (info.context or {}).get("courses")
        if courses is None:
            raise ValueError("course catalog required to build a registration")
        if value not in courses:
            raise ValueError(f"unknown course {value!r}")
        return value


class DraftRecord(BaseModel):
    # Whatever the rendering layer handed over; may be empty or wrong-typed.
    name: Any = Field(default="", description="User's full name")
    email: Any = Field(default="", description="User email")
    age: Any = Field(default=0, description="Age, numeric once coerced by the input widget")
    course: Any = Field(default="", description="Selected course code")


class FormState(BaseModel):
    values: DraftRecord = Field(default_factory=DraftRecord)
    errors: Dict[str, str] = Field(default_factory=dict)
    phase: Phase = Phase.IDLE
    touched: Set[str] = Field(default_factory=set)
    submission_error: Optional[str] = None

    @property
    def status(self) -> FormStatus:
        if self.phase is Phase.SUBMITTING:
            return FormStatus.SUBMITTING
        if self.phase is Phase.SUBMITTED:
            return FormStatus.SUBMITTED
        if self.errors or self.submission_error:
            return FormStatus.ERROR
        return FormStatus.IDLE


class SubmissionState(BaseModel):
    """Graph state for one submit attempt."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: Any = None
    email: Any = None
    age: Any = None
    course: Any = None

    validation_errors: Dict[str, str] = Field(default_factory=dict)
    record: Optional[RegistrationRecord] = None

    def draft(self) -> DraftRecord:
        return DraftRecord(name=self.name, email=self.email, age=self.age, course=self.course)
