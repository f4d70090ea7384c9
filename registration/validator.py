import math
from typing import Dict, Literal, Optional

from email_validator import EmailNotValidError
from pydantic import BaseModel, Field

from registration.catalog import CourseCatalog
from registration.state import FIELDS, DraftRecord, RegistrationRecord, SubmissionState, check_address
from registration.errors import UnknownFieldError


NAME_MIN = 2
NAME_MAX = 50
AGE_MIN = 16
AGE_MAX = 99


class ValidationResult(BaseModel):
    record: Optional[RegistrationRecord] = None
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.record is not None


class RegistrationValidator:
    def __init__(self, catalog: Optional[CourseCatalog] = None):
        self.catalog = catalog or CourseCatalog()

    def check_name(self, value) -> Optional[str]:
        if not isinstance(value, str):
            return "Name must be text."
        if len(value) < NAME_MIN:
            return "Name must be at least 2 characters."
        if len(value) > NAME_MAX:
            return "Name must be less than 50 characters."
        return None

    def check_email(self, value) -> Optional[str]:
        if not isinstance(value, str):
            return "Please enter a valid email address."
        try:
            check_address(value)
        except EmailNotValidError:
            return "Please enter a valid email address."
        return None

    def check_age(self, value) -> Optional[str]:
        # bool is an int subclass but never a valid age
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return "Age must be a number."
        if isinstance(value, float):
            if math.isnan(value):
                return "Age must be a number."
            if not value.is_integer():
                return "Age must be a whole number."
        if value < AGE_MIN:
            return "You must be at least 16 years old."
        if value > AGE_MAX:
            return "Age must be less than 100."
        return None

    def check_course(self, value) -> Optional[str]:
        if value is None or value == "":
            return "Please select a course."
        if not isinstance(value, str) or value not in self.catalog:
            return "Please select a valid course."
        return None

    def validate_field(self, draft: DraftRecord, name: str) -> Optional[str]:
        if name not in FIELDS:
            raise UnknownFieldError(name)
        check = getattr(self, f"check_{name}")
        return check(getattr(draft, name))

    def validate(self, draft: DraftRecord) -> ValidationResult:
        errors: Dict[str, str] = {}

        for field in FIELDS:
            message = self.validate_field(draft, field)
            if message is not None:
                errors[field] = message

        if errors:
            return ValidationResult(errors=errors)

        record = RegistrationRecord.model_validate(
            {
                "name": draft.name,
                "email": draft.email,
                "age": int(draft.age),
                "course": draft.course,
            },
            context={"courses": self.catalog.ids()},
        )
        return ValidationResult(record=record)

    def validate_state(self, state: SubmissionState) -> SubmissionState:
        result = self.validate(state.draft())
        return state.model_copy(
            update={"validation_errors": result.errors, "record": result.record}
        )

    @staticmethod
    def should_submit(state: SubmissionState) -> Literal["reject", "accept"]:
        return "accept" if state.record is not None and not state.validation_errors else "reject"
