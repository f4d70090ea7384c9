class RegistrationError(Exception):
    """Base class for errors raised by the registration form."""


class SubmissionError(RegistrationError):
    """The submit function could not deliver the registration."""


class UnknownFieldError(RegistrationError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown form field: {self.name!r}"


class ControllerDestroyedError(RegistrationError):
    pass
