import asyncio
import logging
from typing import Any, List, Optional

from config.form import FormConfig
from registration.backend import SubmitFunction, make_simulated_submit
from registration.catalog import Course, CourseCatalog
from registration.errors import ControllerDestroyedError, SubmissionError, UnknownFieldError
from registration.graph import SubmissionGraphFactory
from registration.notify import SUCCESS_DESCRIPTION, SUCCESS_TITLE, LoggingNotifier, Notifier
from registration.state import FIELDS, DraftRecord, FormState, FormStatus, Phase, RegistrationRecord
from registration.validator import RegistrationValidator


logger = logging.getLogger(__name__)

GENERIC_SUBMISSION_ERROR = "Registration could not be submitted. Please try again."


class FormController:
    """Owns the registration form's values and submission lifecycle.

    idle -> submitting -> submitted -> (reset timer) -> idle. An invalid
    submit stays in idle with the field errors refreshed, and a failed
    submit function drops back to idle with ``submission_error`` set.
    """

    def __init__(
        self,
        submit_fn: Optional[SubmitFunction] = None,
        notifier: Optional[Notifier] = None,
        catalog: Optional[CourseCatalog] = None,
        config: Optional[FormConfig] = None,
    ):
        self.config = config or FormConfig()
        self.catalog = catalog or CourseCatalog()
        self.validator = RegistrationValidator(self.catalog)
        self.notifier = notifier or LoggingNotifier()

        self._submit_fn = submit_fn or make_simulated_submit(self.config.submit_delay)
        self._graph = SubmissionGraphFactory(self.validator).compile()
        self._state = FormState()
        self._reset_handle: Optional[asyncio.TimerHandle] = None
        self._destroyed = False

    @property
    def state(self) -> FormState:
        return self._state.model_copy(deep=True)

    @property
    def status(self) -> FormStatus:
        return self._state.status

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def reset_pending(self) -> bool:
        return self._reset_handle is not None

    @property
    def courses(self) -> List[Course]:
        return self.catalog.list_courses()

    def set_field(self, name: str, value: Any) -> None:
        self._ensure_alive()
        if name not in FIELDS:
            raise UnknownFieldError(name)
        self._state.values = self._state.values.model_copy(update={name: value})

    def blur(self, name: str) -> Optional[str]:
        """Mark a field touched and revalidate just that field."""
        self._ensure_alive()
        message = self.validator.validate_field(self._state.values, name)
        self._state.touched.add(name)
        if message is None:
            self._state.errors.pop(name, None)
        else:
            self._state.errors[name] = message
        return message

    async def submit(self) -> bool:
        """Validate and hand the record to the submit function.

        Returns True once the registration went through. Calls made while a
        submission is in flight or being shown as submitted do nothing.
        """
        if self._destroyed or self._state.phase is not Phase.IDLE:
            logger.debug("submit ignored in phase %s", self._state.phase.value)
            return False

        out = self._graph.invoke(self._state.values.model_dump())
        errors = dict(out.get("validation_errors") or {})
        self._state.submission_error = None

        if errors:
            logger.debug("registration rejected: %s", sorted(errors))
            self._state.errors = errors
            return False

        record = RegistrationRecord.model_validate(out["record"], context={"courses": self.catalog.ids()})
        self._state.errors = {}
        self._state.phase = Phase.SUBMITTING
        logger.info("submitting registration for course %s", record.course)

        try:
            await self._call_submit(record)
        except SubmissionError as exc:
            if self._destroyed:
                return False
            logger.warning("registration submit failed: %s", exc)
            self._state.phase = Phase.IDLE
            self._state.submission_error = str(exc) or GENERIC_SUBMISSION_ERROR
            return False
        except asyncio.CancelledError:
            if not self._destroyed:
                self._state.phase = Phase.IDLE
            raise
        except Exception:
            logger.exception("submit function raised unexpectedly")
            if not self._destroyed:
                self._state.phase = Phase.IDLE
                self._state.submission_error = GENERIC_SUBMISSION_ERROR
            raise

        if self._destroyed:
            logger.debug("controller destroyed during submit; result dropped")
            return False

        self._state.phase = Phase.SUBMITTED
        self._schedule_reset()
        self.notifier.notify(SUCCESS_TITLE, SUCCESS_DESCRIPTION)
        return True

    def reset(self) -> None:
        """Restore default values. Leaves an in-flight submission alone."""
        self._ensure_alive()
        self._cancel_reset()
        self._clear()

    def destroy(self) -> None:
        self._cancel_reset()
        self._destroyed = True

    async def _call_submit(self, record: RegistrationRecord) -> None:
        timeout = self.config.submit_timeout
        if timeout is None:
            await self._submit_fn(record)
            return
        try:
            await asyncio.wait_for(self._submit_fn(record), timeout)
        except asyncio.TimeoutError as exc:
            raise SubmissionError("Registration timed out. Please try again.") from exc

    def _schedule_reset(self) -> None:
        self._cancel_reset()
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.config.reset_delay, self._on_reset_timer)

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _on_reset_timer(self) -> None:
        self._reset_handle = None
        if self._destroyed:
            return
        logger.debug("success shown; resetting form")
        self._clear()

    def _clear(self) -> None:
        self._state.values = DraftRecord()
        self._state.errors = {}
        self._state.touched = set()
        self._state.submission_error = None
        if self._state.phase is Phase.SUBMITTED:
            self._state.phase = Phase.IDLE

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise ControllerDestroyedError("form controller has been destroyed")
