from registration.graph import SubmissionGraphFactory
from registration.state import RegistrationRecord, SubmissionState
from registration.validator import RegistrationValidator

from helpers import INVALID_DRAFT, VALID_DRAFT


def build_graph():
    return SubmissionGraphFactory(RegistrationValidator()).compile()


def test_valid_draft_reaches_accept():
    out = build_graph().invoke(dict(VALID_DRAFT))

    assert out.get("validation_errors", {}) == {}
    record = RegistrationRecord.model_validate(out["record"], context={"courses": {"math"}})
    assert record.course == "math"


def test_invalid_draft_is_rejected_with_errors():
    out = build_graph().invoke(dict(INVALID_DRAFT))

    assert set(out["validation_errors"]) == {"name", "email", "age", "course"}
    assert out.get("record") is None


def test_should_submit_routes_on_record():
    validator = RegistrationValidator()

    rejected = validator.validate_state(SubmissionState(**INVALID_DRAFT))
    accepted = validator.validate_state(SubmissionState(**VALID_DRAFT))

    assert validator.should_submit(rejected) == "reject"
    assert validator.should_submit(accepted) == "accept"


def test_graph_has_expected_nodes():
    g = SubmissionGraphFactory(RegistrationValidator()).build()

    assert {"validate", "accept", "reject"} <= set(g.nodes)
