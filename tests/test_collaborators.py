import asyncio
import logging

import pytest

from registration.backend import make_simulated_submit
from registration.catalog import Course, CourseCatalog
from registration.notify import LoggingNotifier
from registration.state import RegistrationRecord


def test_default_catalog_order_and_labels():
    courses = CourseCatalog().list_courses()

    assert [(c.id, c.label) for c in courses] == [
        ("math", "Mathematics"),
        ("science", "Science"),
        ("history", "History"),
        ("literature", "Literature"),
    ]


def test_catalog_membership():
    catalog = CourseCatalog([Course(id="art", label="Art")])

    assert "art" in catalog
    assert "math" not in catalog
    assert catalog.ids() == {"art"}


def test_logging_notifier_logs(caplog):
    with caplog.at_level(logging.INFO, logger="registration.notify"):
        LoggingNotifier().notify("Registration Successful", "done")

    assert "Registration Successful: done" in caplog.text


@pytest.mark.asyncio
async def test_simulated_submit_waits_then_logs(caplog):
    record = RegistrationRecord.model_validate(
        {"name": "Al", "email": "al@x.com", "age": 16, "course": "math"},
        context={"courses": {"math"}},
    )
    submit = make_simulated_submit(0.01)

    loop = asyncio.get_running_loop()
    started = loop.time()
    with caplog.at_level(logging.INFO, logger="registration.backend"):
        await submit(record)

    assert loop.time() - started >= 0.005
    assert "submitted registration" in caplog.text
