import pytest

from config.form import FormConfig
from helpers import RecordingNotifier


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def fast_config() -> FormConfig:
    return FormConfig(submit_delay=0, reset_delay=0.02)
