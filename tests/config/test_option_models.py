from __future__ import annotations

import pytest
from pydantic import ValidationError

from streamjob.config.models import LogSettings, RelayOptions


def test_relay_options_defaults() -> None:
    options = RelayOptions()
    assert options.name == "relay"
    assert options.mailbox_size == 0
    assert options.log is None


def test_relay_options_nested_log_settings() -> None:
    options = RelayOptions.model_validate({"log": {"name": "log_jsonl", "settings": {"path": "/tmp/x"}}})
    assert options.log == LogSettings(name="log_jsonl", settings={"path": "/tmp/x"})


@pytest.mark.parametrize("raw", [{"mailbox_size": -1}, {"unexpected": True}, {"log": {"level": "debug"}}])
def test_relay_options_reject_invalid_values(raw: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        RelayOptions.model_validate(raw)
