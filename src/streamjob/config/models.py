from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Option models map caller-supplied mappings to typed structures and reject unknown keys.


class LogSettings(BaseModel):
    # Lifecycle log sink selection: adapter name plus its factory settings.
    model_config = ConfigDict(extra="forbid")
    name: str = "log_stderr"
    settings: dict[str, Any] = Field(default_factory=dict)


class RelayOptions(BaseModel):
    # Relay start options; mailbox_size 0 means an unbounded mailbox.
    model_config = ConfigDict(extra="forbid")
    name: str = "relay"
    mailbox_size: int = Field(default=0, ge=0)
    log: LogSettings | None = None
