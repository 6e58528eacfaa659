# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from enum import StrEnum


class EventKind(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"

    @classmethod
    def from_str(cls, raw: str) -> EventKind:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown event kind '{raw}'") from exc


class UseRepoCommand(StrEnum):
    ADD = "use_repo_add"
    REMOVE = "use_repo_remove"


class FailOnPolicy(StrEnum):
    NEVER = "never"
    INVALID = "invalid"
    FINDINGS = "findings"

    @classmethod
    def from_str(cls, raw: str) -> FailOnPolicy:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown fail-on policy '{raw}'") from exc


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    CLI = "cli"
    CONFIG = "config"
    EVENTS = "events"
    METADATA = "metadata"
    REPORT = "report"
    SERVICES = "services"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log component '{raw}'") from exc


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> OutputFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown output format '{raw}'") from exc


__all__ = [
    "EventKind",
    "FailOnPolicy",
    "LogComponent",
    "LogFormat",
    "OutputFormat",
    "UseRepoCommand",
]
