# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration models and validation for usewiz.

This module defines the pydantic model used to validate configuration files
and the dataclass used at runtime, together with the conversion between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from usewiz.core.model_types import FailOnPolicy
from usewiz.core.types import ModuleKey
from usewiz.exceptions import UsewizValidationError
from usewiz.metadata.fixup import DEFAULT_BUILDOZER, DEFAULT_MODULE_TARGET, FixupOptions

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0
FAIL_ON_ALLOWED_VALUES: Final[tuple[str, ...]] = tuple(policy.value for policy in FailOnPolicy)


class ConfigValidationError(UsewizValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigFieldChoiceError(ConfigValidationError):
    """Raised when a configuration field is provided with an unsupported value."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        self.field = field
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"{field} must be one of: {allowed_text}")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid usewiz configuration in {path}: {error}")


@dataclass(slots=True)
class Config:
    """Runtime configuration for usewiz.

    Attributes:
        root_module: Key of the module whose manifest fixes are suggested for.
        buildozer: Executable named in suggested commands.
        module_target: Buildozer target addressing the root module file.
        highlight: Colour the command header in fixup messages.
        fail_on: When ``usewiz check`` reports failure for findings.
        source: File the configuration was loaded from, if any.
    """

    root_module: ModuleKey = ModuleKey.ROOT
    buildozer: str = DEFAULT_BUILDOZER
    module_target: str = DEFAULT_MODULE_TARGET
    highlight: bool = True
    fail_on: FailOnPolicy = FailOnPolicy.NEVER
    source: Path | None = None

    def fixup_options(self) -> FixupOptions:
        return FixupOptions(
            buildozer=self.buildozer,
            module_target=self.module_target,
            highlight=self.highlight,
        )


class ConfigModel(BaseModel):
    """Pydantic model for validating the usewiz configuration from TOML."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    config_version: int = Field(default=CONFIG_VERSION)
    root_module: str = "<root>"
    buildozer: str = DEFAULT_BUILDOZER
    module_target: str = DEFAULT_MODULE_TARGET
    highlight: bool = True
    fail_on: FailOnPolicy = FailOnPolicy.NEVER

    @field_validator("fail_on", mode="before")
    @classmethod
    def _coerce_fail_on(cls, value: object) -> FailOnPolicy:
        if isinstance(value, FailOnPolicy):
            return value
        if not isinstance(value, str):
            raise ConfigFieldChoiceError("fail_on", FAIL_ON_ALLOWED_VALUES)
        try:
            return FailOnPolicy.from_str(value)
        except ValueError as exc:
            raise ConfigFieldChoiceError("fail_on", FAIL_ON_ALLOWED_VALUES) from exc

    @field_validator("root_module")
    @classmethod
    def _check_root_module(cls, value: str) -> str:
        _ = ModuleKey.from_str(value)
        return value

    @field_validator("buildozer", "module_target")
    @classmethod
    def _require_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            msg = "must not be empty"
            raise ValueError(msg)
        return stripped

    @model_validator(mode="after")
    def _check_version(self) -> ConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


def config_from_model(model: ConfigModel, *, source: Path | None = None) -> Config:
    """Convert a validated ``ConfigModel`` into the runtime ``Config``."""
    return Config(
        root_module=ModuleKey.from_str(model.root_module),
        buildozer=model.buildozer,
        module_target=model.module_target,
        highlight=model.highlight,
        fail_on=model.fail_on,
        source=source,
    )


__all__ = [
    "CONFIG_VERSION",
    "Config",
    "ConfigFieldChoiceError",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "UnsupportedConfigVersionError",
    "config_from_model",
]
