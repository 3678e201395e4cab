"""Settings for cronparse and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any, TypedDict

from cronparse.errors import CronparseConfigError
from cronparse.logging import DEFAULT_LOG_FORMAT
from cronparse.py_compatibility import NotRequired, Unpack

ENV_PREFIX = "CRONPARSE_"


class CronparseSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronparseSettings.load`."""

    log_level: NotRequired[str]
    log_format: NotRequired[str]


@dataclasses.dataclass
class CronparseSettings:
    """Strongly typed configuration holder for cronparse logging."""

    log_level: str
    log_format: str

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "log_level": "WARNING",
            "log_format": DEFAULT_LOG_FORMAT,
        }

    @classmethod
    def load(cls, **settings: Unpack[CronparseSettingsKwargs]) -> CronparseSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronparseSettings` object.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONPARSE_*`` environment variables."""
        coercers: dict[str, Any] = {
            "log_level": _to_level_name,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            if field.name not in coercers:
                to_return[field.name] = raw_value
                continue

            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronparseConfigError(msg) from exc
        return to_return


def _to_level_name(value: str) -> str:
    upper = value.strip().upper()
    if not isinstance(logging.getLevelName(upper), int):
        msg = f"Must be a logging level name, got {value!r}"
        raise ValueError(msg)
    return upper
