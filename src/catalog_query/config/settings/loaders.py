"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import logging
import os
from typing import Any, Mapping, TypeVar

from catalog_query.config.settings.base import Settings
from catalog_query.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

logger = logging.getLogger(__name__)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class SettingsLoader(abc.ABC):
    """Port: build a settings dataclass from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` variables into a :class:`Settings` subclass.

    Unset variables keep the field default. Values are stripped and coerced
    from the field annotation (``int``, ``float``, ``bool``, ``str``); for an
    optional field (``X | None``) an empty value means ``None``.

    A custom *environ* mapping can be passed for tests or for hosts that keep
    configuration somewhere other than ``os.environ``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "")
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = "_".join(p for p in (prefix, field.name) if p).upper()
            raw = environ.get(env_key)
            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                kwargs[field.name] = _coerce(raw.strip(), field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        logger.debug("settings.loaded class=%s overrides=%s", settings_class.__name__, sorted(kwargs))
        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


def _coerce(value: str, annotation: Any) -> Any:
    # annotations are strings under ``from __future__ import annotations``
    hint = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", str(annotation))
    parts = [p.strip() for p in hint.split("|")]
    optional = "None" in parts
    base = next((p for p in parts if p != "None"), "str")
    if optional and value == "":
        return None
    if base == "bool":
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"expected one of {sorted(_TRUE | _FALSE)}")
    if base == "int":
        return int(value)
    if base == "float":
        return float(value)
    return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
