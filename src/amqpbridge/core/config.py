# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Application configuration from YAML/TOML files and env vars, bound onto options types."""

from __future__ import annotations

import dataclasses
import os
import re
import tomllib
import types
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any, TypeVar, Union, cast, get_args, get_origin, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PROPERTIES_ATTR = "__amqpbridge_config_prefix__"

_ENV_PREFIX = "AMQPBRIDGE_"


def _unwrap_annotation(annotation: Any) -> Any:
    """Strip ``Annotated`` metadata and ``| None`` from a field annotation."""
    origin = get_origin(annotation)
    if origin is Annotated:
        return _unwrap_annotation(get_args(annotation)[0])
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap_annotation(args[0])
    return annotation


def _parse_scalar(value: str) -> Any:
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return value
    return parsed if isinstance(parsed, (int, float, bool)) else value


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a class as bindable to a configuration prefix.

    Works with dataclasses, Pydantic BaseModel subclasses, and options types
    that build themselves from a JSON document (``from_json``).

    Usage:
        @config_properties(prefix="amqpbridge.options")
        @dataclass(eq=False)
        class AmqpBridgeOptions(TransportClientOptions):
            container_id: str | None = None
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (AMQPBRIDGE_SECTION_KEY format)
    2. Configuration dict / YAML / TOML values
    3. Defaults of the bound type
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the raw configuration data."""
        return dict(self._data)

    @classmethod
    def from_file(cls, path: str | Path, active_profiles: list[str] | None = None) -> Config:
        """Load configuration from a YAML or TOML file plus its profile overlays.

        For ``bridge.yaml`` and profile ``dev``, ``bridge-dev.yaml`` next to it
        is merged on top. A missing base file yields an empty configuration.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if path.exists():
            data = cls._load_config_data(path)
            sources.append(str(path))

            for profile in active_profiles or []:
                profile_path = path.parent / f"{path.stem}-{profile}{path.suffix}"
                if profile_path.exists():
                    data = cls._deep_merge(data, cls._load_config_data(profile_path))
                    sources.append(f"{profile_path} (profile: {profile})")

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        """Load config data from a YAML or TOML file."""
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        String values containing ``${...}`` placeholders are resolved:
        - ``${ENV_VAR}`` — resolved from environment variables
        - ``${config.key}`` — resolved from other config values
        - ``${key:default}`` — uses default if key/env not found
        """
        env_val = os.environ.get(self._env_key(key))
        if env_val is not None:
            return env_val

        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return default
            else:
                return default

        if isinstance(current, str) and "${" in current:
            return self._resolve_placeholders(current)

        return current

    @staticmethod
    def _env_key(key: str) -> str:
        # amqpbridge.options.container-id -> AMQPBRIDGE_OPTIONS_CONTAINER_ID
        base = key.removeprefix("amqpbridge.")
        return _ENV_PREFIX + base.upper().replace(".", "_").replace("-", "_")

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        """Resolve ``${...}`` placeholders in a string value.

        Guards against circular references with a max recursion depth.
        """
        if _depth > 10:
            raise ValueError(
                f"Max recursion depth exceeded resolving placeholders in '{value}'. Check for circular references."
            )

        def _replace(match: re.Match[str]) -> str:
            inner = match.group(1)

            if ":" in inner:
                ref_key, default_val = inner.split(":", 1)
            else:
                ref_key, default_val = inner, None

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            parts = ref_key.split(".")
            current: Any = self._data
            for part in parts:
                if isinstance(current, dict):
                    current = current.get(part)
                    if current is None:
                        break
                else:
                    current = None
                    break

            if current is not None:
                resolved = str(current)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if default_val is not None:
                return cast(str, default_val)

            raise ValueError(f"Cannot resolve placeholder '${{{inner}}}': not found in environment or config")

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix, with placeholders resolved at any depth."""
        parts = prefix.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        if not isinstance(current, dict):
            return {}
        return {key: self._resolve_value(value) for key, value in current.items()}

    def _resolve_value(self, value: Any) -> Any:
        if isinstance(value, str) and "${" in value:
            return self._resolve_placeholders(value)
        if isinstance(value, dict):
            return {key: self._resolve_value(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._resolve_value(item) for item in value]
        return value

    def _apply_env_overrides(self, prefix: str, section: dict[str, Any], model: type[BaseModel]) -> None:
        # AMQPBRIDGE_OPTIONS_CONTAINERID or AMQPBRIDGE_OPTIONS_CONTAINER_ID
        for name, info in model.model_fields.items():
            alias = info.alias or name
            for key in dict.fromkeys((alias, name)):
                env_val = os.environ.get(self._env_key(f"{prefix}.{key}"))
                if env_val is not None:
                    section.pop(name, None)
                    section[alias] = env_val
                    break

    @classmethod
    def _coerce_scalars(cls, section: dict[str, Any], model: type[BaseModel]) -> dict[str, Any]:
        """Parse string values bound for int, float or bool fields as YAML scalars.

        Placeholders and env vars always resolve to text; ``"30000"`` becomes
        ``30000`` and ``"true"`` becomes ``True``. String fields are left alone,
        so a numeric password stays a string.
        """
        fields: dict[str, Any] = {}
        for name, info in model.model_fields.items():
            fields[name] = info
            fields[info.alias or name] = info

        coerced = dict(section)
        for key, value in section.items():
            info = fields.get(key)
            if info is None:
                continue
            target = _unwrap_annotation(info.annotation)
            if isinstance(value, str) and target in (int, float, bool):
                coerced[key] = _parse_scalar(value)
            elif isinstance(value, dict) and isinstance(target, type) and issubclass(target, BaseModel):
                coerced[key] = cls._coerce_scalars(value, target)
        return coerced

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a ``@config_properties`` class.

        Options types are built with ``from_json``. Environment variables
        override top-level keys, and text bound for int or bool fields is
        parsed as a YAML scalar first. A malformed section raises
        :class:`~amqpbridge.kernel.exceptions.ConversionException`. Pydantic
        models and dataclasses raise ``ValueError``.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        section = self.get_section(prefix)

        # Options path — the JSON codec owns validation
        from_json = getattr(config_cls, "from_json", None)
        if callable(from_json):
            document: type[BaseModel] | None = getattr(config_cls, "json_document", None)
            if document is not None:
                self._apply_env_overrides(prefix, section, document)
                section = self._coerce_scalars(section, document)
            return cast(T, from_json(section))

        # Pydantic BaseModel path — fail-fast with ValidationError
        if isinstance(config_cls, type) and issubclass(config_cls, BaseModel):
            try:
                return config_cls.model_validate(section)
            except ValidationError as exc:
                raise ValueError(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
                ) from exc

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            if field.name in section:
                value = section[field.name]
                expected_type = hints.get(field.name)
                if expected_type is int and isinstance(value, str):
                    value = int(value)
                elif expected_type is float and isinstance(value, str):
                    value = float(value)
                elif expected_type is bool and isinstance(value, str):
                    value = value.lower() in ("true", "1", "yes")
                kwargs[field.name] = value

        return config_cls(**kwargs)
