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
"""JSON codec for options objects.

``from_json`` validates a document against the options type's document model
and then applies every key the document carries through the options' own
fluent mutators, so overridden mutators behave the same whether a value is
set in code or loaded from JSON. ``to_json`` is the inverse: ``None`` fields
are omitted, byte values are base64 encoded, enums are written by value.
"""

from __future__ import annotations

import base64
import dataclasses
import logging
import warnings
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from amqpbridge.codec.documents import OptionsDocument, ValueDocument
from amqpbridge.kernel.exceptions import ConversionException
from amqpbridge.transport.credentials import (
    JksOptions,
    PemKeyCertOptions,
    PemTrustOptions,
    PfxOptions,
)
from amqpbridge.transport.types import JdkSslEngineOptions, OpenSslEngineOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Collection keys are appended one item at a time, like repeated add_* calls.
_ADDERS: dict[str, str] = {
    "enabled_cipher_suites": "add_enabled_cipher_suite",
    "crl_paths": "add_crl_path",
    "crl_values": "add_crl_value",
    "enabled_secure_transport_protocols": "add_enabled_secure_transport_protocol",
    "enabled_sasl_mechanisms": "add_enabled_sasl_mechanism",
}

# Document keys that share one attribute, told apart by the value's type.
_VARIANTS: dict[str, tuple[str, type]] = {
    "key_store_options": ("key_cert_options", JksOptions),
    "pfx_key_cert_options": ("key_cert_options", PfxOptions),
    "pem_key_cert_options": ("key_cert_options", PemKeyCertOptions),
    "trust_store_options": ("trust_options", JksOptions),
    "pfx_trust_options": ("trust_options", PfxOptions),
    "pem_trust_options": ("trust_options", PemTrustOptions),
    "jdk_ssl_engine_options": ("ssl_engine_options", JdkSslEngineOptions),
    "open_ssl_engine_options": ("ssl_engine_options", OpenSslEngineOptions),
}


def from_json(document: Mapping[str, Any], options: T, stacklevel: int = 2) -> T:
    """Populate *options* from *document* and return it.

    Warnings raised by the mutators (``set_vhost`` is deprecated) are
    re-issued against the frame *stacklevel* levels up, so they point at the
    code that loaded the document.

    Raises:
        ConversionException: If *document* is not a JSON object or a value
            does not match its field's type.
    """
    model: type[OptionsDocument] = options.json_document  # type: ignore[attr-defined]
    if not isinstance(document, Mapping):
        raise ConversionException(
            f"{type(options).__name__} document must be a JSON object, got {type(document).__name__}",
            code="CONVERSION_ERROR",
        )

    unknown = set(document) - model.known_keys()
    if unknown:
        logger.debug("Ignoring unknown %s keys: %s", type(options).__name__, ", ".join(sorted(unknown)))

    try:
        parsed = model.model_validate(dict(document))
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        detail = "; ".join(f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in errors)
        raise ConversionException(
            f"Invalid {type(options).__name__} document: {detail}",
            code="CONVERSION_ERROR",
            context={"errors": errors},
        ) from exc

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        for name in model.model_fields:
            if name in parsed.model_fields_set:
                _apply(options, name, getattr(parsed, name))
    for warning in caught:
        warnings.warn(warning.message, warning.category, stacklevel=stacklevel)
    return options


def to_json(options: Any) -> dict[str, Any]:
    """Serialize *options* into a JSON-compatible dict."""
    model: type[OptionsDocument] = options.json_document
    data: dict[str, Any] = {}
    for name, info in model.model_fields.items():
        if name in model.write_excluded:
            continue
        value = _read(options, name)
        if value is None:
            continue
        data[info.alias or name] = _encode(value)
    return data


def _apply(options: Any, name: str, value: Any) -> None:
    if name in _ADDERS:
        adder = getattr(options, _ADDERS[name])
        for item in value:
            adder(item)
    elif isinstance(value, ValueDocument):
        getattr(options, f"set_{name}")(value.to_options())
    else:
        getattr(options, f"set_{name}")(value)


def _read(options: Any, name: str) -> Any:
    if name in _VARIANTS:
        attribute, variant = _VARIANTS[name]
        value = getattr(options, attribute)
        return value if type(value) is variant else None
    return getattr(options, name)


def _encode(value: Any) -> Any:
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            to_camel(f.name): _encode(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    return value
