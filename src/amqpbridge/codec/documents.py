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
"""Pydantic models describing the JSON document shape of each options type.

Scalar fields are validated strictly: a JSON string is never coerced to an int
or a bool. Keys are camelCase on the wire (``containerId``) and the
snake_case attribute name is accepted as well (``container_id``). Unknown
keys are ignored. Byte values travel as base64 strings.

Defaults declared here only describe the shape; the converter applies a
field only when the document actually carries its key.
"""

from __future__ import annotations

import base64
from collections.abc import Callable
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from amqpbridge.transport.credentials import (
    JksOptions,
    PemKeyCertOptions,
    PemTrustOptions,
    PfxOptions,
)
from amqpbridge.transport.types import (
    JdkSslEngineOptions,
    OpenSslEngineOptions,
    ProxyOptions,
    ProxyType,
)


def _decode_base64(value: Any) -> Any:
    if isinstance(value, str):
        return base64.b64decode(value, validate=True)
    return value


Base64Buffer = Annotated[bytes, BeforeValidator(_decode_base64)]
OptionsFactory = Callable[..., Any]


class OptionsDocument(BaseModel):
    """Base for every options document."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Fields read from the document but never written back by to_json().
    write_excluded: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def known_keys(cls) -> frozenset[str]:
        """Every key this document recognises, in both spellings."""
        keys: set[str] = set()
        for name, info in cls.model_fields.items():
            keys.add(name)
            if info.alias:
                keys.add(info.alias)
        return frozenset(keys)


class ValueDocument(OptionsDocument):
    """A nested document that maps one-to-one onto a value type."""

    options_type: ClassVar[OptionsFactory]

    def to_options(self) -> Any:
        return self.options_type(**self.model_dump())


# =============================================================================
# Nested value documents
# =============================================================================


class JksDocument(ValueDocument):
    options_type: ClassVar[OptionsFactory] = JksOptions

    path: StrictStr | None = None
    value: Base64Buffer | None = None
    password: StrictStr | None = None


class PfxDocument(ValueDocument):
    options_type: ClassVar[OptionsFactory] = PfxOptions

    path: StrictStr | None = None
    value: Base64Buffer | None = None
    password: StrictStr | None = None


class PemKeyCertDocument(ValueDocument):
    options_type: ClassVar[OptionsFactory] = PemKeyCertOptions

    key_path: StrictStr | None = None
    key_value: Base64Buffer | None = None
    cert_path: StrictStr | None = None
    cert_value: Base64Buffer | None = None


class PemTrustDocument(ValueDocument):
    options_type: ClassVar[OptionsFactory] = PemTrustOptions

    cert_paths: list[StrictStr] = Field(default_factory=list)
    cert_values: list[Base64Buffer] = Field(default_factory=list)


class ProxyDocument(ValueDocument):
    options_type: ClassVar[OptionsFactory] = ProxyOptions

    # Enum members arrive by value ("SOCKS5").
    type: ProxyType = ProxyType.HTTP
    host: StrictStr = "localhost"
    port: StrictInt = 3128
    username: StrictStr | None = None
    password: StrictStr | None = None


class JdkSslEngineDocument(ValueDocument):
    options_type: ClassVar[OptionsFactory] = JdkSslEngineOptions


class OpenSslEngineDocument(ValueDocument):
    options_type: ClassVar[OptionsFactory] = OpenSslEngineOptions

    session_cache_enabled: StrictBool = True


# =============================================================================
# Options documents
# =============================================================================


class TransportOptionsDocument(OptionsDocument):
    """JSON shape of :class:`~amqpbridge.transport.options.TransportClientOptions`."""

    send_buffer_size: StrictInt = -1
    receive_buffer_size: StrictInt = -1
    reuse_address: StrictBool = True
    reuse_port: StrictBool = False
    traffic_class: StrictInt = -1
    log_activity: StrictBool = False
    tcp_no_delay: StrictBool = True
    tcp_keep_alive: StrictBool = False
    so_linger: StrictInt = -1
    use_pooled_buffers: StrictBool = False
    idle_timeout: StrictInt = 0
    ssl: StrictBool = False
    key_store_options: JksDocument | None = None
    pfx_key_cert_options: PfxDocument | None = None
    pem_key_cert_options: PemKeyCertDocument | None = None
    trust_store_options: JksDocument | None = None
    pfx_trust_options: PfxDocument | None = None
    pem_trust_options: PemTrustDocument | None = None
    enabled_cipher_suites: list[StrictStr] = Field(default_factory=list)
    crl_paths: list[StrictStr] = Field(default_factory=list)
    crl_values: list[Base64Buffer] = Field(default_factory=list)
    use_alpn: StrictBool = False
    jdk_ssl_engine_options: JdkSslEngineDocument | None = None
    open_ssl_engine_options: OpenSslEngineDocument | None = None
    enabled_secure_transport_protocols: list[StrictStr] = Field(default_factory=list)
    tcp_fast_open: StrictBool = False
    tcp_cork: StrictBool = False
    tcp_quick_ack: StrictBool = False
    connect_timeout: StrictInt = 60000
    trust_all: StrictBool = False
    metrics_name: StrictStr = ""
    proxy_options: ProxyDocument | None = None
    local_address: StrictStr | None = None
    reconnect_attempts: StrictInt = 0
    reconnect_interval: StrictInt = 1000
    hostname_verification_algorithm: StrictStr = ""
    enabled_sasl_mechanisms: list[StrictStr] = Field(default_factory=list)
    heartbeat: StrictInt = 0
    max_frame_size: StrictInt = -1
    virtual_host: StrictStr | None = None
    sni_server_name: StrictStr | None = None


class BridgeOptionsDocument(TransportOptionsDocument):
    """JSON shape of :class:`~amqpbridge.bridge.options.AmqpBridgeOptions`."""

    write_excluded: ClassVar[frozenset[str]] = frozenset({"use_alpn"})

    container_id: StrictStr | None = None
    vhost: StrictStr | None = None
    reply_handling_support: StrictBool = True
