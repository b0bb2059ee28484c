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
"""TransportClientOptions — TCP, TLS, SASL, proxy and reconnect settings.

The options object is inert data: it stores what the protocol client needs
to open a connection and never validates values at assignment time. Every
mutator returns ``self`` typed as ``Self``, so a chain started on a subclass
keeps the subclass type (and its extra mutators) all the way through.

Usage::

    options = (
        TransportClientOptions()
        .set_ssl(True)
        .set_trust_store_options(JksOptions(path="/etc/amqp/truststore.jks", password="secret"))
        .add_enabled_sasl_mechanism("PLAIN")
        .set_heartbeat(30_000)
    )
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from amqpbridge.codec import converter
from amqpbridge.codec.documents import OptionsDocument, TransportOptionsDocument
from amqpbridge.kernel.hashing import accumulate_hash
from amqpbridge.transport.credentials import (
    JksOptions,
    KeyCertOptions,
    PemKeyCertOptions,
    PemTrustOptions,
    PfxOptions,
    TrustOptions,
)
from amqpbridge.transport.types import (
    JdkSslEngineOptions,
    OpenSslEngineOptions,
    ProxyOptions,
    SslEngineOptions,
)

DEFAULT_SECURE_TRANSPORT_PROTOCOLS = ("TLSv1", "TLSv1.1", "TLSv1.2")


@dataclass
class TransportClientOptions:
    """Settings handed to the protocol client when it opens a connection."""

    json_document: ClassVar[type[OptionsDocument]] = TransportOptionsDocument

    # Socket
    send_buffer_size: int = -1
    receive_buffer_size: int = -1
    reuse_address: bool = True
    reuse_port: bool = False
    traffic_class: int = -1
    log_activity: bool = False
    tcp_no_delay: bool = True
    tcp_keep_alive: bool = False
    so_linger: int = -1
    use_pooled_buffers: bool = False
    idle_timeout: int = 0

    # TLS
    ssl: bool = False
    key_cert_options: KeyCertOptions | None = None
    trust_options: TrustOptions | None = None
    enabled_cipher_suites: list[str] = field(default_factory=list)
    crl_paths: list[str] = field(default_factory=list)
    crl_values: list[bytes] = field(default_factory=list)
    use_alpn: bool = False
    ssl_engine_options: SslEngineOptions | None = None
    enabled_secure_transport_protocols: list[str] = field(
        default_factory=lambda: list(DEFAULT_SECURE_TRANSPORT_PROTOCOLS)
    )
    tcp_fast_open: bool = False
    tcp_cork: bool = False
    tcp_quick_ack: bool = False

    # Client
    connect_timeout: int = 60000
    trust_all: bool = False
    metrics_name: str = ""
    proxy_options: ProxyOptions | None = None
    local_address: str | None = None
    reconnect_attempts: int = 0
    reconnect_interval: int = 1000
    hostname_verification_algorithm: str = ""

    # AMQP
    enabled_sasl_mechanisms: list[str] = field(default_factory=list)
    heartbeat: int = 0
    max_frame_size: int = -1
    virtual_host: str | None = None
    sni_server_name: str | None = None

    def __hash__(self) -> int:
        return accumulate_hash(
            1, (getattr(self, f.name) for f in dataclasses.fields(TransportClientOptions))
        )

    # -- construction ---------------------------------------------------------

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> Self:
        """Build options from a JSON document; unknown keys are ignored."""
        return converter.from_json(document, cls(), stacklevel=3)

    def to_json(self) -> dict[str, Any]:
        return converter.to_json(self)

    def copy(self) -> Self:
        """Return an independent deep copy equal to this instance."""
        return copy.deepcopy(self)

    # -- socket ---------------------------------------------------------------

    def set_send_buffer_size(self, send_buffer_size: int) -> Self:
        self.send_buffer_size = send_buffer_size
        return self

    def set_receive_buffer_size(self, receive_buffer_size: int) -> Self:
        self.receive_buffer_size = receive_buffer_size
        return self

    def set_reuse_address(self, reuse_address: bool) -> Self:
        self.reuse_address = reuse_address
        return self

    def set_reuse_port(self, reuse_port: bool) -> Self:
        self.reuse_port = reuse_port
        return self

    def set_traffic_class(self, traffic_class: int) -> Self:
        self.traffic_class = traffic_class
        return self

    def set_log_activity(self, log_activity: bool) -> Self:
        """Log network activity of the underlying connection."""
        self.log_activity = log_activity
        return self

    def set_tcp_no_delay(self, tcp_no_delay: bool) -> Self:
        self.tcp_no_delay = tcp_no_delay
        return self

    def set_tcp_keep_alive(self, tcp_keep_alive: bool) -> Self:
        self.tcp_keep_alive = tcp_keep_alive
        return self

    def set_so_linger(self, so_linger: int) -> Self:
        self.so_linger = so_linger
        return self

    def set_use_pooled_buffers(self, use_pooled_buffers: bool) -> Self:
        self.use_pooled_buffers = use_pooled_buffers
        return self

    def set_idle_timeout(self, idle_timeout: int) -> Self:
        """Seconds without traffic before the connection is closed; 0 disables."""
        self.idle_timeout = idle_timeout
        return self

    def set_tcp_fast_open(self, tcp_fast_open: bool) -> Self:
        self.tcp_fast_open = tcp_fast_open
        return self

    def set_tcp_cork(self, tcp_cork: bool) -> Self:
        self.tcp_cork = tcp_cork
        return self

    def set_tcp_quick_ack(self, tcp_quick_ack: bool) -> Self:
        self.tcp_quick_ack = tcp_quick_ack
        return self

    # -- TLS ------------------------------------------------------------------

    def set_ssl(self, ssl: bool) -> Self:
        self.ssl = ssl
        return self

    def set_key_cert_options(self, options: KeyCertOptions | None) -> Self:
        self.key_cert_options = options
        return self

    def set_key_store_options(self, options: JksOptions | None) -> Self:
        self.key_cert_options = options
        return self

    def set_pfx_key_cert_options(self, options: PfxOptions | None) -> Self:
        self.key_cert_options = options
        return self

    def set_pem_key_cert_options(self, options: PemKeyCertOptions | None) -> Self:
        self.key_cert_options = options
        return self

    def set_trust_options(self, options: TrustOptions | None) -> Self:
        self.trust_options = options
        return self

    def set_trust_store_options(self, options: JksOptions | None) -> Self:
        self.trust_options = options
        return self

    def set_pfx_trust_options(self, options: PfxOptions | None) -> Self:
        self.trust_options = options
        return self

    def set_pem_trust_options(self, options: PemTrustOptions | None) -> Self:
        self.trust_options = options
        return self

    def add_enabled_cipher_suite(self, suite: str) -> Self:
        if suite not in self.enabled_cipher_suites:
            self.enabled_cipher_suites.append(suite)
        return self

    def add_crl_path(self, crl_path: str) -> Self:
        self.crl_paths.append(crl_path)
        return self

    def add_crl_value(self, crl_value: bytes) -> Self:
        self.crl_values.append(crl_value)
        return self

    def set_use_alpn(self, use_alpn: bool) -> Self:
        self.use_alpn = use_alpn
        return self

    def set_ssl_engine_options(self, options: SslEngineOptions | None) -> Self:
        self.ssl_engine_options = options
        return self

    def set_jdk_ssl_engine_options(self, options: JdkSslEngineOptions | None) -> Self:
        self.ssl_engine_options = options
        return self

    def set_open_ssl_engine_options(self, options: OpenSslEngineOptions | None) -> Self:
        self.ssl_engine_options = options
        return self

    def add_enabled_secure_transport_protocol(self, protocol: str) -> Self:
        if protocol not in self.enabled_secure_transport_protocols:
            self.enabled_secure_transport_protocols.append(protocol)
        return self

    def set_trust_all(self, trust_all: bool) -> Self:
        self.trust_all = trust_all
        return self

    def set_hostname_verification_algorithm(self, algorithm: str) -> Self:
        """Algorithm used to check the server name; ``""`` disables the check."""
        self.hostname_verification_algorithm = algorithm
        return self

    def set_sni_server_name(self, sni_server_name: str | None) -> Self:
        self.sni_server_name = sni_server_name
        return self

    # -- client ---------------------------------------------------------------

    def set_connect_timeout(self, connect_timeout: int) -> Self:
        """Milliseconds to wait for the TCP connection to establish."""
        self.connect_timeout = connect_timeout
        return self

    def set_metrics_name(self, metrics_name: str) -> Self:
        self.metrics_name = metrics_name
        return self

    def set_proxy_options(self, proxy_options: ProxyOptions | None) -> Self:
        self.proxy_options = proxy_options
        return self

    def set_local_address(self, local_address: str | None) -> Self:
        """Local interface to bind the client socket to."""
        self.local_address = local_address
        return self

    def set_reconnect_attempts(self, attempts: int) -> Self:
        """Attempts made after a failed connect; -1 retries forever."""
        self.reconnect_attempts = attempts
        return self

    def set_reconnect_interval(self, interval: int) -> Self:
        """Milliseconds between reconnect attempts."""
        self.reconnect_interval = interval
        return self

    # -- AMQP -----------------------------------------------------------------

    def add_enabled_sasl_mechanism(self, sasl_mechanism: str) -> Self:
        """Restrict SASL to the added mechanisms; none added allows any."""
        if sasl_mechanism not in self.enabled_sasl_mechanisms:
            self.enabled_sasl_mechanisms.append(sasl_mechanism)
        return self

    def set_heartbeat(self, heartbeat: int) -> Self:
        """Milliseconds between heartbeats sent to the peer; 0 disables them."""
        self.heartbeat = heartbeat
        return self

    def set_max_frame_size(self, max_frame_size: int) -> Self:
        """Largest AMQP frame to accept; -1 keeps the protocol default."""
        self.max_frame_size = max_frame_size
        return self

    def set_virtual_host(self, virtual_host: str | None) -> Self:
        """Hostname advertised in the AMQP Open frame; ``None`` uses the TCP host."""
        self.virtual_host = virtual_host
        return self
