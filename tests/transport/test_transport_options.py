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
"""Tests for TransportClientOptions and its value types."""

import pytest

from amqpbridge.transport import (
    JdkSslEngineOptions,
    JksOptions,
    OpenSslEngineOptions,
    PemKeyCertOptions,
    PemTrustOptions,
    PfxOptions,
    ProxyOptions,
    ProxyType,
)
from amqpbridge.transport.options import DEFAULT_SECURE_TRANSPORT_PROTOCOLS, TransportClientOptions


class TestDefaults:
    def test_socket_defaults(self):
        options = TransportClientOptions()
        assert options.send_buffer_size == -1
        assert options.receive_buffer_size == -1
        assert options.reuse_address is True
        assert options.reuse_port is False
        assert options.traffic_class == -1
        assert options.tcp_no_delay is True
        assert options.tcp_keep_alive is False
        assert options.so_linger == -1
        assert options.idle_timeout == 0

    def test_tls_defaults(self):
        options = TransportClientOptions()
        assert options.ssl is False
        assert options.key_cert_options is None
        assert options.trust_options is None
        assert options.enabled_cipher_suites == []
        assert options.use_alpn is False
        assert options.enabled_secure_transport_protocols == list(DEFAULT_SECURE_TRANSPORT_PROTOCOLS)
        assert options.hostname_verification_algorithm == ""

    def test_client_and_amqp_defaults(self):
        options = TransportClientOptions()
        assert options.connect_timeout == 60000
        assert options.reconnect_attempts == 0
        assert options.reconnect_interval == 1000
        assert options.metrics_name == ""
        assert options.heartbeat == 0
        assert options.max_frame_size == -1
        assert options.virtual_host is None
        assert options.sni_server_name is None
        assert options.enabled_sasl_mechanisms == []

    def test_collections_are_not_shared(self):
        a = TransportClientOptions().add_enabled_cipher_suite("TLS_AES_128_GCM_SHA256")
        b = TransportClientOptions()
        assert b.enabled_cipher_suites == []
        assert a.enabled_secure_transport_protocols is not b.enabled_secure_transport_protocols


class TestSetters:
    @pytest.mark.parametrize(
        ("setter", "attribute", "value"),
        [
            ("set_send_buffer_size", "send_buffer_size", 65536),
            ("set_receive_buffer_size", "receive_buffer_size", 32768),
            ("set_reuse_address", "reuse_address", False),
            ("set_reuse_port", "reuse_port", True),
            ("set_traffic_class", "traffic_class", 0x10),
            ("set_log_activity", "log_activity", True),
            ("set_tcp_no_delay", "tcp_no_delay", False),
            ("set_tcp_keep_alive", "tcp_keep_alive", True),
            ("set_so_linger", "so_linger", 5),
            ("set_use_pooled_buffers", "use_pooled_buffers", True),
            ("set_idle_timeout", "idle_timeout", 120),
            ("set_tcp_fast_open", "tcp_fast_open", True),
            ("set_tcp_cork", "tcp_cork", True),
            ("set_tcp_quick_ack", "tcp_quick_ack", True),
            ("set_ssl", "ssl", True),
            ("set_use_alpn", "use_alpn", True),
            ("set_trust_all", "trust_all", True),
            ("set_hostname_verification_algorithm", "hostname_verification_algorithm", "HTTPS"),
            ("set_sni_server_name", "sni_server_name", "broker.example.com"),
            ("set_connect_timeout", "connect_timeout", 5000),
            ("set_metrics_name", "metrics_name", "orders-amqp"),
            ("set_local_address", "local_address", "10.0.0.5"),
            ("set_reconnect_attempts", "reconnect_attempts", -1),
            ("set_reconnect_interval", "reconnect_interval", 250),
            ("set_heartbeat", "heartbeat", 30000),
            ("set_max_frame_size", "max_frame_size", 1 << 16),
            ("set_virtual_host", "virtual_host", "tenant-a"),
        ],
    )
    def test_setter_round_trip(self, setter: str, attribute: str, value: object):
        options = TransportClientOptions()
        result = getattr(options, setter)(value)
        assert result is options
        assert getattr(options, attribute) == value

    def test_values_are_not_validated(self):
        options = TransportClientOptions().set_heartbeat(-42).set_connect_timeout(0).set_virtual_host(None)
        assert options.heartbeat == -42
        assert options.connect_timeout == 0
        assert options.virtual_host is None

    def test_key_cert_variants_share_one_slot(self):
        jks = JksOptions(path="keystore.jks", password="changeit")
        pfx = PfxOptions(path="client.p12")
        pem = PemKeyCertOptions(key_path="client.key", cert_path="client.crt")
        options = TransportClientOptions()
        assert options.set_key_store_options(jks).key_cert_options is jks
        assert options.set_pfx_key_cert_options(pfx).key_cert_options is pfx
        assert options.set_pem_key_cert_options(pem).key_cert_options is pem
        assert options.set_key_cert_options(None).key_cert_options is None

    def test_trust_variants_share_one_slot(self):
        jks = JksOptions(path="truststore.jks")
        pfx = PfxOptions(value=b"\x30\x82")
        pem = PemTrustOptions(cert_paths=["ca.pem"])
        options = TransportClientOptions()
        assert options.set_trust_store_options(jks).trust_options is jks
        assert options.set_pfx_trust_options(pfx).trust_options is pfx
        assert options.set_pem_trust_options(pem).trust_options is pem
        assert options.set_trust_options(jks).trust_options is jks

    def test_ssl_engine_variants(self):
        options = TransportClientOptions()
        assert isinstance(options.set_jdk_ssl_engine_options(JdkSslEngineOptions()).ssl_engine_options, JdkSslEngineOptions)
        engine = OpenSslEngineOptions(session_cache_enabled=False)
        assert options.set_open_ssl_engine_options(engine).ssl_engine_options is engine
        assert options.set_ssl_engine_options(None).ssl_engine_options is None

    def test_proxy_options(self):
        proxy = ProxyOptions(type=ProxyType.SOCKS5, host="proxy.internal", port=1080, username="u")
        options = TransportClientOptions().set_proxy_options(proxy)
        assert options.proxy_options is proxy
        assert options.proxy_options.type is ProxyType.SOCKS5


class TestCollections:
    def test_cipher_suites_keep_order_and_skip_duplicates(self):
        options = (
            TransportClientOptions()
            .add_enabled_cipher_suite("B")
            .add_enabled_cipher_suite("A")
            .add_enabled_cipher_suite("B")
        )
        assert options.enabled_cipher_suites == ["B", "A"]

    def test_secure_protocols_extend_defaults(self):
        options = TransportClientOptions().add_enabled_secure_transport_protocol("TLSv1.3")
        assert options.enabled_secure_transport_protocols[-1] == "TLSv1.3"
        options.add_enabled_secure_transport_protocol("TLSv1.2")
        assert options.enabled_secure_transport_protocols.count("TLSv1.2") == 1

    def test_sasl_mechanisms(self):
        options = TransportClientOptions().add_enabled_sasl_mechanism("PLAIN").add_enabled_sasl_mechanism("PLAIN")
        assert options.enabled_sasl_mechanisms == ["PLAIN"]

    def test_crl_entries_are_plain_lists(self):
        options = TransportClientOptions().add_crl_path("a.crl").add_crl_path("a.crl").add_crl_value(b"crl")
        assert options.crl_paths == ["a.crl", "a.crl"]
        assert options.crl_values == [b"crl"]


class TestEqualityAndHash:
    def test_default_instances_equal(self):
        assert TransportClientOptions() == TransportClientOptions()
        assert hash(TransportClientOptions()) == hash(TransportClientOptions())

    def test_field_change_breaks_equality(self):
        assert TransportClientOptions().set_heartbeat(1) != TransportClientOptions()

    def test_nested_value_types_compare_structurally(self):
        a = TransportClientOptions().set_trust_store_options(JksOptions(path="t.jks", password="p"))
        b = TransportClientOptions().set_trust_store_options(JksOptions(path="t.jks", password="p"))
        assert a == b
        assert hash(a) == hash(b)

    def test_usable_in_sets(self):
        a = TransportClientOptions().add_enabled_cipher_suite("X").set_proxy_options(ProxyOptions())
        b = TransportClientOptions().add_enabled_cipher_suite("X").set_proxy_options(ProxyOptions())
        assert len({a, b}) == 1

    def test_jks_and_pfx_with_same_fields_differ(self):
        assert JksOptions(path="s") != PfxOptions(path="s")

    def test_pem_trust_options_fluent_adds(self):
        pem = PemTrustOptions().add_cert_path("ca.pem").add_cert_value(b"cert")
        assert pem == PemTrustOptions(cert_paths=["ca.pem"], cert_values=[b"cert"])
        assert hash(pem) == hash(PemTrustOptions(cert_paths=["ca.pem"], cert_values=[b"cert"]))


class TestCopy:
    def test_copy_is_equal_and_independent(self):
        original = TransportClientOptions().add_crl_path("a.crl").set_trust_store_options(JksOptions(path="t.jks"))
        clone = original.copy()
        assert clone == original
        assert clone is not original
        clone.add_crl_path("b.crl")
        clone.trust_options.path = "other.jks"
        assert original.crl_paths == ["a.crl"]
        assert original.trust_options.path == "t.jks"
