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
"""Proxy and SSL engine value types referenced by the transport options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from amqpbridge.kernel.hashing import dataclass_hash


class ProxyType(Enum):
    """Proxy protocol used to tunnel the TCP connection."""

    HTTP = "HTTP"
    SOCKS4 = "SOCKS4"
    SOCKS5 = "SOCKS5"


@dataclass
class ProxyOptions:
    """Proxy server to connect through."""

    type: ProxyType = ProxyType.HTTP
    host: str = "localhost"
    port: int = 3128
    username: str | None = None
    password: str | None = None

    __hash__ = dataclass_hash


@dataclass
class SslEngineOptions:
    """Base type for the TLS engine implementation choice."""

    __hash__ = dataclass_hash


@dataclass
class JdkSslEngineOptions(SslEngineOptions):
    """Use the platform's default TLS engine."""

    __hash__ = dataclass_hash


@dataclass
class OpenSslEngineOptions(SslEngineOptions):
    """Use an OpenSSL-backed TLS engine."""

    session_cache_enabled: bool = True

    __hash__ = dataclass_hash
