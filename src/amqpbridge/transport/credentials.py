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
"""Key and trust material for TLS connections.

Each credential source can be given either as a filesystem path or as the
raw bytes of the store/certificate. Java keystores and PKCS#12 stores serve
as both key and trust material; PEM files are split into a key/cert pair and
a list of trusted certificates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from amqpbridge.kernel.hashing import dataclass_hash


@dataclass
class JksOptions:
    """Java keystore, usable as key material or as a trust store."""

    path: str | None = None
    value: bytes | None = None
    password: str | None = None

    __hash__ = dataclass_hash


@dataclass
class PfxOptions:
    """PKCS#12 store, usable as key material or as a trust store."""

    path: str | None = None
    value: bytes | None = None
    password: str | None = None

    __hash__ = dataclass_hash


@dataclass
class PemKeyCertOptions:
    """PEM private key plus certificate."""

    key_path: str | None = None
    key_value: bytes | None = None
    cert_path: str | None = None
    cert_value: bytes | None = None

    __hash__ = dataclass_hash


@dataclass
class PemTrustOptions:
    """Trusted PEM certificates."""

    cert_paths: list[str] = field(default_factory=list)
    cert_values: list[bytes] = field(default_factory=list)

    __hash__ = dataclass_hash

    def add_cert_path(self, cert_path: str) -> PemTrustOptions:
        self.cert_paths.append(cert_path)
        return self

    def add_cert_value(self, cert_value: bytes) -> PemTrustOptions:
        self.cert_values.append(cert_value)
        return self


KeyCertOptions: TypeAlias = JksOptions | PfxOptions | PemKeyCertOptions
TrustOptions: TypeAlias = JksOptions | PfxOptions | PemTrustOptions
