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
"""Value types referenced by the transport options.

The options class itself lives in :mod:`amqpbridge.transport.options`; it is
not re-exported here because it depends on the codec, which depends on
these value types.
"""

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
    ProxyType,
    SslEngineOptions,
)

__all__ = [
    "JdkSslEngineOptions",
    "JksOptions",
    "KeyCertOptions",
    "OpenSslEngineOptions",
    "PemKeyCertOptions",
    "PemTrustOptions",
    "PfxOptions",
    "ProxyOptions",
    "ProxyType",
    "SslEngineOptions",
    "TrustOptions",
]
