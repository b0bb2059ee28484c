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
"""amqpbridge — connection options for the AMQP messaging bridge."""

from amqpbridge.bridge.options import AmqpBridgeOptions
from amqpbridge.core.config import Config, config_properties
from amqpbridge.kernel.exceptions import (
    AmqpBridgeException,
    ConfigurationException,
    ConversionException,
    UnsupportedOperationException,
)
from amqpbridge.transport.credentials import (
    JksOptions,
    PemKeyCertOptions,
    PemTrustOptions,
    PfxOptions,
)
from amqpbridge.transport.options import TransportClientOptions
from amqpbridge.transport.types import (
    JdkSslEngineOptions,
    OpenSslEngineOptions,
    ProxyOptions,
    ProxyType,
)

__version__ = "0.1.0"

__all__ = [
    "AmqpBridgeException",
    "AmqpBridgeOptions",
    "Config",
    "ConfigurationException",
    "ConversionException",
    "JdkSslEngineOptions",
    "JksOptions",
    "OpenSslEngineOptions",
    "PemKeyCertOptions",
    "PemTrustOptions",
    "PfxOptions",
    "ProxyOptions",
    "ProxyType",
    "TransportClientOptions",
    "UnsupportedOperationException",
    "config_properties",
]
