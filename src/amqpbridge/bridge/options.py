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
"""AmqpBridgeOptions — options for connecting an application through the AMQP bridge.

Extends :class:`~amqpbridge.transport.options.TransportClientOptions` with the
bridge's own settings. The inherited mutators return ``Self``, so chains keep
the bridge type::

    options = (
        AmqpBridgeOptions()
        .set_container_id("orders-service")
        .set_reply_handling_support(False)
        .set_heartbeat(30)
        .set_virtual_host("tenant-a")
    )

Options can also be bound from application config under
``amqpbridge.options`` (see :meth:`amqpbridge.core.config.Config.bind`).
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import ClassVar, Self, cast

from amqpbridge.codec.documents import BridgeOptionsDocument, OptionsDocument
from amqpbridge.core.config import config_properties
from amqpbridge.kernel.exceptions import UnsupportedOperationException
from amqpbridge.kernel.hashing import accumulate_hash
from amqpbridge.transport.options import TransportClientOptions


@config_properties(prefix="amqpbridge.options")
@dataclass(eq=False)
class AmqpBridgeOptions(TransportClientOptions):
    """Options for configuring the AMQP bridge.

    Attributes:
        container_id: Value for the container-id field of the AMQP Open frame.
            Some peers treat it as a client id. ``None`` lets the bridge
            generate one when the connection is made.
        vhost: Deprecated alias for the Open frame hostname; prefer
            ``virtual_host``. Stored and compared independently of it.
        reply_handling_support: Whether the bridge should try to enable
            sending with a reply handler and replying to received messages.
            Advisory only: without server support for anonymous-sender links
            the bridge cannot offer reply handling regardless of this flag.
    """

    json_document: ClassVar[type[OptionsDocument]] = BridgeOptionsDocument

    container_id: str | None = None
    vhost: str | None = None
    reply_handling_support: bool = True

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        if not super().__eq__(other):
            return False
        bridge = cast(AmqpBridgeOptions, other)
        return (
            self.reply_handling_support == bridge.reply_handling_support
            and self.container_id == bridge.container_id
            and self.vhost == bridge.vhost
        )

    def __hash__(self) -> int:
        return accumulate_hash(
            super().__hash__(),
            (self.reply_handling_support, self.container_id, self.vhost),
        )

    def set_container_id(self, container_id: str | None) -> Self:
        self.container_id = container_id
        return self

    def set_vhost(self, vhost: str | None) -> Self:
        """Set the Open frame hostname through the legacy field.

        .. deprecated:: use :meth:`set_virtual_host` instead.
        """
        warnings.warn(
            "AmqpBridgeOptions.set_vhost() is deprecated, use set_virtual_host() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        self.vhost = vhost
        return self

    def set_reply_handling_support(self, reply_handling_support: bool) -> Self:
        self.reply_handling_support = reply_handling_support
        return self

    def set_use_alpn(self, use_alpn: bool) -> Self:
        """ALPN is not available for bridge connections; always raises.

        Raises:
            UnsupportedOperationException: For every value of *use_alpn*.
        """
        raise UnsupportedOperationException(
            "ALPN is not supported by AmqpBridgeOptions",
            code="UNSUPPORTED_OPERATION",
            context={"option": "use_alpn", "value": use_alpn},
        )
