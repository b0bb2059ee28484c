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
"""Prime-multiplier hash accumulation for mutable options objects.

Options types are mutable dataclasses that still define ``__hash__`` so they
can be compared and bucketed structurally. Every type folds its fields in
declaration order through :func:`accumulate_hash`, which keeps the result
order-dependent and stable for a given field order within a process.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Any

PRIME = 31
TRUE_HASH = 1231
FALSE_HASH = 1237

_MASK = (1 << 64) - 1


def hash_value(value: Any) -> int:
    """Hash a single field value. ``None`` contributes 0."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return TRUE_HASH if value else FALSE_HASH
    if isinstance(value, (list, tuple)):
        return accumulate_hash(1, value)
    return hash(value)


def accumulate_hash(seed: int, values: Iterable[Any]) -> int:
    """Fold *values* into *seed* as ``result = 31 * result + hash(value)``."""
    result = seed
    for value in values:
        result = (PRIME * result + hash_value(value)) & _MASK
    return result


def dataclass_hash(instance: Any) -> int:
    """Hash a dataclass instance over all of its fields in declaration order.

    Assign it in the class body (``__hash__ = dataclass_hash``) so that
    ``@dataclass`` keeps it instead of clearing ``__hash__``.
    """
    return accumulate_hash(1, (getattr(instance, f.name) for f in dataclasses.fields(instance)))
