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
"""Phase ordering: @phase decorator, precedence constants, and the registry."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterator
from typing import TypeVar

from pyinject.container.component import Component

T = TypeVar("T", bound=type)

HIGHEST_PRECEDENCE: int = -(2**31)
LOWEST_PRECEDENCE: int = 2**31 - 1
DEFAULT_PHASE: int = 0


def phase(value: int) -> Callable[[T], T]:
    """Set the lifecycle phase for a component class.

    Lower value = initialized earlier, shut down later. Installs a
    ``di_phase()`` method returning *value* unless the class already
    defines its own.
    """

    def decorator(cls: T) -> T:
        cls.__pyinject_phase__ = value  # type: ignore[attr-defined]
        if "di_phase" not in vars(cls):

            def di_phase(self: object) -> int:
                return get_phase(type(self))

            cls.di_phase = di_phase  # type: ignore[attr-defined]
        return cls

    return decorator


def get_phase(cls: type) -> int:
    """Get the declared @phase value for a class, defaulting to 0."""
    return getattr(cls, "__pyinject_phase__", DEFAULT_PHASE)


class PhaseOrderedRegistry:
    """Life-cycler records kept sorted by ascending phase.

    Equal phases keep insertion order. Records only leave the registry
    all at once, through :meth:`snapshot_and_clear`.
    """

    __slots__ = ("_components", "_phases")

    def __init__(self) -> None:
        self._components: list[Component] = []
        self._phases: list[int] = []

    def insert(self, component: Component) -> None:
        """Insert *component* after every record with an equal or lower phase."""
        if not component.is_life_cycler:
            raise ValueError(f"{component} is not a life-cycler")
        if component.phase is None:
            raise ValueError(f"{component} has no resolved phase")
        idx = bisect.bisect_right(self._phases, component.phase)
        self._phases.insert(idx, component.phase)
        self._components.insert(idx, component)

    def snapshot_and_clear(self) -> list[Component]:
        """Return the ordered records and leave the registry empty."""
        snapshot = self._components
        self._components = []
        self._phases = []
        return snapshot

    def is_empty(self) -> bool:
        return not self._components

    def size(self) -> int:
        return len(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._components))

    def __reversed__(self) -> Iterator[Component]:
        return reversed(list(self._components))

    def __repr__(self) -> str:
        return f"PhaseOrderedRegistry(phases={self._phases!r})"
