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
"""Boundary with the wiring engine that builds and links component instances."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class WiredObject:
    """An instance produced by the wiring engine and the name it was registered under."""

    instance: Any = field(repr=False)
    name: str = ""


@runtime_checkable
class WiringEngine(Protocol):
    """Populates the component graph.

    ``populate()`` is called exactly once per ``Injector.construct()``. It
    returns every resulting instance, including ones the engine created
    for requirements nobody registered, and raises when the graph cannot
    be resolved.
    """

    def populate(self) -> Iterable[WiredObject | Any]: ...


class StaticWiring:
    """Wiring engine over instances that are already built and linked.

    Resolves nothing: ``populate()`` hands back what was provided, in
    order. Bare instances are treated as unnamed.
    """

    def __init__(self, *objects: WiredObject | Any) -> None:
        self._objects: list[WiredObject] = []
        self.provide(*objects)

    def provide(self, *objects: WiredObject | Any) -> None:
        for obj in objects:
            self._objects.append(obj if isinstance(obj, WiredObject) else WiredObject(obj))

    def populate(self) -> list[WiredObject]:
        return list(self._objects)

    def __len__(self) -> int:
        return len(self._objects)
