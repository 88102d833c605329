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
"""Component record: one wired instance under lifecycle management."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any

from pyinject.container.capability import Capabilities, detect


@dataclass(eq=False)
class Component:
    """A wired instance plus the capability data the Injector needs.

    Capabilities are detected when the record is built. The phase is read
    once, by :meth:`resolve_phase`, after post-construct notification, and
    kept as the registry's sort key so it cannot move underneath it.
    Records compare by identity, like the instances they wrap.
    """

    instance: Any = field(repr=False)
    name: str = ""
    capabilities: Capabilities = field(init=False, repr=False)
    phase: int | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.capabilities = detect(self.instance)

    def resolve_phase(self) -> int:
        """Read ``di_phase()`` and cache it. Non-integer phases raise TypeError."""
        self.phase = operator.index(self.instance.di_phase())
        return self.phase

    @property
    def is_life_cycler(self) -> bool:
        return self.capabilities.life_cycler

    @property
    def is_post_constructor(self) -> bool:
        return self.capabilities.post_constructor

    @property
    def display_name(self) -> str:
        """Registered name, or the instance's type name when unnamed."""
        return self.name or type(self.instance).__qualname__

    def post_construct(self) -> None:
        self.instance.di_post_construct()

    def init(self) -> None | bool | Exception:
        return self.instance.di_init()

    def shutdown(self) -> None:
        self.instance.di_shutdown()

    def __str__(self) -> str:
        if self.is_life_cycler:
            lifecycle = f"yes, phase: {self.phase}"
        else:
            lifecycle = "no"
        return f"Component(name={self.name!r}, life_cycler={lifecycle}, instance={self.instance!r})"
