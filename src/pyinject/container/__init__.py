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
"""pyinject container: phase-ordered lifecycle for wired components."""

from pyinject.container.capability import Capabilities, detect, is_life_cycler, is_post_constructor
from pyinject.container.component import Component
from pyinject.container.exceptions import (
    ComponentInitializationException,
    InjectorAlreadyConstructedError,
    ShutdownFailure,
)
from pyinject.container.injector import Injector
from pyinject.container.ordering import (
    DEFAULT_PHASE,
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    PhaseOrderedRegistry,
    get_phase,
    phase,
)
from pyinject.container.types import InjectorState
from pyinject.container.wiring import StaticWiring, WiredObject, WiringEngine

__all__ = [
    "Capabilities",
    "Component",
    "ComponentInitializationException",
    "DEFAULT_PHASE",
    "HIGHEST_PRECEDENCE",
    "Injector",
    "InjectorAlreadyConstructedError",
    "InjectorState",
    "LOWEST_PRECEDENCE",
    "PhaseOrderedRegistry",
    "ShutdownFailure",
    "StaticWiring",
    "WiredObject",
    "WiringEngine",
    "detect",
    "get_phase",
    "is_life_cycler",
    "is_post_constructor",
    "phase",
]
