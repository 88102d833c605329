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
"""Capability detection for wired component instances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pyinject.kernel.lifecycle import LifeCycler, PostConstructor

_LIFE_CYCLER_METHODS = ("di_phase", "di_init", "di_shutdown")
_POST_CONSTRUCTOR_METHODS = ("di_post_construct",)


@dataclass(frozen=True)
class Capabilities:
    """What the Injector may do with a component."""

    life_cycler: bool = False
    post_constructor: bool = False


def _all_callable(instance: Any, names: tuple[str, ...]) -> bool:
    return all(callable(getattr(instance, name, None)) for name in names)


def is_life_cycler(instance: Any) -> bool:
    """Check whether *instance* exposes di_phase/di_init/di_shutdown."""
    if instance is None:
        return False
    return isinstance(instance, LifeCycler) and _all_callable(instance, _LIFE_CYCLER_METHODS)


def is_post_constructor(instance: Any) -> bool:
    """Check whether *instance* exposes di_post_construct."""
    if instance is None:
        return False
    return isinstance(instance, PostConstructor) and _all_callable(
        instance, _POST_CONSTRUCTOR_METHODS
    )


def detect(instance: Any) -> Capabilities:
    """Answer both capability questions for *instance* in one pass."""
    return Capabilities(
        life_cycler=is_life_cycler(instance),
        post_constructor=is_post_constructor(instance),
    )
