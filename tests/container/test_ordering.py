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
"""Tests for @phase, precedence constants, and PhaseOrderedRegistry."""

import pytest

from pyinject.container.component import Component
from pyinject.container.ordering import (
    DEFAULT_PHASE,
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    PhaseOrderedRegistry,
    get_phase,
    phase,
)


class Phased:
    def __init__(self, value: int) -> None:
        self.value = value

    def di_phase(self):
        return self.value

    def di_init(self):
        return None

    def di_shutdown(self):
        pass


def _component(value: int) -> Component:
    component = Component(Phased(value))
    component.resolve_phase()
    return component


class TestPhaseDecorator:
    def test_sets_phase_attribute(self):
        @phase(5)
        class MyService:
            pass

        assert MyService.__pyinject_phase__ == 5
        assert get_phase(MyService) == 5

    def test_installs_di_phase(self):
        @phase(-10)
        class EarlyService:
            pass

        assert EarlyService().di_phase() == -10

    def test_subclass_inherits_declared_phase(self):
        @phase(7)
        class Base:
            pass

        class Child(Base):
            pass

        assert get_phase(Child) == 7
        assert Child().di_phase() == 7

    def test_keeps_existing_di_phase(self):
        @phase(1)
        class Custom:
            def di_phase(self):
                return 7

        assert Custom().di_phase() == 7

    def test_preserves_class(self):
        @phase(1)
        class MyService:
            """My doc."""

        assert MyService.__name__ == "MyService"
        assert MyService.__doc__ == "My doc."

    def test_default_phase(self):
        class Undecorated:
            pass

        assert get_phase(Undecorated) == DEFAULT_PHASE == 0

    def test_precedence_bounds(self):
        assert HIGHEST_PRECEDENCE < DEFAULT_PHASE < LOWEST_PRECEDENCE


class TestPhaseOrderedRegistry:
    def test_starts_empty(self):
        registry = PhaseOrderedRegistry()
        assert registry.is_empty()
        assert registry.size() == 0
        assert len(registry) == 0

    def test_insert_keeps_ascending_phase(self):
        registry = PhaseOrderedRegistry()
        for value in (3, -1, 7, 0, 2):
            registry.insert(_component(value))

        assert [c.phase for c in registry] == [-1, 0, 2, 3, 7]
        assert [c.phase for c in reversed(registry)] == [7, 3, 2, 0, -1]
        assert registry.size() == 5

    def test_equal_phases_keep_insertion_order(self):
        registry = PhaseOrderedRegistry()
        first, second, third = _component(1), _component(1), _component(1)
        low = _component(0)
        for component in (first, second, low, third):
            registry.insert(component)

        assert list(registry) == [low, first, second, third]

    def test_snapshot_and_clear(self):
        registry = PhaseOrderedRegistry()
        a, b = _component(2), _component(1)
        registry.insert(a)
        registry.insert(b)

        snapshot = registry.snapshot_and_clear()

        assert snapshot == [b, a]
        assert registry.is_empty()
        registry.insert(_component(9))
        assert snapshot == [b, a]

    def test_iteration_is_over_a_copy(self):
        registry = PhaseOrderedRegistry()
        registry.insert(_component(1))
        seen = []
        for component in registry:
            seen.append(component)
            registry.insert(_component(0))

        assert len(seen) == 1
        assert registry.size() == 2

    def test_rejects_non_life_cycler(self):
        with pytest.raises(ValueError):
            PhaseOrderedRegistry().insert(Component(object()))

    def test_rejects_unresolved_phase(self):
        with pytest.raises(ValueError):
            PhaseOrderedRegistry().insert(Component(Phased(3)))

    def test_extreme_phases(self):
        registry = PhaseOrderedRegistry()
        registry.insert(_component(LOWEST_PRECEDENCE))
        registry.insert(_component(HIGHEST_PRECEDENCE))
        registry.insert(_component(0))

        assert [c.phase for c in registry] == [HIGHEST_PRECEDENCE, 0, LOWEST_PRECEDENCE]
