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
"""Tests for the pyinject exception hierarchy."""

from pyinject.container.component import Component
from pyinject.container.exceptions import (
    ComponentInitializationException,
    InjectorAlreadyConstructedError,
    ShutdownFailure,
)
from pyinject.kernel.exceptions import InfrastructureException, PyInjectException, WiringException


class Database:
    def di_phase(self):
        return 2

    def di_init(self):
        return None

    def di_shutdown(self):
        pass


class TestPyInjectException:
    def test_basic_creation(self):
        exc = PyInjectException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = PyInjectException("bad", code="X_001", context={"component": "db"})
        assert exc.code == "X_001"
        assert exc.context["component"] == "db"

    def test_context_not_shared(self):
        exc = PyInjectException("a")
        exc.context["key"] = "value"
        assert PyInjectException("b").context == {}


class TestWiringException:
    def test_message_and_code(self):
        exc = WiringException("cycle between a and b")
        assert str(exc) == "Failed to wire components: cycle between a and b"
        assert exc.reason == "cycle between a and b"
        assert exc.code == "WIRING_FAILED"

    def test_hierarchy(self):
        assert issubclass(WiringException, InfrastructureException)
        assert issubclass(InfrastructureException, PyInjectException)


class TestComponentInitializationException:
    def test_carries_component_and_stage(self):
        component = Component(Database(), "db")
        component.resolve_phase()
        exc = ComponentInitializationException(component, "init", "connection refused")

        assert exc.component is component
        assert exc.stage == "init"
        assert exc.reason == "connection refused"
        assert exc.code == "COMPONENT_INIT_FAILED"
        assert exc.context == {"component": "db", "phase": 2, "stage": "init"}
        assert str(exc) == "Failed to init db: connection refused"
        assert exc.rollback_failures == []

    def test_post_construct_message(self):
        exc = ComponentInitializationException(Component(Database()), "post_construct", "boom")
        assert str(exc) == "Failed to post-construct Database: boom"

    def test_phase_message(self):
        exc = ComponentInitializationException(Component(Database(), "db"), "phase", "bad phase")
        assert str(exc) == "Failed to resolve the phase of db: bad phase"
        assert exc.context["phase"] is None

    def test_rollback_failures(self):
        failure = ShutdownFailure(Component(Database(), "db"), OSError("stuck"))
        exc = ComponentInitializationException(Component(Database()), "init", "x", rollback_failures=[failure])
        assert exc.rollback_failures == [failure]

    def test_is_infrastructure(self):
        assert issubclass(ComponentInitializationException, InfrastructureException)


class TestInjectorAlreadyConstructedError:
    def test_message(self):
        assert "can be called once" in str(InjectorAlreadyConstructedError())

    def test_outside_recoverable_tree(self):
        assert issubclass(InjectorAlreadyConstructedError, RuntimeError)
        assert not issubclass(InjectorAlreadyConstructedError, PyInjectException)


class TestShutdownFailure:
    def test_str(self):
        failure = ShutdownFailure(Component(Database(), "db"), OSError("stuck"))
        assert str(failure) == "db: OSError('stuck')"
