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
"""Container exceptions: fatal errors while constructing components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pyinject.kernel.exceptions import InfrastructureException

if TYPE_CHECKING:
    from pyinject.container.component import Component

_STAGE_ACTIONS = {
    "post_construct": "post-construct",
    "phase": "resolve the phase of",
    "init": "init",
}


class ComponentInitializationException(InfrastructureException):
    """A component failed while the Injector was bringing it up.

    Raised after rollback has completed, so no component is left running.
    ``stage`` is ``"post_construct"``, ``"phase"`` or ``"init"``. ``rollback_failures``
    lists the already-initialized components whose ``di_shutdown()``
    raised while rolling back.
    """

    def __init__(
        self,
        component: Component,
        stage: str,
        reason: str,
        rollback_failures: list[ShutdownFailure] | None = None,
    ) -> None:
        self.component = component
        self.stage = stage
        self.reason = reason
        self.rollback_failures: list[ShutdownFailure] = list(rollback_failures or [])
        action = _STAGE_ACTIONS.get(stage, stage)
        message = f"Failed to {action} {component.display_name}: {reason}"
        super().__init__(
            message=message,
            code="COMPONENT_INIT_FAILED",
            context={"component": component.display_name, "phase": component.phase, "stage": stage},
        )


class InjectorAlreadyConstructedError(RuntimeError):
    """``Injector.construct()`` was called a second time.

    This is a caller bug, so it is not part of the PyInjectException tree.
    """

    def __init__(self) -> None:
        super().__init__("The Injector is already constructed. Injector.construct() can be called once!")


@dataclass(frozen=True)
class ShutdownFailure:
    """A component whose ``di_shutdown()`` raised during a shutdown drain."""

    component: Component
    error: BaseException

    def __str__(self) -> str:
        return f"{self.component.display_name}: {self.error!r}"
