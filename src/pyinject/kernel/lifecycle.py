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
"""Structural capability protocols for components managed by the Injector.

A component opts into lifecycle management by shape alone: no base class,
no registration flag. The Injector asks each wired instance whether it
looks like a ``LifeCycler`` and/or a ``PostConstructor`` and drives it
accordingly.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LifeCycler(Protocol):
    """Component with a phased lifecycle.

    All life-cyclers are ordered by their ``di_phase()`` value once wiring
    is complete. Lower phases are initialized first and shut down last.
    """

    def di_phase(self) -> int:
        """Return the ordering key for this component."""
        ...

    def di_init(self) -> None | bool | Exception:
        """Acquire resources and start work.

        Return ``None`` (or ``True``) on success. Returning ``False`` or an
        exception instance reports a failure; raising is treated the same
        way. Either one rolls back every component initialized before
        this one.
        """
        ...

    def di_shutdown(self) -> None:
        """Release resources.

        Expected not to fail. If it raises, the error is logged and the
        remaining components are still shut down.
        """
        ...


@runtime_checkable
class PostConstructor(Protocol):
    """Component notified once, right after wiring and before any ``di_init()``."""

    def di_post_construct(self) -> None: ...
