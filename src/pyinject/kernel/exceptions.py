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
"""Exception hierarchy for pyinject.

All recoverable framework errors inherit from PyInjectException, so a
caller can catch the base class to handle any lifecycle failure, or a
specific subclass for targeted handling.

Categories:
- InfrastructureException: wiring and component initialization failures
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class PyInjectException(Exception):
    """Base exception for all pyinject errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "WIRING_FAILED").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PyInjectException):
    """Failures while bringing components up: wiring, post-construct, init."""


class WiringException(InfrastructureException):
    """The wiring engine could not produce the component graph."""

    def __init__(self, reason: str, context: dict | None = None) -> None:
        self.reason = reason
        super().__init__(
            message=f"Failed to wire components: {reason}",
            code="WIRING_FAILED",
            context=context,
        )
