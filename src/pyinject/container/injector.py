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
"""Injector: post-construct, phase-ordered init, and reverse-order shutdown."""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType
from typing import Any

import structlog

from pyinject.container.component import Component
from pyinject.container.exceptions import (
    ComponentInitializationException,
    InjectorAlreadyConstructedError,
    ShutdownFailure,
)
from pyinject.container.ordering import PhaseOrderedRegistry
from pyinject.container.types import InjectorState
from pyinject.container.wiring import WiredObject, WiringEngine
from pyinject.core.config import Config
from pyinject.kernel.exceptions import WiringException
from pyinject.logging.port import LoggingPort
from pyinject.logging.structlog_adapter import StructlogAdapter

LOGGER_NAME = "pyinject.injector"

_logger = structlog.get_logger(LOGGER_NAME)


def _init_error(result: Any) -> Exception | None:
    """Translate a ``di_init()`` return value into an error, or None on success."""
    if isinstance(result, Exception):
        return result
    if result is False:
        return RuntimeError("di_init() reported failure")
    return None


class Injector:
    """Drives the lifecycle of everything a wiring engine produces.

    Workflow:

    1. Build a wiring engine holding the components (``StaticWiring`` or
       any ``WiringEngine``) and hand it to ``Injector(wiring)``.
    2. Call ``construct()`` once. Every instance the engine returns is
       scanned: post-constructors are notified, then life-cyclers are
       initialized in ascending ``di_phase()`` order.
    3. Call ``shutdown()`` just before exiting. Life-cyclers are shut down
       in the reverse of their initialization order.

    If any ``di_init()`` fails, the components initialized before it are
    shut down in reverse order and ``construct()`` raises
    ``ComponentInitializationException``. Nothing is left running.

    Not thread-safe: ``construct()`` and ``shutdown()`` must not run
    concurrently on the same instance.

    Events go to the ``pyinject.injector`` structlog logger unless a
    ``logger`` or a ``logging_port`` is given; ``from_config()`` builds one
    with a ``StructlogAdapter`` configured from a ``Config``.
    """

    def __init__(
        self,
        wiring: WiringEngine,
        logger: Any = None,
        *,
        logging_port: LoggingPort | None = None,
    ) -> None:
        self._wiring = wiring
        if logger is None and logging_port is not None:
            logger = logging_port.get_logger(LOGGER_NAME)
        self._logger = logger if logger is not None else _logger
        self._registry: PhaseOrderedRegistry | None = None
        self._state = InjectorState.UNCONSTRUCTED

    @classmethod
    def from_config(cls, wiring: WiringEngine, config: Config) -> Injector:
        """Build an Injector whose logging is set up from ``pyinject.logging.*``."""
        adapter = StructlogAdapter()
        adapter.configure(config)
        return cls(wiring, logging_port=adapter)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> InjectorState:
        return self._state

    @property
    def constructed(self) -> bool:
        """True once ``construct()`` has been called, whatever its outcome."""
        return self._state is not InjectorState.UNCONSTRUCTED

    @property
    def components(self) -> list[Component]:
        """Currently initialized life-cyclers, in initialization order."""
        if self._registry is None:
            return []
        return list(self._registry)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def construct(self) -> None:
        """Wire, notify post-constructors, and initialize life-cyclers.

        Raises:
            InjectorAlreadyConstructedError: ``construct()`` was already called.
            WiringException: the wiring engine failed; nothing was initialized.
            ComponentInitializationException: a post-construct, ``di_phase()``
                or init hook failed; everything initialized before it has
                been shut down.
        """
        self._logger.info("initializing")
        if self._state is not InjectorState.UNCONSTRUCTED:
            raise InjectorAlreadyConstructedError()
        self._state = InjectorState.CONSTRUCTING

        wired = self._populate()
        self._registry = PhaseOrderedRegistry()
        try:
            self._after_population(wired)
        except BaseException:
            self._registry = None
            self._state = InjectorState.SHUT_DOWN
            raise

        self._init_life_cyclers()
        self._state = InjectorState.CONSTRUCTED

    def shutdown(self) -> list[ShutdownFailure]:
        """Shut down every initialized life-cycler in reverse order.

        Best-effort: a raising ``di_shutdown()`` is logged and collected,
        and the remaining components are still shut down. Safe to call
        more than once and before ``construct()``.
        A ``BaseException`` such as ``SystemExit`` raised by a hook does not
        stop the drain; the first one is re-raised after the last component.

        Returns:
            The components whose ``di_shutdown()`` raised, in the order
            they were shut down.
        """
        self._logger.info("shutdown")
        if self._state is not InjectorState.CONSTRUCTED:
            self._logger.info("not_initialized", state=self._state.name)
            return []
        return self._shutdown_life_cyclers()

    def __enter__(self) -> Injector:
        self.construct()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _populate(self) -> list[Any]:
        """Run the wiring engine exactly once."""
        try:
            return list(self._wiring.populate())
        except Exception as exc:
            self._state = InjectorState.SHUT_DOWN
            self._logger.error("wiring_failed", error=str(exc))
            if isinstance(exc, WiringException):
                raise
            raise WiringException(str(exc) or type(exc).__name__) from exc

    def _after_population(self, wired: Iterable[Any]) -> None:
        """Build one record per distinct instance, notify post-constructors, collect life-cyclers."""
        assert self._registry is not None
        # ``wired`` keeps every instance alive, so ids stay unique for the scan.
        seen: set[int] = set()
        self._logger.debug("scanning_wired_objects")
        for obj in wired:
            if isinstance(obj, WiredObject):
                instance, name = obj.instance, obj.name
            else:
                instance, name = obj, ""
            if instance is None or id(instance) in seen:
                continue
            seen.add(id(instance))

            component = Component(instance, name)
            self._logger.debug("registering_component", component=str(component))

            if component.is_post_constructor:
                self._logger.debug("post_construct", component=str(component))
                try:
                    component.post_construct()
                except Exception as exc:
                    self._logger.error("component_post_construct_failed", component=str(component), error=repr(exc))
                    raise ComponentInitializationException(component, "post_construct", str(exc) or repr(exc)) from exc

            if component.is_life_cycler:
                try:
                    component.resolve_phase()
                except Exception as exc:
                    self._logger.error("component_phase_failed", component=str(component), error=repr(exc))
                    raise ComponentInitializationException(component, "phase", str(exc) or repr(exc)) from exc
                self._logger.debug("found_life_cycler", component=str(component))
                self._registry.insert(component)

    def _init_life_cyclers(self) -> None:
        """Drain the pending registry in phase order, refilling it with each success."""
        assert self._registry is not None
        pending = self._registry.snapshot_and_clear()
        self._logger.info("initializing_components", count=len(pending))
        for component in pending:
            self._logger.info("initializing_component", component=str(component))
            try:
                error = _init_error(component.init())
            except Exception as exc:
                error = exc
            except BaseException:
                self._logger.error("rolling_back", initialized=len(self._registry))
                self._shutdown_life_cyclers()
                raise

            if error is not None:
                self._logger.error("component_init_failed", component=str(component), error=repr(error))
                self._logger.error("rolling_back", initialized=len(self._registry))
                failures = self._shutdown_life_cyclers()
                raise ComponentInitializationException(
                    component,
                    "init",
                    str(error) or repr(error),
                    rollback_failures=failures,
                ) from error

            self._registry.insert(component)

    def _shutdown_life_cyclers(self) -> list[ShutdownFailure]:
        """Snapshot-and-clear the live registry, then shut it down back to front."""
        assert self._registry is not None
        self._state = InjectorState.SHUTTING_DOWN
        live = self._registry.snapshot_and_clear()
        self._registry = None
        self._logger.info("shutting_down_components", count=len(live))

        failures: list[ShutdownFailure] = []
        interrupt: BaseException | None = None
        try:
            for component in reversed(live):
                self._logger.info("shutting_down_component", component=str(component))
                try:
                    component.shutdown()
                except BaseException as exc:
                    self._logger.exception("component_shutdown_failed", component=str(component))
                    failures.append(ShutdownFailure(component, exc))
                    if interrupt is None and not isinstance(exc, Exception):
                        interrupt = exc
        finally:
            self._state = InjectorState.SHUT_DOWN

        # SystemExit and friends are re-raised once every component has been shut down.
        if interrupt is not None:
            raise interrupt
        return failures
