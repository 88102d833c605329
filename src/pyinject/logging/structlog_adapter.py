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
"""StructlogAdapter: structlog on top of stdlib logging, driven by Config.

The Injector asks its logging port for a ``pyinject.injector`` logger, so
the level of the lifecycle events can be tuned from configuration::

    pyinject:
      logging:
        format: json
        level:
          root: INFO
          pyinject.injector: WARNING
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from pyinject.core.config import Config
from pyinject.logging.properties import LoggingProperties


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _processors(fmt: str) -> list[structlog.types.Processor]:
    chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if fmt == "json":
        # Shutdown failures are logged with a traceback; JSON needs it as a string.
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        chain.append(structlog.dev.ConsoleRenderer())
    return chain


class StructlogAdapter:
    """LoggingPort implementation used by ``Injector.from_config()``."""

    def __init__(self) -> None:
        self._properties = LoggingProperties()
        self._levels: dict[str, str] = {"root": "INFO"}

    @property
    def properties(self) -> LoggingProperties:
        return self._properties

    @property
    def levels(self) -> dict[str, str]:
        """Configured levels by logger name; ``root`` is the root logger."""
        return dict(self._levels)

    def configure(self, config: Config) -> None:
        self._properties = config.bind(LoggingProperties)
        self._properties.format = self._properties.format.lower()
        self._levels = {"root": "INFO"}
        self._levels.update({k: str(v).upper() for k, v in config.get_section("pyinject.logging.level").items()})

        structlog.configure(
            processors=_processors(self._properties.format),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=_level(self._levels["root"]), force=True)
        for name, level in self._levels.items():
            if name != "root":
                self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set a stdlib logger's level; unknown level names fall back to INFO."""
        logging.getLogger(name).setLevel(_level(level))
