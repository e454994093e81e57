"""Module loggers for the visiontac package."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional, Tuple

PACKAGE_LOGGER_NAMESPACE = "visiontac"


class StructuredLogger(logging.LoggerAdapter):
    """Adapter that prefixes every message with ``[component]``.

    The component is also attached to each record as ``record.component``.
    """

    def __init__(self, logger: logging.Logger, component: str) -> None:
        super().__init__(logger, {"component": component})
        self.component = component

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return f"[{self.component}] {msg}", kwargs


def get_module_logger(name: Optional[str] = None) -> StructuredLogger:
    """Return a logger under the ``visiontac`` namespace.

    ``get_module_logger("TrackLogParser")`` logs as ``visiontac.TrackLogParser``
    with the ``[TrackLogParser]`` prefix. Names already inside the namespace
    are used as is.
    """
    if not name or name == PACKAGE_LOGGER_NAMESPACE:
        return StructuredLogger(logging.getLogger(PACKAGE_LOGGER_NAMESPACE), "visiontac")
    prefix = f"{PACKAGE_LOGGER_NAMESPACE}."
    component = name[len(prefix):] if name.startswith(prefix) else name
    return StructuredLogger(logging.getLogger(prefix + component), component)


__all__ = [
    "PACKAGE_LOGGER_NAMESPACE",
    "StructuredLogger",
    "get_module_logger",
]
