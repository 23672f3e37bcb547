# kernel_runtime/resources.py
"""
Text resources shipped inside Python packages (prompt templates etc.).
"""
from __future__ import annotations

import logging
from importlib.resources import files

from .core.errors import ResourceUnavailableError

logger = logging.getLogger(__name__)


def read_resource(name: str, package: str) -> str:
    """
    Read a UTF-8 text resource bundled with `package`.

    Raises:
        ResourceUnavailableError: the package or the resource does not exist
    """
    try:
        root = files(package)
    except ModuleNotFoundError as e:
        raise ResourceUnavailableError(f"[{package}] {name} package not found", resource=name) from e

    resource = root.joinpath(name)
    if not resource.is_file():
        raise ResourceUnavailableError(f"[{package}] {name} resource not found", resource=name)

    logger.debug(f"Reading resource {package}/{name}")
    return resource.read_text(encoding="utf-8")
