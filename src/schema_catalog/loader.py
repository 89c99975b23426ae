"""
Resolves import paths such as ``shop.models:Order`` or ``shop.models.Order`` to types.
"""
import importlib
from typing import Any, Iterable

import structlog

from .exceptions import TypeResolutionError

logger = structlog.get_logger(__name__)


def import_type(import_path: str) -> type:
    if ":" in import_path:
        module_name, _, attr_path = import_path.partition(":")
    else:
        module_name, _, attr_path = import_path.rpartition(".")
    if not module_name or not attr_path:
        raise TypeResolutionError(import_path, "expected 'module:Type' or 'module.Type'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise TypeResolutionError(import_path, f"module '{module_name}' cannot be imported ({e})") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise TypeResolutionError(import_path, f"'{attr}' not found") from e

    if not isinstance(target, type):
        raise TypeResolutionError(import_path, f"resolved to {type(target).__name__}, not a type")
    logger.debug("Resolved root type.", import_path=import_path)
    return target


def import_types(import_paths: Iterable[str]) -> list[type]:
    return [import_type(path) for path in import_paths]
