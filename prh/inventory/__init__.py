"""Project inventory: where project ids and configurations come from."""

from .model import ProjectConfig, TargetSpec
from .provider import InventoryError, InventoryProvider, NxInventory, StaticInventory

__all__ = [
    "InventoryError",
    "InventoryProvider",
    "NxInventory",
    "ProjectConfig",
    "StaticInventory",
    "TargetSpec",
]
