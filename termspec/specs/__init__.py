from ..config import Config
from .builtin import BUILTIN_SPECS
from .registry import SpecRegistry


def default_registry(load_user_specs: bool = True) -> SpecRegistry:
    registry = SpecRegistry(BUILTIN_SPECS)
    if load_user_specs:
        for directory in Config.spec_dirs():
            registry.load_directory(directory)
    return registry


__all__ = ["BUILTIN_SPECS", "SpecRegistry", "default_registry"]
