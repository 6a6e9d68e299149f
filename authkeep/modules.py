"""Registration and per-instance loading of pluggable modules."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Optional, Protocol

DATA_MODULES = "modules"


class Module(Protocol):
    """A pluggable module; ``init`` wires it into a host and may raise."""

    def init(self, host: Any) -> None: ...


class ModuleRegistry:
    """Modules available for loading, by name."""

    def __init__(self) -> None:
        self._modules: dict[str, Module] = {}

    def register(self, name: str, module: Module) -> None:
        self._modules[name] = module

    def registered(self) -> list[str]:
        return list(self._modules)

    def get(self, name: str) -> Module:
        try:
            return self._modules[name]
        except KeyError:
            raise KeyError(f"could not find module: {name}") from None


_default_registry = ModuleRegistry()


def register_module(name: str, module: Module) -> None:
    """Register a module with the default registry."""
    _default_registry.register(name, module)


def registered_modules() -> list[str]:
    """Names of the modules in the default registry."""
    return _default_registry.registered()


class ModuleLoader:
    """The modules loaded for one host.

    Each load takes a shallow copy of the registered module, so several
    hosts can load the same module independently; set-up belongs in
    ``init``.
    """

    def __init__(self, registry: Optional[ModuleRegistry] = None) -> None:
        self._registry = registry if registry is not None else _default_registry
        self._loaded: dict[str, Module] = {}

    def load(self, name: str, host: Any) -> Module:
        module = copy.copy(self._registry.get(name))
        self._loaded[name] = module
        module.init(host)
        return module

    def loaded(self) -> list[str]:
        return list(self._loaded)

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def module_list(self, oauth2_providers: Iterable[str] = ()) -> dict[str, bool]:
        """Loaded module names, plus ``oauth2.<provider>`` for each provider."""
        modules = {name: True for name in self._loaded}
        for provider in oauth2_providers:
            modules[f"oauth2.{provider}"] = True
        return modules

    def annotate(
        self,
        data: Optional[dict[str, Any]] = None,
        oauth2_providers: Iterable[str] = (),
    ) -> dict[str, Any]:
        """Store the module list under ``DATA_MODULES`` in the view data."""
        if data is None:
            data = {}
        data[DATA_MODULES] = self.module_list(oauth2_providers)
        return data