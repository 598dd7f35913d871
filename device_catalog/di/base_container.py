# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal dependency injection container.

    Keys are usually classes (interfaces or use cases) but any hashable works.
    Singletons are returned as registered; factories build a new instance on
    every ``get``.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance for ``key``"""
        self._factories.pop(key, None)
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a factory called on each lookup of ``key``"""
        self._singletons.pop(key, None)
        self._factories[key] = factory

    def get(self, key: Any) -> Any:
        """
        Resolve a registration

        Raises:
            ValueError: If nothing is registered for ``key``
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", repr(key))
        raise ValueError(f"No registration found for {name}")
