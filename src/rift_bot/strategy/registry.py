"""Name-based lookup of decision engine classes."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

_ENGINES: dict[str, type] = {}


def register_engine(name: str) -> Callable[[type[T]], type[T]]:
    """Class decorator registering an engine under ``name``."""

    def _register(cls: type[T]) -> type[T]:
        key = name.lower()
        if key in _ENGINES and _ENGINES[key] is not cls:
            raise ValueError(f"Engine name already registered: {name}")
        _ENGINES[key] = cls
        return cls

    return _register


def resolve_engine_class(name: str) -> type:
    try:
        return _ENGINES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown engine {name!r}; expected one of {sorted(_ENGINES)}") from None


def create_engine(name: str, my_id: int, **kwargs: Any) -> Any:
    """Instantiate the engine registered as ``name`` for player ``my_id``."""
    return resolve_engine_class(name)(my_id, **kwargs)


def registered_engines() -> list[str]:
    return sorted(_ENGINES)
