"""Output schema registry - separate module to avoid circular imports."""

from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel

S = TypeVar("S", bound=type[BaseModel])

# (domain, command) -> schema, e.g. ("link", "install") -> LinkInstallOutput
_SCHEMA_REGISTRY: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command: str) -> Callable[[S], S]:
    """Class decorator registering the output schema of ``cmd_<command>`` in ``dotlink.api.<domain>``.

    Raises:
        ValueError: If the command already has a schema
    """

    def decorator(schema_class: S) -> S:
        key = (domain, command)
        if key in _SCHEMA_REGISTRY:
            raise ValueError(f"Schema already registered for {domain}.{command}")
        _SCHEMA_REGISTRY[key] = schema_class
        return schema_class

    return decorator


def get_output_schema(domain: str, command: str) -> type[BaseModel] | None:
    return _SCHEMA_REGISTRY.get((domain, command))


def registered_commands() -> list[tuple[str, str]]:
    """All (domain, command) pairs with a schema, sorted."""
    return sorted(_SCHEMA_REGISTRY)
