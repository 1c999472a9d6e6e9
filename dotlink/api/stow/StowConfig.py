"""Package linker configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..platform.PlatformTag import PlatformTag
from ._stow._Data import _Data as _StowData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "stow": _StowData,
}


class StowConfig(BaseModel):
    """Package linker configuration with backend-specific data."""

    type: str = Field(..., description="Package linker backend type")
    platforms: list[PlatformTag] = Field(..., description="Platforms where packages are delegated to the linker")
    packages: list[str] = Field(..., description="Package directory names under the dotfiles directory")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"stow config must be a dict, got {type(values).__name__}")
        backend_type = values.get("type")
        if not backend_type:
            raise ValueError("stow.type is required")
        data_class = _BACKEND_REGISTRY.get(backend_type)
        if not data_class:
            raise ValueError(f"Unknown stow type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            raise ValueError("stow.data is required")
        values = dict(values)
        values["data"] = data if isinstance(data, data_class) else data_class(**data)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        # Explicitly serialize the data field since it's typed as BaseModel
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
