# planar/utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for the geometric value types.

    Instances are frozen after creation. A modified value is obtained with
    with_changes(), which runs the full validation of the concrete class again,
    so a copy can never violate an invariant the original had to satisfy.
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new, validated instance with the given fields replaced.

        Args:
            **changes: Field values to replace

        Returns:
            New instance of the same class

        Raises:
            ValueError: If a field name is unknown or the new values fail validation
        """
        current_data = self.model_dump()

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            # Nested models are dumped to dicts so they validate the same way
            if isinstance(value, BaseModel):
                value = value.model_dump()
            current_data[key] = value

        return cast(T, self.__class__.model_validate(current_data))
