"""Factory for creating text transform instances."""

from typing import Dict, Type, Optional, Any

from .base import BaseTextTransform, PlainTextTransform
from .markup_transform import MarkupTextTransform

class TransformFactory:
    """Factory class for creating text transform instances."""

    # Map of transform names to their corresponding classes
    _transforms: Dict[str, Type[BaseTextTransform]] = {
        'markup': MarkupTextTransform,
        'plain': PlainTextTransform,
    }

    @classmethod
    def register_transform(
        cls,
        name: str,
        transform_class: Type[BaseTextTransform]
    ) -> None:
        """Register a new transform.

        Args:
            name: Unique identifier for the transform
            transform_class: Transform class to register
        """
        if not issubclass(transform_class, BaseTextTransform):
            raise TypeError(
                f"Transform class must be a subclass of BaseTextTransform, "
                f"got {transform_class.__name__}"
            )
        cls._transforms[name] = transform_class

    @classmethod
    def get_available_transforms(cls) -> Dict[str, Type[BaseTextTransform]]:
        """Get a dictionary of available transform names and their classes."""
        return dict(cls._transforms)

    @classmethod
    def create_transform(
        cls,
        name: str = 'markup',
        config: Optional[Dict[str, Any]] = None
    ) -> BaseTextTransform:
        """Create a new transform instance.

        Args:
            name: Name of the transform to create
            config: Configuration for the transform

        Returns:
            An instance of the named transform

        Raises:
            ValueError: If the name is not registered
        """
        transform_class = cls._transforms.get(name)
        if not transform_class:
            raise ValueError(
                f"Unknown transform: {name}. "
                f"Available transforms: {', '.join(cls._transforms.keys())}"
            )

        return transform_class(config or {})
