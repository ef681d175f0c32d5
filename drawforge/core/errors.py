"""Exception hierarchy for drawforge."""


class DrawforgeError(Exception):
    """Base class for all drawforge errors."""
    pass


class ValidationError(DrawforgeError):
    """Raised when drawing input cannot be turned into a shape."""
    pass


class InsufficientPointsError(ValidationError):
    """Raised when a shape has fewer points than its category requires.

    Attributes:
        category: Category of the rejected shape
        required: Minimum number of points
        actual: Number of points supplied
    """

    def __init__(self, category, required: int, actual: int):
        self.category = category
        self.required = required
        self.actual = actual
        label = 'Line string' if category.value == 'linestring' else category.label
        super().__init__(f"{label} must have at least {required} points")


class InvalidShapeError(ValidationError):
    """Raised for degenerate shapes (zero radius, zero-width rectangle)."""
    pass


class ConfigurationError(DrawforgeError):
    """Raised when quota or tolerance settings are invalid."""
    pass


class GeoJSONError(DrawforgeError):
    """Raised when GeoJSON input cannot be read as drawforge features."""
    pass


__all__ = [
    'DrawforgeError',
    'ValidationError',
    'InsufficientPointsError',
    'InvalidShapeError',
    'ConfigurationError',
    'GeoJSONError',
]
