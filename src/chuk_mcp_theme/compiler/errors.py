"""
Theme compilation errors.

Every error is fatal to the compile call that raised it; no partial theme
is returned.
"""


class ThemeError(ValueError):
    """Base class for theme compilation errors."""


class MissingInputError(ThemeError):
    """No theme values were supplied."""


class DanglingReferenceError(ThemeError):
    """A group member, component style or variant style references a missing token."""

    def __init__(self, message: str, token_id: str):
        super().__init__(message)
        self.token_id = token_id


class UnknownStylePropertyError(ThemeError):
    """A component or variant style property is not registered in the schema."""

    def __init__(self, message: str, style_property: str):
        super().__init__(message)
        self.style_property = style_property


class ShapeConflictError(ThemeError):
    """A named value was assigned to a list bucket, or an unnamed one to a named bucket."""

    def __init__(self, message: str, bucket: str):
        super().__init__(message)
        self.bucket = bucket
