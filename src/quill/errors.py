"""Exception classes for Quill.

Provides standardized exceptions for error handling throughout Quill.
"""

from __future__ import annotations


class QuillError(Exception):
    """Base exception for all Quill errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidInputError(QuillError, TypeError):
    """Error when a value cannot be used as a text fragment.

    Raised at coercion time by the constructor and by every method that
    accepts text inputs. Only ``str``, ``int``, ``float`` and ``Text``
    values are accepted; ``bool`` and ``None`` are rejected explicitly.
    """

    def __init__(self, value: object, position: int | None = None) -> None:
        """Initialize invalid input error.

        Args:
            value: The rejected value
            position: Index of the value in the call's inputs (optional)
        """
        self.value = value
        self.position = position

        location = f" (argument {position})" if position is not None else ""
        super().__init__(
            f"Cannot use {type(value).__name__} as text input{location}: "
            "expected str, int, float or Text"
        )
