"""
Error kinds surfaced by the store and the API layer.
"""


class StoreError(Exception):
    """A database connection or statement failed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(Exception):
    """A lookup, update or delete matched zero rows."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)
        self.message = message
