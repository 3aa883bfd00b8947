from typing import Any


class ResolutionError(Exception):
    """Exception raised when a value cannot be resolved to a concrete subclass.
    NOTE: These represent malformed or unexpected input data, so messages should name the parent class and the offending discriminator value. """
    
    def __init__(self, message: str, *, parent: type | None = None, discriminator_value: Any = None) -> None:
        self.message = message
        self.parent = parent
        self.discriminator_value = discriminator_value
        super().__init__(self.message)
