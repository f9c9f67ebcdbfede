"""Errors raised while serializing RON."""


class SerializeError(Exception):
    """
    A custom message emitted by a value being serialized.

    This is the only failure a serialization run reports. It aborts the
    whole run; the partially built output is discarded.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def custom(cls, msg: object) -> "SerializeError":
        """Build an error from any object's string form."""
        return cls(str(msg))

    def __str__(self) -> str:
        return f"Custom message: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerializeError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)
