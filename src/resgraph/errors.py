"""Exceptions raised by the contact graph and superposition core."""


class ResGraphError(Exception):
    """Base class for all resgraph errors."""


class SizeMismatchError(ResGraphError, ValueError):
    """Raised when two conformations to superpose have different sizes."""

    def __init__(self, size1: int, size2: int):
        self.size1 = size1
        self.size2 = size2
        super().__init__(
            f"Given conformations have different size: "
            f"conformation1: {size1}, conformation2: {size2}"
        )


class InvalidCutoffError(ResGraphError, ValueError):
    """Raised when a distance cutoff is not a positive finite number."""

    def __init__(self, cutoff):
        self.cutoff = cutoff
        super().__init__(f"Distance cutoff must be > 0, got {cutoff!r}")


class UnknownContactTypeError(ResGraphError, KeyError):
    """Raised when a contact type has no entry in the atom table."""

    def __init__(self, contact_type: str):
        self.contact_type = contact_type
        super().__init__(contact_type)

    def __str__(self) -> str:
        return f"Unknown contact type: {self.contact_type!r}"
