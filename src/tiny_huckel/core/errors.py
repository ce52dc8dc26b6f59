"""
Error taxonomy for Hückel calculations.

Every error carries a short ``kind`` tag so callers can tell structural
problems (fixable by editing the molecule) apart from numerical ones.

    HuckelError
    ├── InvalidIndexError        bad bond reference (programming error)
    ├── StructuralError          rejected before any matrix work
    │   ├── EmptyStructureError
    │   ├── NoBondsError
    │   └── DisconnectedError
    └── DecompositionError       eigensolver failure
"""


class HuckelError(Exception):
    """Base class for all tiny-huckel errors."""
    kind = "HuckelError"


class InvalidIndexError(HuckelError, ValueError):
    """Bond references an atom outside ``0..N-1`` or joins an atom to itself."""
    kind = "InvalidIndex"


class StructuralError(HuckelError):
    """The structure cannot be meaningfully calculated."""
    kind = "StructuralError"
    default_message = "The molecular structure is invalid."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)


class EmptyStructureError(StructuralError):
    kind = "EmptyStructure"
    default_message = "Please add atoms to the structure."


class NoBondsError(StructuralError):
    kind = "NoBonds"
    default_message = "Please add bonds between atoms."


class DisconnectedError(StructuralError):
    kind = "Disconnected"
    default_message = (
        "The molecular structure is disconnected. "
        "Please ensure all atoms are connected."
    )

    def __init__(self, n_fragments: int = 0) -> None:
        message = self.default_message
        if n_fragments > 1:
            message = f"{message} ({n_fragments} separate fragments found)"
        super().__init__(message)
        self.n_fragments = n_fragments


class DecompositionError(HuckelError):
    """The eigensolver failed or produced an unusable result."""
    kind = "DecompositionFailed"
    default_message = (
        "The calculation did not converge. "
        "Try a different or simpler structure."
    )

    def __init__(self, detail: str = "") -> None:
        super().__init__(self.default_message)
        self.detail = detail
