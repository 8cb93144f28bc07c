"""
Exceptions and warnings raised by the mwm package.

Every error is a ``ValueError`` subclass, so callers that only catch
``ValueError`` keep working. The optional ``level`` and ``index`` attributes
say where a precondition failed (tree level or parameter index, and sample
position).
"""


class MWMError(ValueError):
    """
    Base class for mwm input errors.

    Parameters
    ----------
    message : str
        Description of the failed precondition.
    level : int, optional
        Tree level (or scale-parameter index) the failure refers to.
    index : int, optional
        Position of the offending sample or node.
    """

    def __init__(self, message, level=None, index=None):
        self.message = message
        self.level = level
        self.index = index
        super().__init__(message)

    def __str__(self):
        tags = []
        if self.level is not None:
            tags.append(f"level {self.level}")
        if self.index is not None:
            tags.append(f"index {self.index}")
        if tags:
            return f"{self.message} ({', '.join(tags)})"
        return self.message


class InvalidLength(MWMError):
    """Sequence length is zero, not a power of two, or does not match the model."""


class InvalidSequence(MWMError):
    """Sequence contains negative or non-finite entries."""


class InvalidParameters(MWMError):
    """Negative root mean, out-of-domain shape values, or bad estimator settings."""


class DegenerateScaleWarning(UserWarning):
    """A scale carried no detail energy and its shape was set to the maximum."""
