"""Domain error taxonomy. Routes translate these into HTTP responses."""


class NoDataError(LookupError):
    """The destination catalog is empty."""


class NotFoundError(LookupError):
    """A destination or user id does not resolve."""


class InvalidInputError(ValueError):
    """A required field is missing or malformed."""


class AggregationError(RuntimeError):
    """Score/stat update failed after the verdict was determined.

    Carries the verdict and the disclosure fact so the caller can still
    report them alongside the failure.
    """

    def __init__(self, message: str, is_correct: bool, fact: dict | None):
        super().__init__(message)
        self.is_correct = is_correct
        self.fact = fact
