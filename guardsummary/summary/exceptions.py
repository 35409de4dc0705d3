class SinkWriteError(RuntimeError):
    """Raised when the output sink rejects a write while a report is rendered."""

    pass


class ResultsValidationError(ValueError):
    """Raised when a results document fails validation."""

    pass
