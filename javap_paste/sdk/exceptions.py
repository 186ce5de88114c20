class UnknownSdkError(Exception):
    """Raised when a compilerName does not name a known SDK."""

    status_code = 400
