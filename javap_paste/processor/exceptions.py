class ProcessingError(Exception):
    """Raised when the compile/analyze toolchain itself fails.

    Compiler errors in user code are not processing errors; they end up in
    the compiler log.
    """

    status_code = 500
