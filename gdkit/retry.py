"""Retry a callable until it succeeds or asks to stop."""

MAX_RETRIES = 10


class MaxRetriesReachedError(Exception):
    """Raised when a callable keeps failing beyond the retry limit."""

    def __init__(self, message="exceeded retry limit"):
        super().__init__(message)


def do(fn, max_retries=MAX_RETRIES):
    """Call ``fn(attempt)`` until it returns no error or no retry request.

    ``fn`` returns a ``(retry, error)`` pair, where ``error`` is an exception
    instance or ``None``. The final error, if any, is raised. When more than
    ``max_retries`` attempts would be needed, :class:`MaxRetriesReachedError`
    is raised instead.
    """
    attempt = 1
    while True:
        retry, error = fn(attempt)
        if not retry or error is None:
            break
        attempt += 1
        if attempt > max_retries:
            raise MaxRetriesReachedError() from error
    if error is not None:
        raise error


def is_max_retries(err):
    """Return True if ``err`` or one of its causes is a retry-limit error."""
    seen = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, MaxRetriesReachedError):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False