from logging import getLogger

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_none,
)

from ..models.errors import HttpCallError
from .constants import LOGGER_NAME


def is_transient_error(exception: BaseException) -> bool:
    """Only transport failures and non-200 answers are worth another attempt."""
    return isinstance(exception, HttpCallError) and exception.is_transient


def _log_retry(retry_state: RetryCallState) -> None:
    outcome = retry_state.outcome
    exception = outcome.exception() if outcome is not None else None
    getLogger(LOGGER_NAME).warning(
        f"Transient failure on attempt {retry_state.attempt_number}, "
        f"retrying immediately: {exception}"
    )


def transient_retrying(retries: int) -> Retrying:
    """Build a retry controller allowing ``retries`` extra attempts.

    Attempts are immediate. When every attempt fails the last error is raised
    as is.

    Args:
        retries: Number of retries after the first attempt. Must not be negative.
    """
    if retries < 0:
        raise ValueError(f"retries must be >= 0, got {retries}")
    return Retrying(
        retry=retry_if_exception(is_transient_error),
        stop=stop_after_attempt(retries + 1),
        wait=wait_none(),
        before_sleep=_log_retry,
        reraise=True,
    )
