from __future__ import annotations

import pytest

from apicontext.core import validate_communicator, validate_retry_params, validate_timeout
from apicontext.exceptions import InvalidContextStateError

#######################################
#     Tests for validate_timeout     #
#######################################


@pytest.mark.parametrize("timeout", [0.1, 1.0, 10.0, 100])
def test_validate_timeout_accepts_valid_values(timeout: float) -> None:
    validate_timeout(timeout)


def test_validate_timeout_rejects_zero() -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0, got 0"):
        validate_timeout(0)


def test_validate_timeout_rejects_negative() -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0, got -1.0"):
        validate_timeout(-1.0)


###########################################
#     Tests for validate_retry_params     #
###########################################


@pytest.mark.parametrize(("max_retries", "delay"), [(0, 0.0), (3, 5.0), (10, 0.5)])
def test_validate_retry_params_accepts_valid_values(max_retries: int, delay: float) -> None:
    validate_retry_params(max_retries=max_retries, delay=delay)


def test_validate_retry_params_rejects_negative_max_retries() -> None:
    with pytest.raises(InvalidContextStateError, match=r"max_retries must be >= 0, got -1"):
        validate_retry_params(max_retries=-1, delay=5.0)


def test_validate_retry_params_rejects_negative_delay() -> None:
    with pytest.raises(InvalidContextStateError, match=r"delay must be >= 0, got -0.5"):
        validate_retry_params(max_retries=3, delay=-0.5)


def test_validate_retry_params_error_is_value_error() -> None:
    with pytest.raises(ValueError, match=r"delay must be >= 0"):
        validate_retry_params(max_retries=3, delay=-1)


###########################################
#     Tests for validate_communicator     #
###########################################


def test_validate_communicator_accepts_object() -> None:
    validate_communicator(object())


def test_validate_communicator_rejects_none() -> None:
    with pytest.raises(InvalidContextStateError, match=r"a communicator is required"):
        validate_communicator(None)
