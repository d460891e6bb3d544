"""Tests for strategy module - decision behavior."""

import pytest
from request_strategy.exceptions import InvalidStrategyError
from request_strategy.strategy import (
    Continue,
    ExponentialBackoff,
    Idempotent,
    Once,
    Retry,
    Stop,
    calculate_backoff,
    decide,
    is_client_error,
)


class TestCalculateBackoff:
    """Test backoff calculation behavior."""

    def test_first_delay_is_one_second(self):
        """Attempt 0 waits the base delay."""
        assert calculate_backoff(0) == 1.0

    def test_delay_doubles_each_attempt(self):
        """Given increasing attempts, delay doubles."""
        assert [calculate_backoff(n) for n in range(5)] == [1.0, 2.0, 4.0, 8.0, 16.0]

    def test_delay_is_not_capped(self):
        """Large attempt numbers keep growing."""
        assert calculate_backoff(20) == 2.0**20

    def test_delay_is_deterministic(self):
        """Same attempt, same delay."""
        assert calculate_backoff(3) == calculate_backoff(3)


class TestOnceStrategy:
    """Test Once: one attempt, never retried."""

    def test_first_attempt_continues(self):
        assert decide(Once(), None, None, 0) == Continue(None)

    def test_second_attempt_stops(self):
        assert decide(Once(), None, None, 1) == Stop()

    def test_server_error_does_not_allow_retry(self):
        """Given a 500 after the first attempt, stops."""
        assert decide(Once(), 500, True, 1) == Stop()


class TestIdempotentStrategy:
    """Test Idempotent: one attempt with caller key."""

    def test_first_attempt_continues(self):
        assert decide(Idempotent("key"), None, None, 0) == Continue(None)

    @pytest.mark.parametrize("attempt", [1, 2, 10])
    def test_later_attempts_stop(self, attempt):
        assert decide(Idempotent("key"), 503, None, attempt) == Stop()

    def test_client_error_after_first_attempt_stops(self):
        assert decide(Idempotent("key"), 400, None, 1) == Stop()


class TestRetryStrategy:
    """Test Retry: fixed budget, no delay."""

    def test_continues_without_delay_until_budget(self):
        """Retry(3): attempts 0, 1, 2 continue, 3 and 4 stop."""
        strategy = Retry(3)

        assert decide(strategy, None, None, 0) == Continue(None)
        assert decide(strategy, None, None, 1) == Continue(None)
        assert decide(strategy, None, None, 2) == Continue(None)
        assert decide(strategy, None, None, 3) == Stop()
        assert decide(strategy, None, None, 4) == Stop()

    def test_server_error_is_retried(self):
        assert decide(Retry(3), 503, None, 1) == Continue(None)

    def test_client_error_overrides_budget(self):
        """Retry(5), attempt 2, 404: stops."""
        assert decide(Retry(5), 404, None, 2) == Stop()

    def test_zero_budget_never_continues(self):
        assert decide(Retry(0), None, None, 0) == Stop()


class TestExponentialBackoffStrategy:
    """Test ExponentialBackoff: fixed budget, doubling delay."""

    def test_continues_with_doubling_delay(self):
        """ExponentialBackoff(3): 1s, 2s, 4s, then stop."""
        strategy = ExponentialBackoff(3)

        assert decide(strategy, None, None, 0) == Continue(1.0)
        assert decide(strategy, None, None, 1) == Continue(2.0)
        assert decide(strategy, None, None, 2) == Continue(4.0)
        assert decide(strategy, None, None, 3) == Stop()
        assert decide(strategy, None, None, 4) == Stop()

    def test_remote_veto_overrides_budget(self):
        """ExponentialBackoff(5), attempt 1, hint False: stops."""
        assert decide(ExponentialBackoff(5), None, False, 1) == Stop()

    def test_positive_hint_does_not_extend_budget(self):
        assert decide(ExponentialBackoff(2), 500, True, 2) == Stop()

    def test_client_error_stops(self):
        assert decide(ExponentialBackoff(5), 429, None, 1) == Stop()


class TestRemoteRetryHint:
    """A hint of False forces Stop for every strategy."""

    @pytest.mark.parametrize(
        "strategy",
        [Once(), Idempotent("key"), Retry(5), ExponentialBackoff(5)],
    )
    @pytest.mark.parametrize("attempt", [0, 1, 3])
    def test_false_hint_always_stops(self, strategy, attempt):
        assert decide(strategy, 503, False, attempt) == Stop()

    def test_absent_hint_allows_retry(self):
        assert decide(Retry(2), 503, None, 1) == Continue(None)


class TestFirstAttemptPriority:
    """At attempt 0 Once and Idempotent always get their single try."""

    @pytest.mark.parametrize("strategy", [Once(), Idempotent("k")])
    @pytest.mark.parametrize("status", [400, 404, 409, 500])
    @pytest.mark.parametrize("hint", [None, True])
    def test_first_try_ignores_status(self, strategy, status, hint):
        """Given any status at attempt 0, the first try still happens."""
        assert decide(strategy, status, hint, 0) == Continue(None)

    @pytest.mark.parametrize("strategy", [Retry(3), ExponentialBackoff(3)])
    def test_generated_key_strategies_stop_on_client_error_at_zero(self, strategy):
        """Retry and ExponentialBackoff stop on a 4xx even at attempt 0."""
        assert decide(strategy, 404, None, 0) == Stop()


class TestClientErrorsAfterFirstAttempt:
    """At attempt >= 1 any 4xx stops every strategy."""

    @pytest.mark.parametrize(
        "strategy",
        [Once(), Idempotent("key"), Retry(10), ExponentialBackoff(10)],
    )
    @pytest.mark.parametrize("status", [400, 401, 404, 409, 429, 499])
    def test_stops(self, strategy, status):
        assert decide(strategy, status, None, 1) == Stop()

    def test_is_client_error_range(self):
        assert is_client_error(400) is True
        assert is_client_error(499) is True
        assert is_client_error(399) is False
        assert is_client_error(500) is False
        assert is_client_error(None) is False


class TestDecisionPurity:
    """decide does not depend on or mutate hidden state."""

    def test_repeated_calls_agree(self):
        strategy = ExponentialBackoff(4)
        first = [decide(strategy, 503, None, n) for n in range(6)]
        second = [decide(strategy, 503, None, n) for n in range(6)]

        assert first == second
        assert strategy == ExponentialBackoff(4)


class TestStrategyValidation:
    """Test strategy construction."""

    def test_negative_budget_rejected(self):
        with pytest.raises(InvalidStrategyError):
            Retry(-1)

    def test_non_integer_budget_rejected(self):
        with pytest.raises(InvalidStrategyError):
            ExponentialBackoff(2.5)

    def test_bool_budget_rejected(self):
        with pytest.raises(InvalidStrategyError):
            Retry(True)

    def test_empty_key_rejected(self):
        with pytest.raises(InvalidStrategyError):
            Idempotent("")

    def test_invalid_strategy_error_is_value_error(self):
        with pytest.raises(ValueError):
            Retry(-3)

    def test_strategies_are_immutable(self):
        strategy = Retry(3)
        with pytest.raises(AttributeError):
            strategy.max_attempts = 10
