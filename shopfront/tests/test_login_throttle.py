from __future__ import annotations

import threading

from shopfront.infrastructure.auth.login_attempts import LoginThrottle


def test_new_key_is_not_blocked() -> None:
    throttle = LoginThrottle()

    assert throttle.is_blocked("alice") is False
    assert throttle.attempts("alice") == 0


def test_blocks_after_three_failures() -> None:
    throttle = LoginThrottle()

    for _ in range(2):
        throttle.record_failure("alice")
    assert throttle.is_blocked("alice") is False

    throttle.record_failure("alice")
    assert throttle.is_blocked("alice") is True


def test_failures_past_threshold_do_not_increment() -> None:
    throttle = LoginThrottle()

    for _ in range(10):
        throttle.record_failure("alice")

    assert throttle.attempts("alice") == LoginThrottle.MAX_ATTEMPTS


def test_success_resets_counter() -> None:
    throttle = LoginThrottle()
    throttle.record_failure("alice")
    throttle.record_failure("alice")

    throttle.record_success("alice")

    assert throttle.attempts("alice") == 0
    throttle.record_failure("alice")
    throttle.record_failure("alice")
    assert throttle.is_blocked("alice") is False


def test_keys_are_tracked_independently() -> None:
    throttle = LoginThrottle()
    for _ in range(3):
        throttle.record_failure("alice")

    assert throttle.is_blocked("alice") is True
    assert throttle.is_blocked("bob") is False


def test_custom_threshold() -> None:
    throttle = LoginThrottle(max_attempts=1)
    throttle.record_failure("alice")

    assert throttle.max_attempts == 1
    assert throttle.is_blocked("alice") is True


def test_concurrent_failures_stop_at_threshold() -> None:
    throttle = LoginThrottle()
    barrier = threading.Barrier(20)

    def fail() -> None:
        barrier.wait()
        throttle.record_failure("alice")

    threads = [threading.Thread(target=fail) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert throttle.attempts("alice") == 3
    assert throttle.is_blocked("alice") is True
