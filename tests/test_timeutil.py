import time
from unittest import mock

from dsdfec.timeutil import now_ms, now_us


def test_now_ms_truncates_nanoseconds():
    with mock.patch("dsdfec.timeutil.time.time_ns", return_value=1_234_567_890_123_456_789):
        assert now_ms() == 1_234_567_890_123


def test_now_us_truncates_nanoseconds():
    with mock.patch("dsdfec.timeutil.time.time_ns", return_value=1_234_567_890_123_456_789):
        assert now_us() == 1_234_567_890_123_456


def test_now_ms_within_wall_clock_bounds():
    before = time.time_ns() // 1_000_000
    value = now_ms()
    after = time.time_ns() // 1_000_000
    assert before <= value <= after


def test_now_us_within_wall_clock_bounds():
    before = time.time_ns() // 1_000
    value = now_us()
    after = time.time_ns() // 1_000
    assert before <= value <= after


def test_units_are_consistent():
    ms = now_ms()
    us = now_us()
    assert us // 1000 >= ms
    assert us // 1000 - ms < 1000