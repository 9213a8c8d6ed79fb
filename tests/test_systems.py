"""Tests for the tick policies."""

from __future__ import annotations

from datetime import datetime

import pytest

from clock_face.engine.systems import (
    AbsolutePolicy,
    IncrementalPolicy,
    DEGREES_PER_SECOND,
    DEGREES_PER_MINUTE,
    DEGREES_PER_HOUR,
    absolute_angles,
    create_policy,
)
from clock_face.types import ClockPolicyKind


def angles_match(actual: float, expected: float, tol: float = 1e-6) -> bool:
    """Compare two angles on the dial, treating 0 and 360 as the same."""
    diff = abs(actual - expected) % 360.0
    return min(diff, 360.0 - diff) < tol


class TestIncrementalPolicy:
    """Tests for the fixed-step policy."""

    def test_step_constants(self):
        """Test the per-tick steps derive from a 60/60/12 dial."""
        assert DEGREES_PER_SECOND == pytest.approx(6.0)
        assert DEGREES_PER_MINUTE == pytest.approx(0.1)
        assert DEGREES_PER_HOUR == pytest.approx(0.1 / 12)

    def test_single_tick(self, hands):
        """Test one tick turns each hand by its step."""
        policy = IncrementalPolicy()
        policy.start(hands)
        policy.tick(hands)
        assert hands.second.rotation == pytest.approx(6.0)
        assert hands.minute.rotation == pytest.approx(0.1)
        assert hands.hour.rotation == pytest.approx(0.1 / 12)

    @pytest.mark.parametrize("n", [1, 10, 59, 60, 61, 3600, 43200])
    def test_n_ticks_from_zero(self, hands, n):
        """Test N ticks from zero give (step * N) mod 360 on every hand."""
        policy = IncrementalPolicy()
        for _ in range(n):
            policy.tick(hands)

        assert angles_match(hands.second.rotation, (6.0 * n) % 360)
        assert angles_match(hands.minute.rotation, (0.1 * n) % 360)
        assert angles_match(hands.hour.rotation, (0.1 * n / 12) % 360)

    def test_zero_ticks_leaves_hands_unchanged(self, hands):
        """Test starting without ticking changes nothing."""
        hands.second.set_rotation(12.0)
        hands.minute.set_rotation(24.0)
        hands.hour.set_rotation(36.0)

        IncrementalPolicy().start(hands)

        assert hands.second.rotation == pytest.approx(12.0)
        assert hands.minute.rotation == pytest.approx(24.0)
        assert hands.hour.rotation == pytest.approx(36.0)

    def test_accumulates_from_existing_rotation(self, hands):
        """Test ticks are relative to wherever the hands already point."""
        hands.second.set_rotation(90.0)
        IncrementalPolicy().tick(hands)
        assert hands.second.rotation == pytest.approx(96.0)

    def test_second_hand_stays_in_range(self, hands):
        """Test a full minute of ticks brings the second hand back to 0."""
        policy = IncrementalPolicy()
        for _ in range(60):
            policy.tick(hands)
            assert 0.0 <= hands.second.rotation < 360.0
        assert hands.second.rotation == pytest.approx(0.0)

    def test_custom_steps(self, hands):
        """Test the steps can be overridden."""
        policy = IncrementalPolicy(second_step=1.0, minute_step=2.0, hour_step=3.0)
        policy.tick(hands)
        assert hands.second.rotation == pytest.approx(1.0)
        assert hands.minute.rotation == pytest.approx(2.0)
        assert hands.hour.rotation == pytest.approx(3.0)


class TestAbsoluteAngles:
    """Tests for the absolute angle formula."""

    @pytest.mark.parametrize(
        "moment",
        [
            datetime(2024, 1, 1, 0, 0, 0),
            datetime(2024, 1, 1, 3, 15, 45),
            datetime(2024, 1, 1, 11, 59, 59),
            datetime(2024, 1, 1, 12, 30, 0),
            datetime(2024, 1, 1, 23, 59, 59),
        ],
    )
    def test_formula(self, moment):
        """Test angles are second*6, minute*6 and hour*30."""
        second, minute, hour = absolute_angles(moment)
        assert second == pytest.approx((moment.second % 60) * 6)
        assert minute == pytest.approx((moment.minute % 60) * 6)
        assert hour == pytest.approx((moment.hour % 24) * 30)

    def test_hour_hand_ignores_minutes(self):
        """Documents likely-unintended behavior: the hour hand does not creep.

        A real dial would show 3:30 halfway between 3 and 4 (105 degrees).
        The formula keeps the hour hand on the 3 until 4:00.
        """
        _, _, hour = absolute_angles(datetime(2024, 1, 1, 3, 30, 0))
        assert hour == pytest.approx(90.0)

    def test_hour_hand_wraps_at_24(self):
        """Documents likely-unintended behavior: afternoon hours overshoot.

        15:00 gives 450 degrees before normalization, which lands on the
        3 o'clock position only because the hand wraps at 360.
        """
        _, _, hour = absolute_angles(datetime(2024, 1, 1, 15, 0, 0))
        assert hour == pytest.approx(450.0)

    def test_hour_hand_at_13_matches_1_after_wrap(self):
        """Documents likely-unintended behavior: 13:00 lands on the 1 by accident."""
        _, _, one = absolute_angles(datetime(2024, 1, 1, 1, 0, 0))
        _, _, thirteen = absolute_angles(datetime(2024, 1, 1, 13, 0, 0))
        assert thirteen == pytest.approx(390.0)
        assert thirteen % 360 == pytest.approx(one)


class TestAbsolutePolicy:
    """Tests for the wall-clock policy."""

    def test_start_captures_now(self, hands, fixed_now, fixed_time):
        """Test start reads the wall clock once."""
        policy = AbsolutePolicy(now=fixed_now)
        policy.start(hands)
        assert policy.current_time == fixed_time

    def test_start_time_overrides_now(self, hands, fixed_now):
        """Test a fixed start time wins over now()."""
        start = datetime(2020, 5, 5, 5, 5, 5)
        policy = AbsolutePolicy(now=fixed_now, start_time=start)
        policy.start(hands)
        assert policy.current_time == start

    def test_one_tick_sets_angles(self, hands, fixed_now, fixed_time):
        """Test one tick shows the captured time."""
        policy = AbsolutePolicy(now=fixed_now)
        policy.start(hands)
        policy.tick(hands)

        assert hands.second.rotation == pytest.approx((fixed_time.second % 60) * 6)
        assert hands.minute.rotation == pytest.approx((fixed_time.minute % 60) * 6)
        assert hands.hour.rotation == pytest.approx(((fixed_time.hour % 24) * 30) % 360)

    def test_tick_advances_time_one_second(self, hands, fixed_now, fixed_time):
        """Test each tick moves the tracked time forward by one second."""
        policy = AbsolutePolicy(now=fixed_now)
        policy.start(hands)
        policy.tick(hands)
        policy.tick(hands)
        assert (policy.current_time - fixed_time).total_seconds() == 2
        # Second tick shows fixed_time + 1s
        assert hands.second.rotation == pytest.approx(((fixed_time.second + 1) % 60) * 6)

    def test_ignores_previous_rotation(self, hands):
        """Test absolute ticks overwrite whatever the hands showed."""
        hands.second.set_rotation(123.0)
        policy = AbsolutePolicy(start_time=datetime(2024, 1, 1, 0, 0, 10))
        policy.start(hands)
        policy.tick(hands)
        assert hands.second.rotation == pytest.approx(60.0)

    def test_midnight_scenario(self, hands):
        """Test starting at 00:00:00: first tick shows 0, the next shows 6."""
        policy = AbsolutePolicy(start_time=datetime(2024, 1, 1, 0, 0, 0))
        policy.start(hands)

        policy.tick(hands)
        assert hands.second.rotation == pytest.approx(0.0)
        assert hands.minute.rotation == pytest.approx(0.0)
        assert hands.hour.rotation == pytest.approx(0.0)

        policy.tick(hands)
        assert hands.second.rotation == pytest.approx(6.0)
        assert hands.minute.rotation == pytest.approx(0.0)

    def test_minute_rollover(self, hands):
        """Test the minute hand jumps when the seconds roll over."""
        policy = AbsolutePolicy(start_time=datetime(2024, 1, 1, 0, 0, 59))
        policy.start(hands)
        policy.tick(hands)
        assert hands.minute.rotation == pytest.approx(0.0)
        policy.tick(hands)
        assert hands.second.rotation == pytest.approx(0.0)
        assert hands.minute.rotation == pytest.approx(6.0)

    def test_zero_ticks_leaves_hands_unchanged(self, hands, fixed_now):
        """Test starting without ticking changes nothing."""
        hands.second.set_rotation(42.0)
        AbsolutePolicy(now=fixed_now).start(hands)
        assert hands.second.rotation == pytest.approx(42.0)

    def test_tick_without_start_reads_now(self, hands, fixed_now, fixed_time):
        """Test ticking before start falls back to reading the clock."""
        policy = AbsolutePolicy(now=fixed_now)
        policy.tick(hands)
        assert hands.second.rotation == pytest.approx(fixed_time.second * 6)


class TestCreatePolicy:
    """Tests for the policy factory."""

    def test_create_incremental(self):
        """Test creating an incremental policy."""
        assert isinstance(create_policy(ClockPolicyKind.INCREMENTAL), IncrementalPolicy)

    def test_create_absolute_from_string(self):
        """Test creating an absolute policy from its name."""
        assert isinstance(create_policy("absolute"), AbsolutePolicy)

    def test_unknown_kind(self):
        """Test unknown kinds raise ValueError."""
        with pytest.raises(ValueError):
            create_policy("sundial")
