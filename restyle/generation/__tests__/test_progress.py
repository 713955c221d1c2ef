"""
Tests for synthetic progress estimation
"""

import asyncio

import pytest

from restyle.generation.progress import (
    EDIT_CURVE,
    PRIMARY_CURVE,
    ProgressCurve,
    ProgressEstimator,
)


class TestProgressCurves:
    @pytest.mark.parametrize("elapsed,expected", [
        (0, 0),
        (-1, 0),
        (1.5, 15),
        (3, 30),
        (9, 55),
        (15, 80),
        (30, 87),
        (45, 95),
    ])
    def test_primary_breakpoints(self, elapsed, expected):
        assert PRIMARY_CURVE.estimate(elapsed) == expected

    @pytest.mark.parametrize("elapsed,expected", [
        (3, 30),
        (15, 85),
        (60, 95),
    ])
    def test_edit_breakpoints(self, elapsed, expected):
        assert EDIT_CURVE.estimate(elapsed) == expected

    @pytest.mark.parametrize("curve", [PRIMARY_CURVE, EDIT_CURVE])
    def test_tail_stays_below_ceiling(self, curve):
        assert curve.estimate(10_000) < 98
        assert curve.estimate(120) >= 95

    @pytest.mark.parametrize("curve", [PRIMARY_CURVE, EDIT_CURVE])
    def test_monotonic(self, curve):
        values = [curve.estimate(t / 10) for t in range(0, 3000)]
        assert values == sorted(values)

    def test_custom_curve(self):
        curve = ProgressCurve(phases=((10.0, 50.0),), ceiling=60.0)
        assert curve.estimate(5) == 25
        assert curve.estimate(1_000_000) == 59


class TestProgressEstimator:
    def test_start_emits_zero_and_complete_emits_hundred_once(self):
        values = []

        async def scenario():
            estimator = ProgressEstimator(PRIMARY_CURVE, values.append, interval=0.01)
            estimator.start()
            estimator.complete()
            estimator.complete()
            await asyncio.sleep(0.05)
            return estimator

        estimator = asyncio.run(scenario())
        assert values == [0, 100]
        assert not estimator.running

    def test_ticks_follow_clock(self):
        values = []
        now = [100.0]

        async def scenario():
            estimator = ProgressEstimator(
                PRIMARY_CURVE, values.append, interval=0.01, clock=lambda: now[0],
            )
            estimator.start()
            now[0] += 5.0
            await asyncio.sleep(0.05)
            estimator.stop()

        asyncio.run(scenario())
        assert values[0] == 0
        assert values[-1] == PRIMARY_CURVE.estimate(5.0)

    def test_no_emissions_after_stop(self):
        values = []
        now = [0.0]

        async def scenario():
            estimator = ProgressEstimator(
                PRIMARY_CURVE, values.append, interval=0.01, clock=lambda: now[0],
            )
            estimator.start()
            estimator.stop()
            now[0] += 20.0
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert values == [0]

    def test_restart_resets_to_zero(self):
        values = []
        now = [0.0]

        async def scenario():
            estimator = ProgressEstimator(
                EDIT_CURVE, values.append, interval=0.01, clock=lambda: now[0],
            )
            estimator.start()
            now[0] = 10.0
            await asyncio.sleep(0.05)
            estimator.start()
            estimator.stop()

        asyncio.run(scenario())
        assert values[0] == 0
        assert values[-1] == 0
        assert max(values) == EDIT_CURVE.estimate(10.0)

    def test_callback_errors_are_swallowed(self):
        def explode(value):
            raise RuntimeError("ui went away")

        async def scenario():
            estimator = ProgressEstimator(PRIMARY_CURVE, explode, interval=0.01)
            estimator.start()
            estimator.complete()
            return estimator.value

        assert asyncio.run(scenario()) == 100
