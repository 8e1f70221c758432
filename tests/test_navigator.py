import asyncio
import unittest

from regime_engine.autoplay.controller import AutoplayController
from regime_engine.core.event_bus import EventBus
from regime_engine.core.models import Direction, EventType, RegimeId
from regime_engine.transitions.animator import TransitionAnimator
from regime_engine.transitions.navigator import RegimeNavigator


class TestRegimeNavigator(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.bus = EventBus()
        self.controller = AutoplayController(interval_ms=10_000, event_bus=self.bus)
        self.navigator = RegimeNavigator(
            self.controller,
            animator=TransitionAnimator(step_delay_ms=10),
            event_bus=self.bus,
        )

    async def test_adjacent_selection_jumps_directly(self):
        result = await self.navigator.select("g")
        self.assertTrue(result)
        self.assertEqual(self.controller.current, RegimeId.GREED)
        self.assertFalse(self.controller.is_auto_playing)
        self.assertEqual(self.navigator.preview_path, [])

    async def test_same_regime_selection(self):
        self.assertTrue(await self.navigator.select("n"))
        self.assertEqual(self.controller.current, RegimeId.NEUTRAL)
        self.assertFalse(self.controller.is_auto_playing)

    async def test_distant_selection_walks_path_then_commits(self):
        seen = []
        original_step = self.navigator._on_step

        def spy(regime, index):
            seen.append((self.controller.current, list(self.navigator.preview_path), index))
            original_step(regime, index)

        self.navigator._on_step = spy
        async with self.controller:
            result = await self.navigator.select("ef")

        self.assertTrue(result)
        path = [RegimeId.NEUTRAL, RegimeId.FEAR, RegimeId.EXTREME_FEAR]
        # The controller only changes on the final step
        self.assertEqual([s[0] for s in seen], [RegimeId.NEUTRAL] * 3)
        self.assertEqual(seen[0][1], path)
        self.assertEqual(self.controller.current, RegimeId.EXTREME_FEAR)
        self.assertEqual(self.controller.previous, RegimeId.NEUTRAL)
        self.assertEqual(self.controller.direction, Direction.FORWARD)
        self.assertFalse(self.controller.is_auto_playing)
        self.assertFalse(self.controller.timer_running)
        self.assertEqual(self.navigator.preview_path, [])
        self.assertFalse(self.navigator.busy)

    async def test_selection_ignored_while_busy(self):
        first = asyncio.ensure_future(self.navigator.select("eg"))
        await asyncio.sleep(0)
        self.assertTrue(self.navigator.busy)

        ignored = await self.navigator.select("ef")
        self.assertFalse(ignored)

        self.assertTrue(await first)
        self.assertEqual(self.controller.current, RegimeId.EXTREME_GREED)

    async def test_path_events(self):
        self.controller.manual_jump("ef")
        await self.bus.dispatch_pending()

        received = []

        async def record(event):
            received.append(event.type)

        for event_type in (EventType.PATH_STARTED, EventType.PATH_STEP, EventType.PATH_COMPLETE):
            self.bus.subscribe(event_type, record)

        await self.navigator.select("eg")
        await self.bus.dispatch_pending()

        self.assertEqual(received[0], EventType.PATH_STARTED)
        self.assertEqual(received.count(EventType.PATH_STEP), 5)
        self.assertEqual(received[-1], EventType.PATH_COMPLETE)

    async def test_unknown_target(self):
        with self.assertRaises(ValueError):
            await self.navigator.select("zz")
        self.assertFalse(self.navigator.busy)


if __name__ == "__main__":
    unittest.main()
