import unittest

from regime_engine.autoplay.controller import AutoplayController
from regime_engine.core.event_bus import EventBus
from regime_engine.core.models import Direction, RegimeId
from regime_engine.view.presenter import RegimePresenter, format_panel


class TestRegimePresenter(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.bus = EventBus()
        self.controller = AutoplayController(event_bus=self.bus)
        self.presenter = RegimePresenter(self.controller, event_bus=self.bus)

    def test_initial_view(self):
        view = self.presenter.snapshot()
        self.assertEqual(view.current, RegimeId.NEUTRAL)
        self.assertEqual(view.regime.label, "Neutral")
        self.assertEqual(view.strategy.title, "Holiday Mode")
        self.assertIsNone(view.direction_label)
        self.assertTrue(view.is_auto_playing)
        self.assertEqual(view.preview_path, [])

    def test_view_after_tick(self):
        self.controller.tick()
        view = self.presenter.snapshot()
        self.assertEqual(view.current, RegimeId.GREED)
        self.assertEqual(view.previous, RegimeId.NEUTRAL)
        self.assertEqual(view.strategy.title, "Lock Gains into LP")
        self.assertEqual(view.direction_label, "From Neutral (bull run)")

    def test_view_after_bounce(self):
        self.controller.manual_jump("eg")
        self.controller.resume()
        self.controller.tick()
        view = self.presenter.snapshot()
        self.assertEqual(view.current, RegimeId.GREED)
        self.assertEqual(view.direction, Direction.BACKWARD)
        self.assertEqual(view.strategy.title, "Take a Rest")
        self.assertEqual(view.direction_label, "From Extreme Greed (correction)")

    async def test_history_follows_bus(self):
        self.controller.tick()
        self.controller.tick()
        with self.assertLogs("presenter", level="INFO"):
            await self.bus.dispatch_pending()
        self.assertEqual(
            [view.current for view in self.presenter.history],
            [RegimeId.GREED, RegimeId.EXTREME_GREED],
        )

    async def test_history_records_state_at_emit_time(self):
        self.controller.tick()
        self.controller.manual_jump("ef")
        with self.assertLogs("presenter", level="INFO"):
            await self.bus.dispatch_pending()

        first, second = self.presenter.history
        self.assertEqual(first.current, RegimeId.GREED)
        self.assertEqual(first.previous, RegimeId.NEUTRAL)
        self.assertTrue(first.is_auto_playing)
        self.assertEqual(first.strategy.title, "Lock Gains into LP")
        self.assertEqual(second.current, RegimeId.EXTREME_FEAR)
        self.assertFalse(second.is_auto_playing)

    def test_format_panel(self):
        self.controller.tick()
        panel = format_panel(self.presenter.snapshot())
        self.assertIn("[Greed] index 55-75", panel)
        self.assertIn("Strategy: Lock Gains into LP", panel)
        self.assertIn("Direction: From Neutral (bull run)", panel)
        self.assertIn("LP position: building", panel)
        self.assertIn("Autoplay: on (forward)", panel)

    def test_format_panel_maintaining(self):
        panel = format_panel(self.presenter.snapshot())
        self.assertIn("Maintaining current allocation", panel)
        self.assertNotIn("Direction:", panel)


if __name__ == "__main__":
    unittest.main()
