import json
import os
import unittest
from unittest.mock import MagicMock, patch

from regime_engine.config import Config


class TestConfig(unittest.TestCase):

    def setUp(self):
        # Keep a stray local_config.json / .env out of the picture
        self.patcher_path = patch("regime_engine.config.Paths.LOCAL_CONFIG")
        self.mock_path = self.patcher_path.start()
        self.mock_path.exists.return_value = False
        self.patcher_dotenv = patch("regime_engine.config.load_dotenv")
        self.patcher_dotenv.start()

    def tearDown(self):
        self.patcher_dotenv.stop()
        self.patcher_path.stop()

    @patch.dict(os.environ, {
        "AUTOPLAY_INTERVAL_MS": "3000",
        "STEP_DELAY_MS": "250",
        "START_REGIME": "g",
        "PREFERS_REDUCED_MOTION": "true",
        "AUTO_RESUME_MS": "4000",
        "LAYOUT_VARIANT": "mobile",
        "SESSION_DURATION_SECONDS": "30",
    })
    def test_load_from_env(self):
        config = Config.from_env()
        self.assertEqual(config.autoplay_interval_ms, 3000.0)
        self.assertEqual(config.autoplay_interval_seconds, 3.0)
        self.assertEqual(config.step_delay_ms, 250.0)
        self.assertEqual(config.step_delay_seconds, 0.25)
        self.assertEqual(config.start_regime, "g")
        self.assertTrue(config.prefers_reduced_motion)
        self.assertEqual(config.auto_resume_seconds, 4.0)
        self.assertEqual(config.layout_variant, "mobile")
        self.assertEqual(config.session_duration_seconds, 30.0)

    def test_default_values(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        self.assertEqual(config.autoplay_interval_ms, 6000.0)
        self.assertEqual(config.step_delay_ms, 500.0)
        self.assertEqual(config.start_regime, "n")
        self.assertFalse(config.prefers_reduced_motion)
        self.assertEqual(config.auto_resume_ms, 0.0)
        self.assertEqual(config.layout_variant, "desktop")

    def test_local_config_overrides_env(self):
        self.mock_path.exists.return_value = True
        self.mock_path.read_text.return_value = json.dumps({
            "AUTOPLAY_INTERVAL_MS": 1000,
            "PREFERS_REDUCED_MOTION": True,
            "START_REGIME": "ef",
        })
        with patch.dict(os.environ, {"AUTOPLAY_INTERVAL_MS": "9000", "START_REGIME": "eg"}, clear=True):
            config = Config.from_env()
        self.assertEqual(config.autoplay_interval_ms, 1000.0)
        self.assertTrue(config.prefers_reduced_motion)
        self.assertEqual(config.start_regime, "ef")

    def test_broken_local_config_is_ignored(self):
        self.mock_path.exists.return_value = True
        self.mock_path.read_text.return_value = "{not json"
        with patch.dict(os.environ, {"STEP_DELAY_MS": "100"}, clear=True):
            config = Config.from_env()
        self.assertEqual(config.step_delay_ms, 100.0)

    def test_invalid_number_raises(self):
        with patch.dict(os.environ, {"AUTOPLAY_INTERVAL_MS": "fast"}, clear=True):
            with self.assertRaises(ValueError):
                Config.from_env()


if __name__ == "__main__":
    unittest.main()
