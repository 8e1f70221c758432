import asyncio
import os
import unittest
from unittest.mock import patch

from regime_engine.main import run_loop


class TestHeadlessSession(unittest.IsolatedAsyncioTestCase):
    """Runs the demo session end to end with a short autoplay interval."""

    @patch("regime_engine.main.setup_logging")
    @patch("regime_engine.config.load_dotenv")
    @patch("regime_engine.config.Paths.LOCAL_CONFIG")
    async def test_session_runs_and_shuts_down(self, mock_local_config, mock_dotenv, mock_setup_logging):
        mock_local_config.exists.return_value = False
        env = {"SESSION_DURATION_SECONDS": "0.1", "AUTOPLAY_INTERVAL_MS": "20", "START_REGIME": "f"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertLogs("main", level="INFO") as logs:
                await run_loop()

        mock_setup_logging.assert_called_once()
        output = "\n".join(logs.output)
        self.assertIn("Starting regime session", output)
        self.assertIn("[Fear] index 26-45", output)
        self.assertIn("Session finished after", output)
        self.assertNotIn("after 0 regime changes", output)
        self.assertEqual(asyncio.all_tasks(), {asyncio.current_task()})


if __name__ == "__main__":
    unittest.main()
