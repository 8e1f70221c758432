import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

# =============================================================================
# REGIME ENGINE CONFIGURATION
# =============================================================================
# Central control point for the transition engine.
# Contents:
# 1. Autoplay constants (tick interval, reversal points)
# 2. Layout constants (arc geometry presets for the view layer)
# 3. Paths
# 4. Runtime configuration (Config), loaded from .env / local_config.json
# =============================================================================

# -----------------------------------------------------------------------------
# 1. AUTOPLAY
# -----------------------------------------------------------------------------
class AutoPlayConstants:
    """
    Timing defaults and ping-pong reversal points for the autoplay controller.
    """
    DEFAULT_INTERVAL_MS = 6000   # Observed default tick interval
    DEFAULT_STEP_DELAY_MS = 500  # Path preview delay per step
    START_REGIME = "n"           # Autoplay starts in the middle

    # Regime reached right after a reversal.
    # forward: stepped past Extreme Greed -> bounce to Greed
    # backward: stepped past Extreme Fear -> bounce to Fear
    REVERSAL_POINTS: Dict[str, str] = {
        "forward": "g",
        "backward": "f",
    }

# -----------------------------------------------------------------------------
# 2. LAYOUT
# -----------------------------------------------------------------------------
class LayoutConstants:
    """
    Arc geometry presets consumed by the view layer only.
    """
    NODE_RADIUS = 80         # Node radius including glow
    NODE_PADDING = 40        # Gap between node and panel
    ARC_ANGLE_START = 180.0  # Degrees, left end of the arc
    ARC_ANGLE_RANGE = 180.0  # Degrees covered by the five nodes

    PRESETS: Dict[str, Dict[str, float]] = {
        "small_mobile": {
            "view_box_width": 700,
            "view_box_height": 900,
            "panel_x": 30,
            "panel_y": 500,
            "panel_width": 640,
            "panel_height": 480,
            "center_x": 350,
            "arc_center_y": 220,
            "arc_radius": 180,
        },
        "mobile": {
            "view_box_width": 900,
            "view_box_height": 1000,
            "panel_x": 50,
            "panel_y": 620,
            "panel_width": 800,
            "panel_height": 560,
            "center_x": 450,
            "arc_center_y": 280,  # Tuned visually, not PANEL_Y + NODE_RADIUS + PADDING
            "arc_radius": 240,
        },
        "desktop": {
            "view_box_width": 1600,
            "view_box_height": 600,
            "panel_x": 900,
            "panel_y": 60,
            "panel_width": 600,
            "panel_height": 560,
            "center_x": 420,
            "arc_center_y": 180,  # 60 + 80 + 40
            "arc_radius": 240,
        },
    }

# -----------------------------------------------------------------------------
# 3. PATHS
# -----------------------------------------------------------------------------
class Paths:
    """
    File locations used by the engine runtime.
    """
    LOGS_DIR = Path("logs")
    LOCAL_CONFIG = Path("local_config.json")

# -----------------------------------------------------------------------------
# 4. RUNTIME CONFIGURATION
# -----------------------------------------------------------------------------
@dataclass
class Config:
    """
    Runtime configuration, loaded from environment variables (.env).
    """
    autoplay_interval_ms: float    # Time between autoplay ticks
    step_delay_ms: float           # Delay between path preview steps
    start_regime: str              # Regime id the session starts in
    prefers_reduced_motion: bool   # Suppresses autoplay ticks
    auto_resume_ms: float          # Idle time before autoplay resumes (0 = never)
    layout_variant: str            # 'desktop', 'mobile' or 'small_mobile'
    session_duration_seconds: float  # Headless demo length (0 = until interrupted)

    @property
    def autoplay_interval_seconds(self) -> float:
        return self.autoplay_interval_ms / 1000.0

    @property
    def step_delay_seconds(self) -> float:
        return self.step_delay_ms / 1000.0

    @property
    def auto_resume_seconds(self) -> float:
        return self.auto_resume_ms / 1000.0

    @classmethod
    def from_env(cls) -> "Config":
        """
        Builds the configuration from environment variables.
        Values in an optional local_config.json take precedence.
        """
        load_dotenv()
        local_config: Dict[str, Any] = {}
        if Paths.LOCAL_CONFIG.exists():
            try:
                local_config = json.loads(Paths.LOCAL_CONFIG.read_text(encoding="utf-8"))
            except (OSError, ValueError):
                local_config = {}

        def get_str(name: str, default: str) -> str:
            value = local_config.get(name)
            if isinstance(value, str) and value:
                return value
            return os.environ.get(name, default)

        def get_float(name: str, default: str) -> float:
            value = local_config.get(name)
            if value is not None:
                try:
                    return float(value)
                except (TypeError, ValueError):
                    pass
            return float(os.environ.get(name, default))

        def get_bool(name: str, default: str) -> bool:
            value = local_config.get(name)
            if isinstance(value, bool):
                return value
            return get_str(name, default).strip().lower() in ("1", "true", "yes", "on")

        return cls(
            autoplay_interval_ms=get_float("AUTOPLAY_INTERVAL_MS", str(AutoPlayConstants.DEFAULT_INTERVAL_MS)),
            step_delay_ms=get_float("STEP_DELAY_MS", str(AutoPlayConstants.DEFAULT_STEP_DELAY_MS)),
            start_regime=get_str("START_REGIME", AutoPlayConstants.START_REGIME),
            prefers_reduced_motion=get_bool("PREFERS_REDUCED_MOTION", "false"),
            auto_resume_ms=get_float("AUTO_RESUME_MS", "0"),
            layout_variant=get_str("LAYOUT_VARIANT", "desktop"),
            session_duration_seconds=get_float("SESSION_DURATION_SECONDS", "0"),
        )
