import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from regime_engine.config import Paths


def setup_logging(logs_dir: Optional[Path] = None, level: int = logging.INFO) -> None:
    logs_dir = logs_dir or Paths.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    date_str = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    log_path = logs_dir / f"{date_str}_engine.log"

    # RotatingFileHandler: max 3MB, keep 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=3 * 1024 * 1024,  # 3MB
        backupCount=3,
        encoding="utf-8"
    )

    # Rotating Error Handler: max 5MB, keep 5 backups
    error_log_path = logs_dir / "error.log"
    error_handler = logging.handlers.RotatingFileHandler(
        error_log_path,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=5,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)

    # Console gets WARNING+ only
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[file_handler, error_handler, stream_handler],
        force=True,
    )
