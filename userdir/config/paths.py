"""Path configuration for the user directory."""

from datetime import datetime
from pathlib import Path

def ensure_dir(p: Path):
    """Ensure directory exists, handling conflicts by renaming existing files."""
    if p.exists() and not p.is_dir():
        backup = p.with_name(f"{p.name}.conflict.{datetime.now().strftime('%Y%m%d%H%M%S')}")
        p.rename(backup)
    p.mkdir(parents=True, exist_ok=True)

LOG_FILE_NAME = "app.log"
