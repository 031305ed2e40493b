import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger("jgfmt")

BACKUP_MARKER = "_BACKUP_"


def backup_timestamp(moment: datetime | None = None) -> str:
    """Render moment as MM_dd_yyyy_h_mm_ss, the hour on a 12-hour clock without padding."""
    moment = moment or datetime.now()
    hour = moment.hour % 12 or 12
    return f"{moment:%m_%d_%Y}_{hour}_{moment:%M_%S}"


def read_source(path: Path, log: logging.Logger | None = None) -> str | None:
    """Read a whole file with the platform encoding, keeping its line endings.

    Returns None when the file cannot be read; the caller skips the file.
    """
    log = log or logger
    try:
        with open(path, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        log.error("Error occurred when opening %s", path)
        return None


def create_backup(
    path: Path,
    content: str,
    log: logging.Logger | None = None,
    moment: datetime | None = None,
) -> Path | None:
    """Write content verbatim to <path>_BACKUP_<timestamp> and return the new path.

    A backup made in the same second as a previous one for the same file
    replaces it. Failures are logged and reported as None.
    """
    log = log or logger
    backup_path = Path(f"{path}{BACKUP_MARKER}{backup_timestamp(moment)}")
    try:
        with open(backup_path, "w", newline="") as f:
            f.write(content)
    except Exception:
        log.error("Error occurred when creating backup %s", backup_path, exc_info=True)
        return None
    log.debug("Backup written to %s", backup_path)
    return backup_path
