# Tunables for the hotspots engine.
import logging
import os

# Times are in milliseconds throughout.
# A forward jump of more than this past the next expected change is treated as
# a user seek, and a full snapshot is returned instead of a delta.
DEFAULT_SEEK_THRESHOLD = 2000.0

# Environment variable to override the seek threshold, can be set in .env.
SEEK_THRESHOLD_ENV = "HOTSPOTS_SEEK_THRESHOLD"


def seek_threshold() -> float:
    value = os.environ.get(SEEK_THRESHOLD_ENV)
    if value is None:
        return DEFAULT_SEEK_THRESHOLD
    try:
        threshold = float(value)
    except ValueError:
        logging.warning(
            f"Ignoring invalid {SEEK_THRESHOLD_ENV}={value!r}, using {DEFAULT_SEEK_THRESHOLD}"
        )
        return DEFAULT_SEEK_THRESHOLD
    if threshold < 0:
        logging.warning(
            f"Ignoring negative {SEEK_THRESHOLD_ENV}={value!r}, using {DEFAULT_SEEK_THRESHOLD}"
        )
        return DEFAULT_SEEK_THRESHOLD
    return threshold
