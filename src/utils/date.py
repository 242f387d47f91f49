"""
Utils related to dates
"""

from datetime import datetime


def to_epoch_millis(dt: datetime) -> int:
    """
    Milliseconds since the unix epoch (e.g. for timestamped filenames)

    Args:
        dt (datetime): datetime (naive datetimes are treated as local time)
    """
    return round(dt.timestamp() * 1000)
