"""
Export of rendered charts
"""

from datetime import datetime
import io
import logging
import altair as alt

from utils.date import to_epoch_millis

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

EXPORT_SCALE = 2
EXPORT_BACKGROUND = "#ffffff"
PNG_MIME = "image/png"


def export_filename(keyword: str, now: datetime | None = None) -> str:
    """
    Filename for a chart snapshot, e.g. patent-analytics-android mobile-1718000000000.png

    Args:
        keyword (str): search keyword the charts were generated for
        now (datetime, optional): timestamp. Defaults to the current time.
    """
    millis = to_epoch_millis(now or datetime.now())
    return f"patent-analytics-{keyword}-{millis}.png"


def export_png(chart: alt.TopLevelMixin) -> bytes | None:
    """
    Rasterize a chart to PNG (via vl-convert)

    Returns None (and logs) if rasterization fails.

    Args:
        chart (alt.TopLevelMixin): chart to export
    """
    buffer = io.BytesIO()
    try:
        chart.properties(background=EXPORT_BACKGROUND).save(
            buffer, format="png", scale_factor=EXPORT_SCALE
        )
    except Exception as e:
        logger.error("Failed to export charts: %s", e)
        return None

    return buffer.getvalue()
