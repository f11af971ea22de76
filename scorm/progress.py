"""
Derived progress view polled by the progress display
"""
import logging
import math

logger = logging.getLogger(__name__)


def _to_float(value, default):
    if value is None or str(value).strip() == '':
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Non-numeric score value in progress view: {value!r}")
        return default
    if not math.isfinite(result):
        return default
    return result


def round_half_up(number):
    return int(math.floor(number + 0.5))


def get_progress(data):
    """
    Build the progress view from a data model snapshot.

    Never mutates ``data``; missing elements fall back to the display defaults.
    """
    status = data.get('cmi.core.lesson_status') or 'not attempted'
    score = _to_float(data.get('cmi.core.score.raw'), 0.0)
    max_score = _to_float(data.get('cmi.core.score.max'), 100.0)

    return {
        'status': status,
        'score': score,
        'maxScore': max_score,
        'percentage': round_half_up(score / max_score * 100) if max_score > 0 else 0,
        'location': data.get('cmi.core.lesson_location') or '',
        'sessionTime': data.get('cmi.core.session_time') or '00:00:00',
        'totalTime': data.get('cmi.core.total_time') or '00:00:00',
    }
