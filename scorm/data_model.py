"""
SCORM 1.2 data model store
Closed element vocabulary with access modes and value-domain rules
"""
import logging
import math
import re

from django.conf import settings

from . import errors

logger = logging.getLogger(__name__)


# Access modes
READ_ONLY = 'RO'
READ_WRITE = 'RW'

# Value domains
FREE_TEXT = 'text'
DECIMAL = 'decimal'
VOCABULARY = 'vocabulary'

ELEMENTS = {
    'cmi.core.student_id': (READ_ONLY, FREE_TEXT),
    'cmi.core.student_name': (READ_ONLY, FREE_TEXT),
    'cmi.core.lesson_location': (READ_WRITE, FREE_TEXT),
    'cmi.core.credit': (READ_ONLY, VOCABULARY),
    'cmi.core.lesson_status': (READ_WRITE, VOCABULARY),
    'cmi.core.entry': (READ_ONLY, VOCABULARY),
    'cmi.core.score.raw': (READ_WRITE, DECIMAL),
    'cmi.core.score.max': (READ_WRITE, DECIMAL),
    'cmi.core.score.min': (READ_WRITE, DECIMAL),
    'cmi.core.total_time': (READ_WRITE, FREE_TEXT),
    'cmi.core.session_time': (READ_WRITE, FREE_TEXT),
    'cmi.core.exit': (READ_WRITE, VOCABULARY),
    'cmi.suspend_data': (READ_WRITE, FREE_TEXT),
    'cmi.launch_data': (READ_ONLY, FREE_TEXT),
    'cmi.comments': (READ_WRITE, FREE_TEXT),
    'cmi.comments_from_lms': (READ_ONLY, FREE_TEXT),
    'cmi.student_data.mastery_score': (READ_ONLY, FREE_TEXT),
    'cmi.student_data.max_time_allowed': (READ_ONLY, FREE_TEXT),
    'cmi.student_data.time_limit_action': (READ_ONLY, VOCABULARY),
}

VOCABULARIES = {
    'cmi.core.lesson_status': (
        'passed', 'completed', 'failed', 'incomplete', 'browsed', 'not attempted',
    ),
    'cmi.core.exit': ('time-out', 'suspend', 'logout', ''),
    'cmi.core.credit': ('credit', 'no-credit'),
    'cmi.core.entry': ('ab-initio', 'resume', ''),
    'cmi.student_data.time_limit_action': (
        'exit,message', 'exit,no message', 'continue,message', 'continue,no message',
    ),
}

# Plain decimal or exponent notation, no surrounding whitespace
DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def default_values():
    """Snapshot loaded by every LMSInitialize before the seed is applied"""
    return {
        'cmi.core.lesson_status': 'not attempted',
        'cmi.core.lesson_location': '',
        'cmi.core.score.raw': '',
        'cmi.core.score.max': '100',
        'cmi.core.score.min': '0',
        'cmi.core.session_time': '00:00:00',
        'cmi.core.total_time': '00:00:00',
        'cmi.core.exit': '',
        'cmi.core.credit': 'credit',
        'cmi.core.entry': 'ab-initio',
        'cmi.suspend_data': '',
        'cmi.launch_data': '',
        'cmi.comments': '',
        'cmi.comments_from_lms': '',
        'cmi.core.student_id': getattr(settings, 'SCORM_STUDENT_ID', 'student_001'),
        'cmi.core.student_name': getattr(settings, 'SCORM_STUDENT_NAME', 'John Doe'),
        'cmi.student_data.mastery_score': '80',
        'cmi.student_data.max_time_allowed': '',
        'cmi.student_data.time_limit_action': 'continue,no message',
    }


def resolve_element(name):
    """
    Map a caller-supplied name onto the vocabulary.

    Returns the element name, or None when it is not a 1.2 element we expose.
    """
    if isinstance(name, str) and name in ELEMENTS:
        return name
    return None


def is_read_only(element):
    return ELEMENTS[element][0] == READ_ONLY


def is_decimal(value):
    if not isinstance(value, str) or not DECIMAL_PATTERN.fullmatch(value):
        return False
    return math.isfinite(float(value))


def validate_value(element, value):
    """
    Check a write against the element's access mode and domain.

    Returns an error code from the registry; '0' means the write is allowed.
    """
    access, domain = ELEMENTS[element]

    if access == READ_ONLY:
        return errors.ELEMENT_READ_ONLY

    if not isinstance(value, str):
        return errors.INCORRECT_DATA_TYPE

    if domain == VOCABULARY and value not in VOCABULARIES[element]:
        return errors.INCORRECT_DATA_TYPE

    if domain == DECIMAL and not is_decimal(value):
        return errors.INCORRECT_DATA_TYPE

    return errors.NO_ERROR


class DataModel:
    """
    Current element values for one session.
    """

    def __init__(self):
        self.values = {}

    def load(self, seed=None):
        """
        Reset to defaults, then apply seed values for vocabulary elements.

        Returns the seed keys that were ignored because they are not elements.
        """
        self.values = default_values()
        ignored = []

        for name, value in (seed or {}).items():
            element = resolve_element(name)
            if element is None:
                ignored.append(name)
                continue
            self.values[element] = '' if value is None else str(value)

        if ignored:
            logger.warning(f"Ignoring seed values for unknown elements: {ignored}")

        return ignored

    def get(self, element):
        return self.values.get(element, '')

    def set(self, element, value):
        self.values[element] = value

    def snapshot(self):
        return dict(self.values)

    def __contains__(self, element):
        return element in self.values

    def __len__(self):
        return len(self.values)
