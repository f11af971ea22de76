"""
SCORM event audit log
One immutable record per RTE call, kept in call order for the life of a session
"""
import logging
import uuid
from collections import namedtuple

from django.utils import timezone

logger = logging.getLogger(__name__)


INITIALIZE = 'initialize'
TERMINATE = 'terminate'
GET_VALUE = 'getValue'
SET_VALUE = 'setValue'
COMMIT = 'commit'
GET_ERROR_STRING = 'getErrorString'
GET_DIAGNOSTIC = 'getDiagnostic'

EVENT_TYPES = (
    INITIALIZE, TERMINATE, GET_VALUE, SET_VALUE, COMMIT, GET_ERROR_STRING, GET_DIAGNOSTIC,
)


_EventBase = namedtuple(
    '_EventBase',
    ['id', 'timestamp', 'type', 'element', 'value', 'success', 'error_code'],
)


class ScormEvent(_EventBase):
    __slots__ = ()

    @property
    def description(self):
        return describe_event(self)

    def to_dict(self):
        data = {
            'id': self.id,
            'timestamp': self.timestamp.isoformat(),
            'type': self.type,
            'success': self.success,
            'errorCode': self.error_code,
            'description': self.description,
        }
        if self.element is not None:
            data['element'] = self.element
        if self.value is not None:
            data['value'] = self.value
        return data


def describe_event(event):
    """Human readable one-liner used by the event display panel"""
    if event.type == SET_VALUE and event.element and event.value:
        return f'Set {event.element} = "{event.value}"'
    if event.type == GET_VALUE and event.element:
        if event.value:
            return f'Get {event.element} = "{event.value}"'
        return f'Get {event.element}'
    if event.type == INITIALIZE:
        return 'SCORM session initialized' if event.success else 'Failed to initialize SCORM session'
    if event.type == TERMINATE:
        return 'SCORM session terminated' if event.success else 'Failed to terminate SCORM session'
    if event.type == COMMIT:
        return 'Data committed to LMS' if event.success else 'Failed to commit data'
    return f"{event.type}{'' if event.success else ' (failed)'}"


class EventLog:
    """
    Append-only, never pruned. Display collaborators read it, only the RTE writes it.
    """

    def __init__(self):
        self._events = []

    def record(self, event_type, success, error_code, element=None, value=None):
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown SCORM event type: {event_type}")

        event = ScormEvent(
            id=str(uuid.uuid4()),
            timestamp=timezone.now(),
            type=event_type,
            element=element,
            value=value,
            success=success,
            error_code=error_code,
        )
        self._events.append(event)
        logger.debug(f"SCORM event #{len(self._events)}: {event.description} (error {error_code})")
        return event

    def as_list(self):
        return [event.to_dict() for event in self._events]

    def last(self):
        return self._events[-1] if self._events else None

    def __iter__(self):
        return iter(tuple(self._events))

    def __len__(self):
        return len(self._events)

    def __getitem__(self, index):
        return self._events[index]
