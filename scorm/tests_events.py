"""
Tests for the SCORM event audit log.
"""

import pickle

from django.test import SimpleTestCase

from . import events
from .events import EventLog, describe_event


class EventLogTestCase(SimpleTestCase):

    def test_record_appends_in_call_order(self):
        log = EventLog()
        log.record(events.INITIALIZE, True, '0')
        log.record(events.SET_VALUE, True, '0', element='cmi.comments', value='hi')
        log.record(events.TERMINATE, True, '0')
        self.assertEqual([event.type for event in log], ['initialize', 'setValue', 'terminate'])
        self.assertEqual(len(log), 3)

    def test_events_are_immutable(self):
        log = EventLog()
        event = log.record(events.COMMIT, True, '0')
        with self.assertRaises(AttributeError):
            event.success = False

    def test_event_ids_are_unique(self):
        log = EventLog()
        ids = {log.record(events.COMMIT, True, '0').id for _ in range(5)}
        self.assertEqual(len(ids), 5)

    def test_unknown_event_type_is_rejected(self):
        with self.assertRaises(ValueError):
            EventLog().record('getLastError', True, '0')

    def test_iteration_does_not_expose_the_backing_list(self):
        log = EventLog()
        log.record(events.COMMIT, True, '0')
        snapshot = list(log)
        snapshot.clear()
        self.assertEqual(len(log), 1)

    def test_to_dict_omits_missing_element_and_value(self):
        event = EventLog().record(events.COMMIT, False, '301')
        data = event.to_dict()
        self.assertEqual(data['type'], 'commit')
        self.assertFalse(data['success'])
        self.assertEqual(data['errorCode'], '301')
        self.assertNotIn('element', data)
        self.assertNotIn('value', data)
        self.assertIn('T', data['timestamp'])

    def test_events_survive_pickling(self):
        log = EventLog()
        log.record(events.GET_VALUE, True, '0', element='cmi.comments', value='')
        restored = pickle.loads(pickle.dumps(log))
        self.assertEqual(restored[0], log[0])


class DescribeEventTestCase(SimpleTestCase):

    def describe(self, event_type, success=True, element=None, value=None):
        event = EventLog().record(event_type, success, '0' if success else '201', element=element, value=value)
        return describe_event(event)

    def test_data_call_descriptions(self):
        self.assertEqual(
            self.describe(events.SET_VALUE, element='cmi.core.lesson_status', value='completed'),
            'Set cmi.core.lesson_status = "completed"',
        )
        self.assertEqual(self.describe(events.GET_VALUE, element='cmi.comments'), 'Get cmi.comments')
        self.assertEqual(
            self.describe(events.GET_VALUE, element='cmi.core.lesson_status', value='incomplete'),
            'Get cmi.core.lesson_status = "incomplete"',
        )
        self.assertEqual(self.describe(events.GET_ERROR_STRING), 'getErrorString')
        self.assertEqual(self.describe(events.SET_VALUE, success=False), 'setValue (failed)')

    def test_lifecycle_descriptions_follow_outcome(self):
        self.assertEqual(self.describe(events.INITIALIZE), 'SCORM session initialized')
        self.assertEqual(self.describe(events.TERMINATE), 'SCORM session terminated')
        self.assertEqual(self.describe(events.COMMIT), 'Data committed to LMS')
        self.assertEqual(self.describe(events.INITIALIZE, success=False), 'Failed to initialize SCORM session')
        self.assertEqual(self.describe(events.TERMINATE, success=False), 'Failed to terminate SCORM session')
        self.assertEqual(self.describe(events.COMMIT, success=False), 'Failed to commit data')
