"""
Tests for the SCORM 1.2 RTE API surface.
"""

from django.test import SimpleTestCase

from .api_handler import ScormAPIHandler, to_sentinel
from .data_model import ELEMENTS
from .packages import simulate_package_upload
from .session import ScormSession, INITIALIZED, NOT_INITIALIZED, TERMINATED


class ApiTestMixin:

    def setUp(self):
        self.api = ScormAPIHandler()

    def initialized(self):
        self.assertEqual(self.api.LMSInitialize(''), 'true')
        return self.api


class InitializeTestCase(ApiTestMixin, SimpleTestCase):

    def test_initialize_succeeds_once(self):
        self.assertEqual(self.api.LMSInitialize(''), 'true')
        self.assertEqual(self.api.LMSGetLastError(), '0')
        self.assertEqual(self.api.session.state, INITIALIZED)

    def test_second_initialize_fails_with_101(self):
        self.initialized()
        self.assertEqual(self.api.LMSInitialize(''), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '101')
        self.assertEqual(self.api.session.state, INITIALIZED)

    def test_non_empty_parameter_fails_with_201(self):
        for parameter in ('x', ' ', 'true', None):
            api = ScormAPIHandler()
            self.assertEqual(api.LMSInitialize(parameter), 'false')
            self.assertEqual(api.LMSGetLastError(), '201')
            self.assertEqual(api.session.state, NOT_INITIALIZED)

    def test_bad_parameter_is_checked_before_state(self):
        self.initialized()
        self.assertEqual(self.api.LMSInitialize('x'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '201')

    def test_initialize_after_finish_is_refused(self):
        self.initialized()
        self.assertEqual(self.api.LMSFinish(''), 'true')
        self.assertEqual(self.api.LMSInitialize(''), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '101')
        self.assertEqual(self.api.session.state, TERMINATED)

    def test_initialize_loads_defaults(self):
        self.initialized()
        self.assertEqual(self.api.LMSGetValue('cmi.core.lesson_status'), 'not attempted')
        self.assertEqual(self.api.LMSGetValue('cmi.core.score.max'), '100')
        self.assertEqual(self.api.LMSGetValue('cmi.core.entry'), 'ab-initio')
        self.assertEqual(self.api.LMSGetValue('cmi.core.student_id'), 'student_001')
        self.assertEqual(self.api.LMSGetValue('cmi.student_data.time_limit_action'), 'continue,no message')

    def test_initialize_applies_package_seed(self):
        api = ScormAPIHandler(ScormSession(package=simulate_package_upload('demo.zip')))
        self.assertEqual(api.LMSInitialize(''), 'true')
        self.assertEqual(api.LMSGetValue('cmi.core.score.raw'), '0')


class FinishTestCase(ApiTestMixin, SimpleTestCase):

    def test_finish_before_initialize_fails_with_301(self):
        self.assertEqual(self.api.LMSFinish(''), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '301')

    def test_finish_with_parameter_fails_with_201(self):
        self.initialized()
        self.assertEqual(self.api.LMSFinish('now'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '201')
        self.assertEqual(self.api.session.state, INITIALIZED)

    def test_finish_twice_reports_not_initialized(self):
        self.initialized()
        self.assertEqual(self.api.LMSFinish(''), 'true')
        self.assertEqual(self.api.LMSGetLastError(), '0')
        self.assertEqual(self.api.LMSFinish(''), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '301')


class NotInitializedTestCase(ApiTestMixin, SimpleTestCase):

    def assert_not_initialized(self):
        self.assertEqual(self.api.LMSGetValue('cmi.core.lesson_status'), '')
        self.assertEqual(self.api.LMSGetLastError(), '301')
        self.assertEqual(self.api.LMSSetValue('cmi.core.lesson_status', 'completed'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '301')
        self.assertEqual(self.api.LMSCommit(''), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '301')
        self.assertEqual(self.api.LMSFinish(''), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '301')

    def test_calls_before_initialize(self):
        self.assert_not_initialized()

    def test_calls_after_finish_look_the_same(self):
        self.initialized()
        self.api.LMSFinish('')
        self.assert_not_initialized()

    def test_unknown_element_before_initialize_reports_301(self):
        self.assertEqual(self.api.LMSGetValue('cmi.nope'), '')
        self.assertEqual(self.api.LMSGetLastError(), '301')


class GetSetValueTestCase(ApiTestMixin, SimpleTestCase):

    def test_unknown_elements_fail_with_201(self):
        self.initialized()
        for element in ('cmi.core.lesson_mode', 'cmi.completion_status', 'cmi', '', 'CMI.CORE.LESSON_STATUS'):
            self.assertEqual(self.api.LMSGetValue(element), '')
            self.assertEqual(self.api.LMSGetLastError(), '201')
            self.assertEqual(self.api.LMSSetValue(element, 'x'), 'false')
            self.assertEqual(self.api.LMSGetLastError(), '201')

    def test_every_vocabulary_element_is_readable(self):
        self.initialized()
        for element in ELEMENTS:
            self.assertIsInstance(self.api.LMSGetValue(element), str)
            self.assertEqual(self.api.LMSGetLastError(), '0', element)

    def test_student_id_is_read_only(self):
        self.initialized()
        self.assertEqual(self.api.LMSSetValue('cmi.core.student_id', 'anything'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '403')
        self.assertEqual(self.api.LMSGetValue('cmi.core.student_id'), 'student_001')

    def test_lesson_status_domain(self):
        self.initialized()
        self.assertEqual(self.api.LMSSetValue('cmi.core.lesson_status', 'bogus'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '405')
        self.assertEqual(self.api.LMSGetValue('cmi.core.lesson_status'), 'not attempted')

        self.assertEqual(self.api.LMSSetValue('cmi.core.lesson_status', 'completed'), 'true')
        self.assertEqual(self.api.LMSGetLastError(), '0')
        self.assertEqual(self.api.LMSGetValue('cmi.core.lesson_status'), 'completed')

    def test_numeric_domain(self):
        self.initialized()
        self.assertEqual(self.api.LMSSetValue('cmi.core.score.raw', 'fifty'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '405')
        self.assertEqual(self.api.LMSSetValue('cmi.core.score.raw', '87.5'), 'true')
        self.assertEqual(self.api.LMSGetValue('cmi.core.score.raw'), '87.5')

    def test_success_clears_previous_error(self):
        self.initialized()
        self.api.LMSSetValue('cmi.core.student_id', 'x')
        self.assertEqual(self.api.LMSGetLastError(), '403')
        self.api.LMSGetValue('cmi.comments')
        self.assertEqual(self.api.LMSGetLastError(), '0')

    def test_failed_set_leaves_data_untouched(self):
        self.initialized()
        before = self.api.get_data()
        self.api.LMSSetValue('cmi.core.exit', 'crash')
        self.api.LMSSetValue('cmi.launch_data', 'x')
        self.assertEqual(self.api.get_data(), before)

    def test_set_value_propagates_to_package(self):
        package = simulate_package_upload('demo.zip')
        api = ScormAPIHandler(ScormSession(package=package))
        api.LMSInitialize('')
        api.LMSSetValue('cmi.suspend_data', 'A1B2')
        self.assertEqual(package.data['cmi.suspend_data'], 'A1B2')

    def test_results_are_wire_strings(self):
        self.assertEqual(to_sentinel(True), 'true')
        self.assertEqual(to_sentinel(False), 'false')
        self.initialized()
        self.assertIs(type(self.api.LMSSetValue('cmi.comments', 'ok')), str)
        self.assertIs(type(self.api.LMSCommit('')), str)


class CommitTestCase(ApiTestMixin, SimpleTestCase):

    def test_commit(self):
        self.initialized()
        self.assertEqual(self.api.LMSCommit(''), 'true')
        self.assertEqual(self.api.LMSGetLastError(), '0')

    def test_commit_with_parameter_fails_with_201(self):
        self.initialized()
        self.assertEqual(self.api.LMSCommit('x'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '201')

    def test_commit_parameter_checked_before_state(self):
        self.assertEqual(self.api.LMSCommit('x'), 'false')
        self.assertEqual(self.api.LMSGetLastError(), '201')


class ErrorQueriesTestCase(ApiTestMixin, SimpleTestCase):

    def test_get_error_string(self):
        self.assertEqual(self.api.LMSGetErrorString('999'), 'Unknown Error')
        self.assertEqual(self.api.LMSGetErrorString('403'), 'Element is read only')

    def test_error_string_is_logged_as_success(self):
        self.api.LMSGetErrorString('999')
        event = self.api.session.events.last()
        self.assertEqual(event.type, 'getErrorString')
        self.assertTrue(event.success)
        self.assertEqual(event.error_code, '0')
        self.assertEqual(event.value, 'Unknown Error')

    def test_error_queries_leave_last_error_alone(self):
        self.api.LMSGetValue('cmi.comments')
        self.api.LMSGetErrorString('301')
        self.api.LMSGetDiagnostic('301')
        self.assertEqual(self.api.LMSGetLastError(), '301')

    def test_get_last_error_is_not_logged(self):
        self.api.LMSGetLastError()
        self.api.LMSGetLastError()
        self.assertEqual(len(self.api.session.events), 0)

    def test_get_diagnostic(self):
        self.assertEqual(self.api.LMSGetDiagnostic('201'), 'Diagnostic information for error 201')
        event = self.api.session.events.last()
        self.assertEqual(event.type, 'getDiagnostic')
        self.assertTrue(event.success)

    def test_blank_diagnostic_describes_last_error(self):
        self.api.LMSFinish('')
        self.assertEqual(self.api.LMSGetDiagnostic(''), 'Diagnostic information for error 301')


class EventLogContractTestCase(ApiTestMixin, SimpleTestCase):

    def test_every_logged_call_adds_exactly_one_event(self):
        calls = [
            lambda: self.api.LMSGetValue('cmi.comments'),
            lambda: self.api.LMSInitialize(''),
            lambda: self.api.LMSInitialize(''),
            lambda: self.api.LMSSetValue('cmi.comments', 'x'),
            lambda: self.api.LMSSetValue('cmi.core.credit', 'no-credit'),
            lambda: self.api.LMSGetValue('cmi.bogus'),
            lambda: self.api.LMSCommit(''),
            lambda: self.api.LMSGetErrorString('0'),
            lambda: self.api.LMSGetDiagnostic('0'),
            lambda: self.api.LMSFinish(''),
            lambda: self.api.LMSFinish(''),
        ]
        for expected, call in enumerate(calls, 1):
            call()
            self.assertEqual(len(self.api.session.events), expected)

    def test_events_record_outcome(self):
        self.initialized()
        self.api.LMSSetValue('cmi.core.student_name', 'Mallory')
        event = self.api.session.events.last()
        self.assertEqual(event.type, 'setValue')
        self.assertEqual(event.element, 'cmi.core.student_name')
        self.assertEqual(event.value, 'Mallory')
        self.assertFalse(event.success)
        self.assertEqual(event.error_code, '403')

    def test_failed_lifecycle_calls_are_described_as_failures(self):
        self.api.LMSInitialize('x')
        self.api.LMSFinish('')
        self.api.LMSCommit('')
        self.assertEqual(
            [event.description for event in self.api.session.events],
            ['Failed to initialize SCORM session', 'Failed to terminate SCORM session', 'Failed to commit data'],
        )
        self.assertEqual([event.success for event in self.api.session.events], [False, False, False])

    def test_get_value_event_carries_the_value(self):
        self.initialized()
        self.api.LMSGetValue('cmi.core.lesson_status')
        event = self.api.session.events.last()
        self.assertEqual(event.value, 'not attempted')


class DispatchTestCase(ApiTestMixin, SimpleTestCase):

    def test_call_dispatches_wire_methods(self):
        self.assertEqual(self.api.call('LMSInitialize', ['']), 'true')
        self.assertEqual(self.api.call('LMSSetValue', ['cmi.core.score.raw', '50']), 'true')
        self.assertEqual(self.api.call('LMSGetLastError', []), '0')

    def test_call_rejects_unknown_methods(self):
        for method in ('Initialize', 'get_value', '__init__', 'call', ''):
            with self.assertRaises(ValueError):
                self.api.call(method, [''])
        self.assertEqual(len(self.api.session.events), 0)

    def test_call_checks_argument_count(self):
        with self.assertRaises(ValueError):
            self.api.call('LMSSetValue', ['cmi.comments'])
        with self.assertRaises(ValueError):
            self.api.call('LMSGetLastError', ['0'])

    def test_both_api_names_are_exposed(self):
        self.assertEqual(ScormAPIHandler.API_NAMES, ('API', 'API_1484_11'))


class ScenarioTestCase(ApiTestMixin, SimpleTestCase):

    def test_scored_session(self):
        self.assertEqual(self.api.LMSInitialize(''), 'true')
        self.assertEqual(self.api.LMSSetValue('cmi.core.score.raw', '50'), 'true')
        self.assertEqual(self.api.LMSSetValue('cmi.core.score.max', '100'), 'true')
        self.assertEqual(self.api.get_progress()['percentage'], 50)
        self.assertEqual(self.api.LMSFinish(''), 'true')
        self.assertEqual(self.api.LMSGetValue('cmi.core.score.raw'), '')
        self.assertEqual(self.api.LMSGetLastError(), '301')
