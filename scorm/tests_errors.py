"""
Tests for the SCORM 1.2 error code registry.
"""

from django.test import SimpleTestCase

from . import errors
from .errors import ErrorCell, get_diagnostic, get_error_string


class ErrorRegistryTestCase(SimpleTestCase):

    def test_registry_is_the_closed_set_of_eleven_codes(self):
        self.assertEqual(
            sorted(errors.SCORM_12_ERRORS, key=int),
            ['0', '101', '201', '202', '203', '301', '401', '402', '403', '404', '405'],
        )

    def test_known_codes_resolve_to_messages(self):
        self.assertEqual(get_error_string('0'), 'No Error')
        self.assertEqual(get_error_string('301'), 'Not initialized')
        self.assertEqual(get_error_string('403'), 'Element is read only')
        self.assertEqual(get_error_string('405'), 'Incorrect Data Type')

    def test_unknown_codes_fall_back(self):
        self.assertEqual(get_error_string('999'), 'Unknown Error')
        self.assertEqual(get_error_string(''), 'Unknown Error')
        self.assertEqual(get_error_string('abc'), 'Unknown Error')

    def test_unknown_element_shares_invalid_argument_code(self):
        self.assertEqual(errors.UNKNOWN_ELEMENT, '201')
        self.assertEqual(errors.UNKNOWN_ELEMENT, errors.INVALID_ARGUMENT)

    def test_diagnostic_is_derived_from_code(self):
        self.assertEqual(get_diagnostic('201'), 'Diagnostic information for error 201')


class ErrorCellTestCase(SimpleTestCase):

    def test_starts_clear(self):
        self.assertEqual(ErrorCell().code, '0')

    def test_set_overwrites_instead_of_stacking(self):
        cell = ErrorCell()
        cell.set('301')
        cell.set('403')
        self.assertEqual(cell.code, '403')
        cell.clear()
        self.assertEqual(str(cell), '0')

    def test_unregistered_code_is_recorded_as_general_exception(self):
        cell = ErrorCell()
        with self.assertLogs('scorm.errors', level='ERROR'):
            cell.set('999')
        self.assertEqual(cell.code, '101')
