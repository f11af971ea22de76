"""
Tests for request payload type guards.
"""

from django.test import SimpleTestCase

from .utils.type_guards import safe_get_dict, safe_get_list, safe_get_string, safe_json_loads


class TypeGuardsTestCase(SimpleTestCase):

    def test_safe_json_loads(self):
        self.assertEqual(safe_json_loads(b'{"method": "LMSCommit"}'), {'method': 'LMSCommit'})
        self.assertIsNone(safe_json_loads('[1, 2]'))
        self.assertIsNone(safe_json_loads('{broken'))
        self.assertIsNone(safe_json_loads(b'\xff\xfe'))
        self.assertIsNone(safe_json_loads(''))

    def test_safe_getters(self):
        data = {'method': 'LMSGetValue', 'args': ['cmi.comments'], 'seed': {'a': 'b'}, 'n': 3}
        self.assertEqual(safe_get_string(data, 'method'), 'LMSGetValue')
        self.assertEqual(safe_get_string(data, 'n'), '3')
        self.assertEqual(safe_get_string(data, 'missing'), '')
        self.assertEqual(safe_get_list(data, 'args'), ['cmi.comments'])
        self.assertEqual(safe_get_list(data, 'method'), [])
        self.assertEqual(safe_get_dict(data, 'seed'), {'a': 'b'})
        self.assertEqual(safe_get_dict(data, 'args'), {})
        self.assertEqual(safe_get_dict('not a dict', 'seed'), {})
