"""
Tests for the SCORM player HTTP endpoints.
"""

import json
import uuid

from django.core.cache import cache
from django.test import SimpleTestCase
from django.urls import reverse


class PlayerViewsTestCase(SimpleTestCase):

    def setUp(self):
        cache.clear()

    def post_json(self, url, payload=None):
        body = json.dumps(payload) if payload is not None else ''
        return self.client.post(url, data=body, content_type='application/json')

    def create_player(self, payload=None):
        response = self.post_json(reverse('scorm:create_player'), payload)
        self.assertEqual(response.status_code, 201)
        return response.json()['data']['player_id']

    def rte(self, player_id, method, *args, api_name='API'):
        url = reverse('scorm:rte_call', kwargs={'player_id': player_id, 'api_name': api_name})
        return self.post_json(url, {'method': method, 'args': list(args)})

    def result(self, player_id, method, *args, api_name='API'):
        response = self.rte(player_id, method, *args, api_name=api_name)
        self.assertEqual(response.status_code, 200, response.content)
        return response.json()['data']

    def test_create_player_without_body(self):
        response = self.post_json(reverse('scorm:create_player'))
        self.assertEqual(response.status_code, 201)
        data = response.json()['data']
        self.assertEqual(data['api_names'], ['API', 'API_1484_11'])
        self.assertIsNone(data['package'])

    def test_create_player_with_package(self):
        response = self.post_json(reverse('scorm:create_player'), {'package_name': 'course.zip'})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['data']['package']['name'], 'course')

    def test_create_player_rejects_non_zip(self):
        response = self.post_json(reverse('scorm:create_player'), {'package_name': 'course.pdf'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error_type'], 'validation_error')

    def test_create_player_rejects_invalid_json(self):
        response = self.client.post(
            reverse('scorm:create_player'), data='{not json', content_type='application/json',
        )
        self.assertEqual(response.status_code, 400)

    def test_session_state_persists_between_requests(self):
        player_id = self.create_player()
        self.assertEqual(self.result(player_id, 'LMSInitialize', ''), {'result': 'true', 'error': '0'})
        self.assertEqual(
            self.result(player_id, 'LMSSetValue', 'cmi.core.lesson_status', 'completed'),
            {'result': 'true', 'error': '0'},
        )
        self.assertEqual(self.result(player_id, 'LMSGetValue', 'cmi.core.lesson_status')['result'], 'completed')

    def test_both_api_names_drive_the_same_session(self):
        player_id = self.create_player()
        self.result(player_id, 'LMSInitialize', '', api_name='API')
        second = self.result(player_id, 'LMSInitialize', '', api_name='API_1484_11')
        self.assertEqual(second, {'result': 'false', 'error': '101'})

    def test_rte_failures_are_not_http_errors(self):
        player_id = self.create_player()
        self.assertEqual(
            self.result(player_id, 'LMSGetValue', 'cmi.core.lesson_status'),
            {'result': '', 'error': '301'},
        )

    def test_numeric_arguments_are_stringified(self):
        player_id = self.create_player()
        self.result(player_id, 'LMSInitialize', '')
        self.assertEqual(self.result(player_id, 'LMSSetValue', 'cmi.core.score.raw', 75)['result'], 'true')
        self.assertEqual(self.result(player_id, 'LMSGetValue', 'cmi.core.score.raw')['result'], '75')

    def test_malformed_calls_are_rejected(self):
        player_id = self.create_player()
        self.assertEqual(self.rte(player_id, 'Initialize', '').status_code, 400)
        self.assertEqual(self.rte(player_id, 'LMSSetValue', 'cmi.comments').status_code, 400)
        self.assertEqual(self.rte(player_id, 'LMSSetValue', 'cmi.comments', None).status_code, 400)
        self.assertEqual(self.rte(player_id, 'LMSInitialize', True).status_code, 400)

    def test_unknown_api_name_is_not_found(self):
        player_id = self.create_player()
        self.assertEqual(self.rte(player_id, 'LMSInitialize', '', api_name='API_2').status_code, 404)

    def test_unknown_player_is_not_found(self):
        missing = uuid.uuid4()
        self.assertEqual(self.rte(missing, 'LMSInitialize', '').status_code, 404)
        self.assertEqual(
            self.client.get(reverse('scorm:player_progress', kwargs={'player_id': missing})).status_code, 404,
        )

    def test_rte_endpoint_only_accepts_post(self):
        player_id = self.create_player()
        url = reverse('scorm:rte_call', kwargs={'player_id': player_id, 'api_name': 'API'})
        self.assertEqual(self.client.get(url).status_code, 405)

    def test_progress_events_and_data_views(self):
        player_id = self.create_player({'package_name': 'course.zip'})
        self.result(player_id, 'LMSInitialize', '')
        self.result(player_id, 'LMSSetValue', 'cmi.core.score.raw', '50')
        self.result(player_id, 'LMSSetValue', 'cmi.core.score.max', '100')

        progress = self.client.get(reverse('scorm:player_progress', kwargs={'player_id': player_id})).json()
        self.assertEqual(progress['data']['percentage'], 50)

        events = self.client.get(reverse('scorm:player_events', kwargs={'player_id': player_id})).json()
        self.assertEqual([e['type'] for e in events['data']['events']], ['initialize', 'setValue', 'setValue'])
        self.assertEqual(events['data']['events'][1]['description'], 'Set cmi.core.score.raw = "50"')

        data = self.client.get(reverse('scorm:player_data', kwargs={'player_id': player_id})).json()['data']
        self.assertEqual(data['state'], 'initialized')
        self.assertEqual(data['values']['cmi.core.score.raw'], '50')
        self.assertEqual(data['package']['data']['cmi.core.score.raw'], '50')

    def test_get_last_error_is_not_logged_over_http(self):
        player_id = self.create_player()
        self.result(player_id, 'LMSGetLastError')
        events = self.client.get(reverse('scorm:player_events', kwargs={'player_id': player_id})).json()
        self.assertEqual(events['data']['events'], [])
