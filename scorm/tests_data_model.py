"""
Tests for the SCORM 1.2 data model vocabulary and value domains.
"""

from django.test import SimpleTestCase, override_settings

from .data_model import (
    ELEMENTS, VOCABULARIES, DataModel, default_values, is_decimal, is_read_only,
    resolve_element, validate_value,
)


class VocabularyTestCase(SimpleTestCase):

    def test_vocabulary_has_nineteen_elements(self):
        self.assertEqual(len(ELEMENTS), 19)

    def test_defaults_cover_the_whole_vocabulary(self):
        self.assertEqual(set(default_values()), set(ELEMENTS))

    def test_resolve_element_is_total(self):
        self.assertEqual(resolve_element('cmi.core.lesson_status'), 'cmi.core.lesson_status')
        self.assertIsNone(resolve_element('cmi.core.lesson_mode'))
        self.assertIsNone(resolve_element('cmi.completion_status'))
        self.assertIsNone(resolve_element(''))
        self.assertIsNone(resolve_element(None))
        self.assertIsNone(resolve_element(42))

    def test_read_only_elements(self):
        read_only = {name for name in ELEMENTS if is_read_only(name)}
        self.assertEqual(read_only, {
            'cmi.core.credit',
            'cmi.core.entry',
            'cmi.core.student_id',
            'cmi.core.student_name',
            'cmi.student_data.mastery_score',
            'cmi.student_data.max_time_allowed',
            'cmi.student_data.time_limit_action',
            'cmi.launch_data',
            'cmi.comments_from_lms',
        })

    @override_settings(SCORM_STUDENT_ID='learner_42', SCORM_STUDENT_NAME='Ada Lovelace')
    def test_student_identity_comes_from_settings(self):
        values = default_values()
        self.assertEqual(values['cmi.core.student_id'], 'learner_42')
        self.assertEqual(values['cmi.core.student_name'], 'Ada Lovelace')


class ValidateValueTestCase(SimpleTestCase):

    def test_read_only_is_rejected_before_domain(self):
        self.assertEqual(validate_value('cmi.core.student_id', 'anything'), '403')
        self.assertEqual(validate_value('cmi.core.credit', 'credit'), '403')

    def test_lesson_status_options(self):
        for status in VOCABULARIES['cmi.core.lesson_status']:
            self.assertEqual(validate_value('cmi.core.lesson_status', status), '0')
        self.assertEqual(validate_value('cmi.core.lesson_status', 'bogus'), '405')
        self.assertEqual(validate_value('cmi.core.lesson_status', 'Completed'), '405')
        self.assertEqual(validate_value('cmi.core.lesson_status', 'not_attempted'), '405')

    def test_exit_accepts_blank(self):
        self.assertEqual(validate_value('cmi.core.exit', ''), '0')
        self.assertEqual(validate_value('cmi.core.exit', 'suspend'), '0')
        self.assertEqual(validate_value('cmi.core.exit', 'quit'), '405')

    def test_scores_must_be_finite_numbers(self):
        for value in ('50', '0', '-3', '99.5', '.5', '1e2'):
            self.assertEqual(validate_value('cmi.core.score.raw', value), '0', value)
        for value in ('', 'abc', '50%', ' 50', '50\n', 'NaN', 'inf', '1e999', '1_000'):
            self.assertEqual(validate_value('cmi.core.score.max', value), '405', value)

    def test_free_text_accepts_any_string(self):
        self.assertEqual(validate_value('cmi.suspend_data', ''), '0')
        self.assertEqual(validate_value('cmi.core.lesson_location', 'page=3&x=1'), '0')

    def test_non_string_values_are_a_type_error(self):
        self.assertEqual(validate_value('cmi.comments', 5), '405')
        self.assertEqual(validate_value('cmi.core.score.raw', 50), '405')

    def test_is_decimal(self):
        self.assertTrue(is_decimal('12.25'))
        self.assertFalse(is_decimal(None))


class DataModelTestCase(SimpleTestCase):

    def test_load_applies_seed_over_defaults(self):
        model = DataModel()
        model.load({'cmi.core.lesson_location': 'page_4', 'cmi.core.score.raw': 0})
        self.assertEqual(model.get('cmi.core.lesson_location'), 'page_4')
        self.assertEqual(model.get('cmi.core.score.raw'), '0')
        self.assertEqual(model.get('cmi.core.lesson_status'), 'not attempted')

    def test_load_ignores_elements_outside_vocabulary(self):
        model = DataModel()
        with self.assertLogs('scorm.data_model', level='WARNING'):
            ignored = model.load({'cmi.learner_id': 'x', 'cmi.comments': 'hi'})
        self.assertEqual(ignored, ['cmi.learner_id'])
        self.assertNotIn('cmi.learner_id', model)
        self.assertEqual(len(model), 19)

    def test_load_resets_previous_values(self):
        model = DataModel()
        model.load()
        model.set('cmi.comments', 'first attempt')
        model.load()
        self.assertEqual(model.get('cmi.comments'), '')

    def test_snapshot_is_a_copy(self):
        model = DataModel()
        model.load()
        snapshot = model.snapshot()
        snapshot['cmi.comments'] = 'changed'
        self.assertEqual(model.get('cmi.comments'), '')
