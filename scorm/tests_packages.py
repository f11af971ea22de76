"""
Tests for simulated package ingestion.
"""

from django.test import SimpleTestCase

from .packages import PackageUploadError, ScormPackage, simulate_package_upload


class SimulatePackageUploadTestCase(SimpleTestCase):

    def test_zip_upload_produces_package(self):
        package = simulate_package_upload('safety_training.zip')
        self.assertIsInstance(package, ScormPackage)
        self.assertEqual(package.name, 'safety_training')
        self.assertEqual(package.version, '1.2')
        self.assertEqual(package.manifest_url, 'packages/safety_training.zip/imsmanifest.xml')
        self.assertEqual(package.launch_url, 'packages/safety_training.zip/index.html')
        self.assertEqual(package.data, {
            'cmi.core.lesson_status': 'not attempted',
            'cmi.core.score.raw': '0',
            'cmi.core.score.max': '100',
        })

    def test_extension_check_is_case_insensitive(self):
        self.assertEqual(simulate_package_upload('COURSE.ZIP').name, 'COURSE')

    def test_directories_are_stripped(self):
        self.assertEqual(simulate_package_upload('C:\\uploads\\course.zip').filename, 'course.zip')

    def test_non_zip_uploads_are_rejected(self):
        for filename in ('course.pdf', 'course', '.zip', '', None):
            with self.assertRaises(PackageUploadError):
                simulate_package_upload(filename)

    def test_upload_error_is_a_value_error(self):
        self.assertTrue(issubclass(PackageUploadError, ValueError))

    def test_to_dict(self):
        data = simulate_package_upload('course.zip').to_dict()
        self.assertEqual(
            set(data),
            {'id', 'name', 'version', 'uploadDate', 'manifestUrl', 'launchUrl', 'data'},
        )
