"""
Simulated SCORM package ingestion
Nothing is unzipped or parsed; an upload only yields the metadata and seed data
a real manifest would have produced.
"""
import logging
import uuid

from django.utils import timezone

logger = logging.getLogger(__name__)


class PackageUploadError(ValueError):
    """Raised when an upload cannot be treated as a SCORM package"""
    pass


class ScormPackage:
    """
    Metadata of an uploaded package plus the data snapshot it seeds sessions with.
    """

    def __init__(self, name, filename, version='1.2', data=None, package_id=None, upload_date=None):
        self.id = package_id or str(uuid.uuid4())
        self.name = name
        self.filename = filename
        self.version = version
        self.upload_date = upload_date or timezone.now()
        self.manifest_url = f"packages/{filename}/imsmanifest.xml"
        self.launch_url = f"packages/{filename}/index.html"
        self.data = dict(data or {})

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'version': self.version,
            'uploadDate': self.upload_date.isoformat(),
            'manifestUrl': self.manifest_url,
            'launchUrl': self.launch_url,
            'data': dict(self.data),
        }

    def __repr__(self):
        return f"<ScormPackage {self.name} ({self.version})>"


def simulate_package_upload(filename):
    """
    Turn an uploaded file name into a ScormPackage.

    Only ZIP archives are accepted. The version is fixed at 1.2 and the seed
    data is what a freshly imported 1.2 package starts with.
    """
    if not filename or not isinstance(filename, str):
        raise PackageUploadError("A ZIP file containing the SCORM package is required")

    filename = filename.strip().replace('\\', '/').split('/')[-1]
    if not filename.lower().endswith('.zip') or len(filename) == len('.zip'):
        raise PackageUploadError("Please upload a ZIP file containing the SCORM package.")

    package = ScormPackage(
        name=filename[:-len('.zip')],
        filename=filename,
        data={
            'cmi.core.lesson_status': 'not attempted',
            'cmi.core.score.raw': '0',
            'cmi.core.score.max': '100',
        },
    )
    logger.info(f"Simulated SCORM package upload: {package.name} -> {package.launch_url}")
    return package
