"""
Management command that drives one SCORM 1.2 session the way packaged content
would, then prints the event log and the progress view.

Usage:
    python manage.py run_scorm_session
    python manage.py run_scorm_session --package intro_course.zip
    python manage.py run_scorm_session --steps 25 50 100
    python manage.py run_scorm_session --json
"""
import json

from django.core.management.base import BaseCommand, CommandError

from scorm.api_handler import ScormAPIHandler
from scorm.packages import PackageUploadError, simulate_package_upload
from scorm.session import ScormSession


class Command(BaseCommand):
    help = 'Run a scripted SCORM 1.2 session against the RTE API and show the audit trail'

    def add_arguments(self, parser):
        parser.add_argument(
            '--package',
            help='Name of a (simulated) uploaded ZIP package that seeds the session',
        )
        parser.add_argument(
            '--steps',
            nargs='+',
            type=int,
            default=[25, 50, 75, 100],
            help='Progress percentages reported as cmi.core.score.raw (100 completes the lesson)',
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print events and progress as JSON',
        )

    def handle(self, *args, **options):
        package = None
        if options.get('package'):
            try:
                package = simulate_package_upload(options['package'])
            except PackageUploadError as e:
                raise CommandError(str(e))

        api = ScormAPIHandler(ScormSession(package=package))
        self.play(api, options['steps'])

        if options['json']:
            self.stdout.write(json.dumps({
                'events': api.get_events(),
                'progress': api.get_progress(),
                'data': api.get_data(),
            }, indent=2))
            return

        self.stdout.write(self.style.SUCCESS(f"SCORM session {api.session.id} ({api.session.state})"))
        for event in api.get_events():
            line = f"  [{event['errorCode']:>3}] {event['description']}"
            self.stdout.write(line if event['success'] else self.style.WARNING(line))

        progress = api.get_progress()
        self.stdout.write(
            f"Status: {progress['status']}  Score: {progress['score']:g}/{progress['maxScore']:g}"
            f" ({progress['percentage']}%)  Location: {progress['location'] or '-'}"
        )

    def play(self, api, steps):
        if api.LMSInitialize('') != 'true':
            raise CommandError(f"LMSInitialize failed with error {api.LMSGetLastError()}")

        api.LMSSetValue('cmi.core.lesson_status', 'incomplete')
        api.LMSSetValue('cmi.core.lesson_location', 'introduction')
        api.LMSCommit('')

        for percentage in steps:
            if not 0 <= percentage <= 100:
                raise CommandError(f"Progress step {percentage} is outside 0-100")

            api.LMSSetValue('cmi.core.score.raw', str(percentage))
            api.LMSSetValue('cmi.core.lesson_location', f"section_{percentage}")
            if percentage == 100:
                api.LMSSetValue('cmi.core.lesson_status', 'completed')
                api.LMSCommit('')
                api.LMSFinish('')
                return
            api.LMSCommit('')

        api.LMSFinish('')
