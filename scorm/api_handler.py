"""
SCORM API Handler
Implements the LMS side of the SCORM 1.2 Run-Time Environment API.

Content calls the eight LMS* methods with strings and always gets a string back.
Failures never raise; they are reported through a "false" or empty result and
the session's error cell, which content polls with LMSGetLastError.
"""
import logging

from . import errors
from . import events
from .data_model import resolve_element, validate_value
from .progress import get_progress
from .session import ScormSession, INITIALIZED, TERMINATED

logger = logging.getLogger(__name__)


def to_sentinel(flag):
    """Native bool -> wire sentinel"""
    return 'true' if flag else 'false'


class ScormAPIHandler:
    """
    Handler for SCORM API calls.

    Exposed to content as both ``API`` and ``API_1484_11``; the second name is a
    compatibility alias only, the behaviour and element set are SCORM 1.2.
    """

    API_NAMES = ('API', 'API_1484_11')

    # Wire method name -> number of string arguments
    RTE_METHODS = {
        'LMSInitialize': 1,
        'LMSFinish': 1,
        'LMSGetValue': 1,
        'LMSSetValue': 2,
        'LMSCommit': 1,
        'LMSGetLastError': 0,
        'LMSGetErrorString': 1,
        'LMSGetDiagnostic': 1,
    }

    def __init__(self, session=None):
        self.session = session if session is not None else ScormSession()

    # Internal operations, native types

    def _fail(self, event_type, code, element=None, value=None):
        self.session.error.set(code)
        self.session.events.record(event_type, False, code, element=element, value=value)
        return code

    def _succeed(self, event_type, element=None, value=None):
        self.session.error.clear()
        self.session.events.record(event_type, True, errors.NO_ERROR, element=element, value=value)

    def initialize(self, parameter):
        if parameter != '':
            self._fail(events.INITIALIZE, errors.INVALID_ARGUMENT)
            logger.warning(f"SCORM API Initialize called with non-empty parameter {parameter!r}")
            return False

        if self.session.state == INITIALIZED:
            self._fail(events.INITIALIZE, errors.ALREADY_INITIALIZED)
            logger.warning(f"SCORM API already initialized for session {self.session.id}")
            return False

        if self.session.state == TERMINATED:
            self._fail(events.INITIALIZE, errors.GENERAL_EXCEPTION)
            logger.warning(f"SCORM API Initialize called after termination of session {self.session.id}")
            return False

        self.session.begin()
        self._succeed(events.INITIALIZE)
        return True

    def terminate(self, parameter):
        if parameter != '':
            self._fail(events.TERMINATE, errors.INVALID_ARGUMENT)
            logger.warning(f"SCORM API Finish called with non-empty parameter {parameter!r}")
            return False

        if not self.session.is_active:
            self._fail(events.TERMINATE, errors.NOT_INITIALIZED)
            logger.warning(f"SCORM API Finish called while session {self.session.id} is {self.session.state}")
            return False

        self.session.end()
        self._succeed(events.TERMINATE)
        return True

    def get_value(self, element):
        if not self.session.is_active:
            self._fail(events.GET_VALUE, errors.NOT_INITIALIZED, element=element)
            logger.warning(f"SCORM API GetValue called before initialization for element: {element}")
            return ''

        resolved = resolve_element(element)
        if resolved is None:
            self._fail(events.GET_VALUE, errors.UNKNOWN_ELEMENT, element=element)
            logger.warning(f"SCORM API GetValue for unknown element: {element}")
            return ''

        value = self.session.data_model.get(resolved)
        self._succeed(events.GET_VALUE, element=resolved, value=value)
        logger.info(f"SCORM API GetValue({resolved}) -> '{value}'")
        return value

    def set_value(self, element, value):
        if not self.session.is_active:
            self._fail(events.SET_VALUE, errors.NOT_INITIALIZED, element=element, value=value)
            logger.warning(f"SCORM API SetValue called before initialization for element: {element}")
            return False

        resolved = resolve_element(element)
        if resolved is None:
            self._fail(events.SET_VALUE, errors.UNKNOWN_ELEMENT, element=element, value=value)
            logger.warning(f"SCORM API SetValue for unknown element: {element}")
            return False

        code = validate_value(resolved, value)
        if code != errors.NO_ERROR:
            self._fail(events.SET_VALUE, code, element=resolved, value=value)
            logger.warning(f"SCORM API SetValue({resolved}, {value!r}) rejected with {code}")
            return False

        self.session.store(resolved, value)
        self._succeed(events.SET_VALUE, element=resolved, value=value)
        logger.info(f"SCORM API SetValue({resolved}, '{value}') - stored successfully")
        return True

    def commit(self, parameter):
        if parameter != '':
            self._fail(events.COMMIT, errors.INVALID_ARGUMENT)
            logger.warning(f"SCORM API Commit called with non-empty parameter {parameter!r}")
            return False

        if not self.session.is_active:
            self._fail(events.COMMIT, errors.NOT_INITIALIZED)
            logger.warning(f"SCORM API Commit called while session {self.session.id} is {self.session.state}")
            return False

        # Nothing is persisted; commit is only a checkpoint acknowledgement
        self._succeed(events.COMMIT)
        return True

    def get_last_error(self):
        return self.session.error.code

    def get_error_string(self, error_code):
        message = errors.get_error_string(error_code)
        self.session.events.record(events.GET_ERROR_STRING, True, errors.NO_ERROR, value=message)
        logger.info(f"SCORM API GetErrorString({error_code}) -> {message}")
        return message

    def get_diagnostic(self, error_code):
        # An empty code asks about the last error
        if error_code == '':
            error_code = self.session.error.code
        diagnostic = errors.get_diagnostic(error_code)
        self.session.events.record(events.GET_DIAGNOSTIC, True, errors.NO_ERROR, value=diagnostic)
        return diagnostic

    # Wire boundary, strings in and strings out

    def LMSInitialize(self, parameter):
        return to_sentinel(self.initialize(parameter))

    def LMSFinish(self, parameter):
        return to_sentinel(self.terminate(parameter))

    def LMSGetValue(self, element):
        return self.get_value(element)

    def LMSSetValue(self, element, value):
        return to_sentinel(self.set_value(element, value))

    def LMSCommit(self, parameter):
        return to_sentinel(self.commit(parameter))

    def LMSGetLastError(self):
        return self.get_last_error()

    def LMSGetErrorString(self, error_code):
        return self.get_error_string(error_code)

    def LMSGetDiagnostic(self, error_code):
        return self.get_diagnostic(error_code)

    def call(self, method, args):
        """
        Dispatch a wire call by name.

        Raises ValueError for names outside the RTE or a wrong argument count;
        those are transport errors, not RTE errors, and never touch the session.
        """
        if method not in self.RTE_METHODS:
            raise ValueError(f"Unknown SCORM API method: {method}")

        args = list(args or [])
        if len(args) != self.RTE_METHODS[method]:
            raise ValueError(
                f"{method} takes {self.RTE_METHODS[method]} argument(s), got {len(args)}"
            )

        return getattr(self, method)(*args)

    # Observation, read-only

    def get_progress(self):
        return get_progress(self.session.snapshot())

    def get_events(self):
        return self.session.events.as_list()

    def get_data(self):
        return self.session.snapshot()
