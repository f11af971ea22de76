"""
SCORM 1.2 error code registry
Fixed code -> message table plus the single "last error" cell of a session
"""
import logging

logger = logging.getLogger(__name__)


NO_ERROR = '0'
GENERAL_EXCEPTION = '101'
INVALID_ARGUMENT = '201'
NOT_INITIALIZED = '301'
ELEMENT_READ_ONLY = '403'
INCORRECT_DATA_TYPE = '405'

# 1.2 has no dedicated "already initialized" code, LMSInitialize reports 101
ALREADY_INITIALIZED = GENERAL_EXCEPTION
# Unknown data model elements share the invalid-argument code
UNKNOWN_ELEMENT = INVALID_ARGUMENT

SCORM_12_ERRORS = {
    '0': 'No Error',
    '101': 'General Exception',
    '201': 'Invalid argument error',
    '202': 'Element cannot have children',
    '203': 'Element not an array - cannot have count',
    '301': 'Not initialized',
    '401': 'Not implemented error',
    '402': 'Invalid set value, element is a keyword',
    '403': 'Element is read only',
    '404': 'Element is write only',
    '405': 'Incorrect Data Type',
}

UNKNOWN_ERROR = 'Unknown Error'


def get_error_string(error_code):
    """Message for a code, 'Unknown Error' for anything outside the table"""
    return SCORM_12_ERRORS.get(str(error_code), UNKNOWN_ERROR)


def get_diagnostic(error_code):
    return f"Diagnostic information for error {error_code}"


class ErrorCell:
    """
    Holds the current error code. Every RTE call overwrites it, it is never stacked.
    """

    def __init__(self):
        self.code = NO_ERROR

    def set(self, code):
        if code not in SCORM_12_ERRORS:
            # Only registry codes are ever reported to content
            logger.error(f"Refusing to record unregistered SCORM error code {code!r}")
            code = GENERAL_EXCEPTION
        self.code = code
        return code

    def clear(self):
        self.code = NO_ERROR

    def __str__(self):
        return self.code

    def __repr__(self):
        return f"ErrorCell({self.code!r})"
