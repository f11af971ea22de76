"""
SCORM run-time session
Owns the lifecycle state, data model, error cell and event log of one attempt
"""
import logging
import uuid

from .data_model import DataModel
from .errors import ErrorCell
from .events import EventLog

logger = logging.getLogger(__name__)


NOT_INITIALIZED = 'not_initialized'
INITIALIZED = 'initialized'
TERMINATED = 'terminated'


class SessionStateError(RuntimeError):
    """Raised when a lifecycle transition is attempted from the wrong state"""
    pass


class ScormSession:
    """
    One attempt: not_initialized -> initialized -> terminated.

    There is no way back; a terminated session stays terminated and a new
    attempt needs a new ScormSession.
    """

    def __init__(self, package=None, seed=None):
        """
        Args:
            package: optional ScormPackage whose data seeds the data model and
                receives every successful write
            seed: optional {element: value} overrides applied on top of the package data
        """
        self.id = str(uuid.uuid4())
        self.state = NOT_INITIALIZED
        self.package = package
        self.seed = dict(seed or {})
        self.data_model = DataModel()
        self.error = ErrorCell()
        self.events = EventLog()

    @property
    def is_active(self):
        return self.state == INITIALIZED

    @property
    def is_terminated(self):
        return self.state == TERMINATED

    def initial_seed(self):
        seed = {}
        if self.package is not None:
            seed.update(self.package.data)
        seed.update(self.seed)
        return seed

    def begin(self):
        if self.state != NOT_INITIALIZED:
            raise SessionStateError(f"Cannot initialize session {self.id} in state {self.state}")

        self.data_model.load(self.initial_seed())
        self.state = INITIALIZED
        logger.info(f"SCORM session {self.id} initialized with {len(self.data_model)} elements")

    def end(self):
        if self.state != INITIALIZED:
            raise SessionStateError(f"Cannot terminate session {self.id} in state {self.state}")

        self.state = TERMINATED
        logger.info(f"SCORM session {self.id} terminated")

    def store(self, element, value):
        """Write a validated value and mirror it into the attached package"""
        self.data_model.set(element, value)
        if self.package is not None:
            self.package.data[element] = value

    def snapshot(self):
        return self.data_model.snapshot()

    def __repr__(self):
        return f"<ScormSession {self.id} {self.state}>"
