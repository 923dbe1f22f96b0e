class CampusTourError(RuntimeError):
    """Base class for failures raised by the campus tour services."""


class PersistenceError(CampusTourError):
    """The record store could not be reached or rejected a write."""


class NotificationError(CampusTourError):
    """The outbound mail server rejected the feedback notification."""


class IntakeError(CampusTourError):
    """An uploaded file could not be written to the upload folder."""
