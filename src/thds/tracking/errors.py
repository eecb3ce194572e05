class TrackingError(Exception):
    """Base class for errors raised by thds.tracking."""


class MissingEventError(TrackingError, ValueError):
    """A trigger was called without a usable event name.

    This is a programming error at the call site; the downstream trigger is never invoked.
    """

    def __init__(self, event: object = None):
        super().__init__(f"event is a required parameter (got {event!r})")
        self.event = event


class UnpublishedProviderError(TrackingError, RuntimeError):
    """The configuration of a TrackingProvider was read before the provider was ever published."""
