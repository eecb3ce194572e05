"""Nested tracking configuration for analytics instrumentation.

Providers carry default fields, options and schema (global and per event),
plus the trigger that actually delivers events. Nested providers inherit and
selectively override their ancestors, and leaf code fires events through a
single merged trigger.
"""
from thds.core import meta

from . import conf, errors, merge  # noqa: F401
from .consumers import fires, trigger  # noqa: F401
from .data import DEFAULT_CONTEXT, EMPTY_DATA, TrackingContext, TrackingData  # noqa: F401
from .dispatch import BoundTrigger  # noqa: F401
from .errors import MissingEventError, TrackingError, UnpublishedProviderError  # noqa: F401
from .merge import merge_context_data  # noqa: F401
from .provider import TrackingProvider, compose, current, has_provider, provider  # noqa: F401
from .types import Trigger, noop_trigger  # noqa: F401

__version__ = meta.get_version(__name__)
