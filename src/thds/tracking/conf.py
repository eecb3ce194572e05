"""Runtime knobs for tracking dispatch. All are overridable by environment variable."""
from thds.core import config

LOG_DISPATCH = config.item("thds.tracking.log_dispatch", default=False, parse=config.tobool)
# when set, every dispatched event is logged at INFO instead of DEBUG.
DEFAULT_EVENT = config.item("thds.tracking.default_event", "generic.click")
# the event fired by `fires` when it is not given one.
