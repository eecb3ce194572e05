import typing as ty
from dataclasses import dataclass

from thds.core import log

from .conf import LOG_DISPATCH
from .data import TrackingData
from .errors import MissingEventError
from .merge import merge_mappings
from .types import Fields, Options, Trigger, noop_trigger

logger = log.getLogger(__name__)


def _require_event(event: ty.Any) -> str:
    if not event or not isinstance(event, str):
        raise MissingEventError(event)
    return event


@dataclass(frozen=True)
class BoundTrigger:
    """The trigger a provider publishes: a resolved TrackingData snapshot
    plus the downstream delivery function it holds.

    Calling it fills in the provider's defaults around whatever the call
    site passed, then hands the result to the downstream trigger. A new one
    is built every time a provider publishes, so an old reference keeps
    dispatching with the configuration it was created with.
    """

    data: TrackingData

    @property
    def downstream(self) -> Trigger:
        return self.data.trigger or noop_trigger

    def resolve(
        self,
        event: str,
        fields: ty.Optional[Fields] = None,
        options: ty.Optional[Options] = None,
    ) -> ty.Tuple[ty.Dict[str, str], ty.Dict[str, str]]:
        """The (fields, options) that calling this trigger would deliver, without delivering them."""
        event = _require_event(event)
        return (
            merge_mappings(self.data.fields, self.data.event_fields.get(event), fields),
            merge_mappings(self.data.options, self.data.event_options.get(event), options),
        )

    def schema_for(self, event: str) -> ty.Dict[str, ty.Any]:
        """Global schema overlaid with the schema registered for this event.

        Schema is never sent along with an event; this is for callers that want to attach it themselves.
        """
        event = _require_event(event)
        return merge_mappings(self.data.schema, self.data.event_schema.get(event))

    def __call__(
        self,
        event: str,
        fields: ty.Optional[Fields] = None,
        options: ty.Optional[Options] = None,
    ) -> None:
        effective_fields, effective_options = self.resolve(event, fields, options)
        lvl = logger.info if LOG_DISPATCH() else logger.debug
        lvl("Dispatching tracking event", event=event)
        # downstream failures are the caller's to handle.
        self.downstream(event, effective_fields, effective_options)
