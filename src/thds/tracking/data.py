"""The immutable values that flow down a tree of tracking providers.

A TrackingData is the bundle of defaults owned by one provider (after it
has been merged with whatever it inherited). A TrackingContext is what a
provider publishes to everything beneath it: the resolved data, a flag
saying that some provider exists, and the composed trigger that leaf code
should call.
"""
import dataclasses
import typing as ty
from dataclasses import dataclass, field
from types import MappingProxyType

from .types import EventKeyed, Fields, Options, Schema, Trigger, noop_trigger

V = ty.TypeVar("V")


def freeze(mapping: ty.Optional[ty.Mapping[str, V]]) -> ty.Mapping[str, V]:
    """A read-only copy. The caller's mapping is never retained."""
    return MappingProxyType(dict(mapping or {}))


def freeze_keyed(
    keyed: ty.Optional[ty.Mapping[str, ty.Mapping[str, V]]]
) -> ty.Mapping[str, ty.Mapping[str, V]]:
    return MappingProxyType({event: freeze(values) for event, values in (keyed or {}).items()})


_EVENT_KEYED = ("event_fields", "event_options", "event_schema")
_FLAT = ("fields", "options", "schema")


@dataclass(frozen=True)
class TrackingData:
    event_fields: ty.Mapping[str, Fields] = field(default_factory=dict)
    event_options: ty.Mapping[str, Options] = field(default_factory=dict)
    event_schema: EventKeyed = field(default_factory=dict)
    fields: Fields = field(default_factory=dict)
    options: Options = field(default_factory=dict)
    schema: Schema = field(default_factory=dict)
    trigger: ty.Optional[Trigger] = None
    # the original delivery function, never a composed one.

    def __post_init__(self):
        for name in _EVENT_KEYED:
            object.__setattr__(self, name, freeze_keyed(getattr(self, name)))
        for name in _FLAT:
            object.__setattr__(self, name, freeze(getattr(self, name)))

    def to_dict(self) -> ty.Dict[str, ty.Any]:
        """Plain nested dicts, suitable for printing or comparing."""
        d: ty.Dict[str, ty.Any] = dict()
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.name in _EVENT_KEYED:
                d[f.name] = {event: dict(values) for event, values in value.items()}
            elif f.name in _FLAT:
                d[f.name] = dict(value)
            else:
                d[f.name] = value
        return d


EMPTY_DATA = TrackingData()


@dataclass(frozen=True)
class TrackingContext:
    data: TrackingData
    has_provider: bool
    trigger: Trigger


DEFAULT_CONTEXT = TrackingContext(data=EMPTY_DATA, has_provider=False, trigger=noop_trigger)
# what everything sees when there is no provider above it.
