"""How a provider's own configuration combines with what it inherited.

Precedence is always the same: whatever is closer to the leaf wins.
That means local over ancestor, and, at trigger time, call-site over
per-event over global.

- fields, options and schema are merged shallowly as whole maps.
- event_fields, event_options and event_schema are merged per event name:
  an event defined on both sides gets its inner maps merged (local wins per
  inner key); an event defined on only one side is kept as it is.
- the trigger is inherited unless the local bundle supplies one.

Nothing here mutates its inputs.
"""
import typing as ty

from .data import TrackingData

K = ty.TypeVar("K")
V = ty.TypeVar("V")


def merge_mappings(*mappings: ty.Optional[ty.Mapping[K, V]]) -> ty.Dict[K, V]:
    """A new dict containing every key of every mapping. When a key appears
    in more than one, the value from the later mapping is the one kept.

    None is treated as empty.
    """
    merged: ty.Dict[K, V] = dict()
    for mapping in mappings:
        if mapping:
            for key, value in mapping.items():
                merged[key] = value
    return merged


def merge_keyed(
    ancestor: ty.Mapping[str, ty.Mapping[K, V]], local: ty.Mapping[str, ty.Mapping[K, V]]
) -> ty.Dict[str, ty.Dict[K, V]]:
    """Merge two event-keyed maps event by event, local winning per inner key."""
    merged = {event: dict(values) for event, values in ancestor.items()}
    for event, values in local.items():
        merged[event] = merge_mappings(ancestor.get(event), values)
    return merged


def merge_context_data(
    local: ty.Optional[TrackingData],
    ancestor: ty.Optional[TrackingData],
    overwrite: bool = False,
) -> ty.Optional[TrackingData]:
    """Combine a provider's locally supplied bundle with the resolved bundle of its nearest ancestor.

    With `overwrite`, the local bundle replaces the ancestor's outright
    (and the ancestor's is passed through if there is no local bundle).
    Otherwise a missing side is simply absent and the result is the other
    side; when both are present they are merged as described at the top
    of this module. If both are None, so is the result.
    """
    if overwrite:
        return local if local is not None else ancestor
    if ancestor is None:
        return local
    if local is None:
        return ancestor
    return TrackingData(
        event_fields=merge_keyed(ancestor.event_fields, local.event_fields),
        event_options=merge_keyed(ancestor.event_options, local.event_options),
        event_schema=merge_keyed(ancestor.event_schema, local.event_schema),
        fields=merge_mappings(ancestor.fields, local.fields),
        options=merge_mappings(ancestor.options, local.options),
        schema=merge_mappings(ancestor.schema, local.schema),
        trigger=local.trigger if local.trigger is not None else ancestor.trigger,
    )
