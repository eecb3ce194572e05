"""Tracking providers, and the stack-scoped tree they form.

A provider takes the context published by its nearest ancestor, merges its
own configuration into it, and publishes the result to its descendants.
`compose` is that step with the parent passed explicitly, and is all you
need if you are threading contexts through your own tree.

For everything else there is `provider`, which uses a StackContext as the
tree: whatever runs inside the `with` block (or decorated function) sees the
published context as `current()`, and nested providers compose against it.
Like any StackContext, this only affects the current thread/green thread.

```
with provider(fields=dict(page="search"), trigger=send_to_collector):
    with provider(event_fields={"datepicker.open": dict(who="me")}):
        current().trigger("datepicker.open", dict(when="now"))
        # send_to_collector("datepicker.open", {"page": "search", "who": "me", "when": "now"}, {})
```
"""
import contextlib
import typing as ty

from thds.core import log
from thds.core.stack_context import StackContext

from .data import DEFAULT_CONTEXT, EMPTY_DATA, TrackingContext, TrackingData
from .dispatch import BoundTrigger
from .errors import UnpublishedProviderError
from .merge import merge_context_data
from .types import EventKeyed, Fields, Options, Schema, Trigger, noop_trigger

logger = log.getLogger(__name__)

_CURRENT: StackContext[TrackingContext] = StackContext("thds.tracking.context", DEFAULT_CONTEXT)


def current() -> TrackingContext:
    """The context published by the nearest enclosing provider, or DEFAULT_CONTEXT."""
    return _CURRENT()


def has_provider() -> bool:
    return current().has_provider


def compose(
    parent: TrackingContext,
    local: ty.Optional[TrackingData] = None,
    overwrite: bool = False,
) -> TrackingContext:
    """Compute the context a provider publishes, given its parent's.

    Any provider marks provider presence, whether or not it changed anything.
    """
    data = merge_context_data(local, parent.data, overwrite) or EMPTY_DATA
    if data.trigger is None:
        data = TrackingData(
            event_fields=data.event_fields,
            event_options=data.event_options,
            event_schema=data.event_schema,
            fields=data.fields,
            options=data.options,
            schema=data.schema,
            trigger=noop_trigger,
        )
    logger.debug(
        "Composed tracking context",
        overwrite=overwrite,
        inherited=parent.has_provider,
        events=sorted({*data.event_fields, *data.event_options, *data.event_schema}),
    )
    return TrackingContext(data=data, has_provider=True, trigger=BoundTrigger(data))


_PROP_NAMES = ("event_fields", "event_options", "event_schema", "fields", "options", "schema", "trigger")


class TrackingProvider:
    """One node in a tree of providers.

    It is *unpublished* until `publish` is first called with its parent's
    context, after which it is *published* and stays that way; every later
    `publish` (the ancestor changed) or `update` (its own props changed)
    recomputes and replaces the published context. Nothing it has already
    published is ever modified.
    """

    def __init__(
        self,
        *,
        event_fields: ty.Optional[ty.Mapping[str, Fields]] = None,
        event_options: ty.Optional[ty.Mapping[str, Options]] = None,
        event_schema: ty.Optional[EventKeyed] = None,
        fields: ty.Optional[Fields] = None,
        options: ty.Optional[Options] = None,
        schema: ty.Optional[Schema] = None,
        trigger: ty.Optional[Trigger] = None,
        overwrite: bool = False,
    ):
        self.props: ty.Dict[str, ty.Any] = dict(
            event_fields=event_fields,
            event_options=event_options,
            event_schema=event_schema,
            fields=fields,
            options=options,
            schema=schema,
            trigger=trigger,
        )
        self.overwrite = overwrite
        self._parent: TrackingContext = DEFAULT_CONTEXT
        self._context: ty.Optional[TrackingContext] = None

    @property
    def local_data(self) -> ty.Optional[TrackingData]:
        """None when no configuration at all was passed to this provider."""
        if all(v is None for v in self.props.values()):
            return None
        return TrackingData(**{k: v for k, v in self.props.items() if v is not None})

    def merge_context_data(
        self, ancestor: ty.Optional[TrackingData] = None
    ) -> ty.Optional[TrackingData]:
        return merge_context_data(self.local_data, ancestor, self.overwrite)

    def publish(self, parent: TrackingContext = DEFAULT_CONTEXT) -> TrackingContext:
        self._parent = parent
        self._context = compose(parent, self.local_data, self.overwrite)
        return self._context

    def update(
        self, *, overwrite: ty.Optional[bool] = None, **props: ty.Any
    ) -> ty.Optional[TrackingContext]:
        """Replace some props, keeping the rest.
        Republishes against the last parent if already published.

        Passing None for a prop clears it.
        """
        unknown = set(props) - set(_PROP_NAMES)
        if unknown:
            raise TypeError(f"Unknown TrackingProvider props: {sorted(unknown)}")
        self.props.update(props)
        if overwrite is not None:
            self.overwrite = overwrite
        if self._context is None:
            return None
        return self.publish(self._parent)

    @property
    def published(self) -> bool:
        return self._context is not None

    @property
    def context(self) -> TrackingContext:
        if self._context is None:
            raise UnpublishedProviderError("This TrackingProvider has not been published yet")
        return self._context

    def trigger(
        self, event: str, fields: ty.Optional[Fields] = None, options: ty.Optional[Options] = None
    ) -> None:
        self.context.trigger(event, fields, options)

    @contextlib.contextmanager
    def scope(self) -> ty.Iterator[TrackingContext]:
        """Publish against the nearest enclosing provider, and be the nearest provider inside the block."""
        with _CURRENT.set(self.publish(current())) as published:
            yield published

    def __repr__(self) -> str:
        supplied = ",".join(k for k, v in self.props.items() if v is not None)
        state = "published" if self.published else "unpublished"
        return f"TrackingProvider({supplied}; overwrite={self.overwrite}; {state})"


@contextlib.contextmanager
def provider(
    *,
    event_fields: ty.Optional[ty.Mapping[str, Fields]] = None,
    event_options: ty.Optional[ty.Mapping[str, Options]] = None,
    event_schema: ty.Optional[EventKeyed] = None,
    fields: ty.Optional[Fields] = None,
    options: ty.Optional[Options] = None,
    schema: ty.Optional[Schema] = None,
    trigger: ty.Optional[Trigger] = None,
    overwrite: bool = False,
) -> ty.Iterator[TrackingContext]:
    """Is a decorator as well as a ContextManager, thanks to @contextmanager.

    Used as a decorator, a fresh provider is composed on every call, against
    whatever is current at call time.
    """
    with TrackingProvider(
        event_fields=event_fields,
        event_options=event_options,
        event_schema=event_schema,
        fields=fields,
        options=options,
        schema=schema,
        trigger=trigger,
        overwrite=overwrite,
    ).scope() as published:
        yield published
