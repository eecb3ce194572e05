import typing as ty

Fields = ty.Mapping[str, str]
Options = ty.Mapping[str, str]
Schema = ty.Mapping[str, ty.Any]
EventKeyed = ty.Mapping[str, ty.Mapping[str, ty.Any]]

Trigger = ty.Callable[[str, Fields, Options], None]
# the caller-supplied delivery function. Whatever it does with the event is its own business.


def noop_trigger(event: str, fields: Fields, options: Options) -> None:
    """Used wherever no provider in the chain supplied a trigger."""
