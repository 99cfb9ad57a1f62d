"""Typed, immutable request options and the builders that stage them.

Every Watson Assistant operation is described by one frozen dataclass deriving
from :class:`Options`. Its fields are declared with :func:`path_param`,
:func:`query_param` or :func:`body_param`, which record where the value
travels on the wire and whether the operation requires it.

Options are validated once, at construction. They can be created directly::

    ListValuesOptions("ws-123", "color", page_limit=10)

or staged through a builder, which is handy when a request is assembled in
several places or derived from a previous one::

    options = ListValuesOptions.builder("ws-123", "color").page_limit(10).build()
    next_page = options.new_builder().cursor(token).build()
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, ClassVar, Generic, Iterator, Mapping, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from .exceptions import AssistantValidationError


PATH = "path"
QUERY = "query"
BODY = "body"

_REGISTRY: dict[str, type["Options"]] = {}

T = TypeVar("T", bound="Options")


def _param(location: str, *, required: bool, wire_name: str | None) -> Any:
    metadata = {"location": location, "required": required, "wire_name": wire_name}
    if required:
        return dataclasses.field(metadata=metadata)
    return dataclasses.field(default=None, metadata=metadata)


def path_param(*, wire_name: str | None = None) -> Any:
    """Declare a URL path segment. Path segments are always required."""
    return _param(PATH, required=True, wire_name=wire_name)


def query_param(*, required: bool = False, wire_name: str | None = None) -> Any:
    return _param(QUERY, required=required, wire_name=wire_name)


def body_param(*, required: bool = False, wire_name: str | None = None) -> Any:
    return _param(BODY, required=required, wire_name=wire_name)


def _require(name: str, value: Any) -> None:
    if value is None or (isinstance(value, str) and not value):
        raise AssistantValidationError(f"{name} cannot be empty", field=name)


class FrozenMapping(Mapping[str, Any]):
    """Read-only, hashable copy of a dict-valued option such as ``metadata``."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = {key: _freeze(item) for key, item in data.items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"


def _freeze(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_copy(deep=True)
    if isinstance(value, FrozenMapping):
        return value
    if isinstance(value, Mapping):
        return FrozenMapping(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (tuple, frozenset)):
        return [_thaw(item) for item in value]
    return value


@dataclasses.dataclass(frozen=True)
class Options:
    """Base class for the parameters of one REST call."""

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.path:
            _REGISTRY[f"{cls.__module__}.{cls.__qualname__}"] = cls

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if field.metadata.get("required"):
                _require(field.name, value)
            frozen = _freeze(value)
            if frozen is not value:
                object.__setattr__(self, field.name, frozen)

    @classmethod
    def required_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls) if f.metadata.get("required"))

    @classmethod
    def optional_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls) if not f.metadata.get("required"))

    @classmethod
    def builder(cls: type[T], *required: Any, **values: Any) -> "OptionsBuilder[T]":
        """Start a builder, optionally seeded with the required fields in declaration order.

        Nothing is validated until :meth:`OptionsBuilder.build`.
        """
        names = cls.required_fields()
        if len(required) > len(names):
            raise TypeError(
                f"{cls.__name__}.builder() takes at most {len(names)} positional arguments "
                f"({len(required)} given)"
            )
        seeded = dict(zip(names, required))
        duplicated = sorted(set(seeded) & set(values))
        if duplicated:
            raise TypeError(f"{cls.__name__}.builder() got multiple values for {', '.join(duplicated)}")
        seeded.update(values)
        return OptionsBuilder(cls, seeded)

    def new_builder(self: T) -> "OptionsBuilder[T]":
        """Return a builder pre-seeded with this object's values."""
        return OptionsBuilder.from_options(self)

    def to_dict(self) -> dict[str, Any]:
        """Set fields keyed by their Python name."""
        return {
            field.name: _thaw(getattr(self, field.name))
            for field in dataclasses.fields(self)
            if getattr(self, field.name) is not None
        }

    def _project(self, location: str) -> dict[str, Any]:
        projected: dict[str, Any] = {}
        for field in dataclasses.fields(self):
            if field.metadata.get("location") != location:
                continue
            value = getattr(self, field.name)
            if value is None:
                continue
            projected[field.metadata.get("wire_name") or field.name] = _thaw(value)
        return projected

    def path_params(self) -> dict[str, Any]:
        return self._project(PATH)

    def query_params(self) -> dict[str, Any]:
        return self._project(QUERY)

    def body(self) -> dict[str, Any]:
        return self._project(BODY)

    @classmethod
    def has_body(cls) -> bool:
        """True when the operation sends a JSON body, even one with every field unset."""
        return any(f.metadata.get("location") == BODY for f in dataclasses.fields(cls))

    def resolve_path(self) -> str:
        """Render :attr:`path` with each path segment percent-encoded."""
        segments = {key: quote(str(value), safe="") for key, value in self.path_params().items()}
        return self.path.format(**segments)


class OptionsBuilder(Generic[T]):
    """Mutable staging area for one options class.

    Every field of the options class is exposed as a chainable setter. Setters
    accept anything, ``None`` included, and validation happens in :meth:`build`.
    """

    def __init__(self, options_cls: type[T], values: Mapping[str, Any] | None = None) -> None:
        self._options_cls = options_cls
        self._field_names = tuple(f.name for f in dataclasses.fields(options_cls))
        self._values: dict[str, Any] = {}
        if values:
            self.update(**values)

    @classmethod
    def from_options(cls, options: T) -> "OptionsBuilder[T]":
        return cls(
            type(options),
            {field.name: getattr(options, field.name) for field in dataclasses.fields(options)},
        )

    def __getattr__(self, name: str) -> Callable[[Any], "OptionsBuilder[T]"]:
        if name.startswith("_") or name not in self.__dict__.get("_field_names", ()):
            raise AttributeError(f"{type(self).__name__} has no field {name!r}")

        def setter(value: Any) -> OptionsBuilder[T]:
            self._values[name] = value
            return self

        setter.__name__ = name
        return setter

    def __repr__(self) -> str:
        staged = ", ".join(f"{key}={value!r}" for key, value in self._values.items())
        return f"{self._options_cls.__name__}.Builder({staged})"

    def update(self, **values: Any) -> "OptionsBuilder[T]":
        unknown = sorted(set(values) - set(self._field_names))
        if unknown:
            raise TypeError(f"{self._options_cls.__name__} has no field(s) {', '.join(unknown)}")
        self._values.update(values)
        return self

    def build(self) -> T:
        """Validate the staged values and return a new immutable options object."""
        return self._options_cls(**{name: self._values.get(name) for name in self._field_names})


def registered_options() -> dict[str, type[Options]]:
    """All concrete options classes imported so far, keyed by dotted name."""
    return dict(_REGISTRY)
