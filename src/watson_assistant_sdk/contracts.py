"""Map of REST operations covered by the SDK's options classes."""

from __future__ import annotations

import dataclasses

from . import assistant_v1, assistant_v2  # noqa: F401  (imported to register their options)
from .options import PATH, QUERY, Options, registered_options


def endpoint_coverage(prefix: str | None = None) -> dict[str, type[Options]]:
    """``"METHOD /path"`` to options class, optionally limited to one API version prefix."""
    coverage: dict[str, type[Options]] = {}
    for options_cls in registered_options().values():
        if prefix and not options_cls.path.startswith(prefix):
            continue
        coverage[f"{options_cls.method} {options_cls.path}"] = options_cls
    return coverage


def wire_parameters(options_cls: type[Options]) -> set[str]:
    """Path and query parameter names the options class sends, by wire name."""
    names: set[str] = set()
    for field in dataclasses.fields(options_cls):
        if field.metadata.get("location") in {PATH, QUERY}:
            names.add(field.metadata.get("wire_name") or field.name)
    return names


SDK_ENDPOINT_COVERAGE = {endpoint: cls.__name__ for endpoint, cls in endpoint_coverage().items()}
