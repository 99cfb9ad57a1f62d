"""CLI utilities for developer workflows."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from watson_assistant_sdk.contracts import SDK_ENDPOINT_COVERAGE, endpoint_coverage, wire_parameters


HTTP_METHODS = {"get", "post", "put", "patch", "delete", "head", "options", "trace"}

# Added to every call by the client rather than declared on an options class.
CLIENT_PARAMETERS = {"version"}

logger = logging.getLogger(__name__)


def _load_openapi(path: Path, prefix: str | None = None) -> dict[str, set[str]]:
    """Return ``"METHOD /path"`` mapped to the operation's path and query parameter names."""
    payload = json.loads(path.read_text())
    discovered: dict[str, set[str]] = {}
    for path_template, operations in payload.get("paths", {}).items():
        if prefix and not path_template.startswith(prefix):
            continue
        shared = _parameter_names(operations.get("parameters", []))
        for method, operation in operations.items():
            if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                continue
            params = shared | _parameter_names((operation or {}).get("parameters", []))
            discovered[f"{method.upper()} {path_template}"] = params
    return discovered


def _parameter_names(parameters: list[Any]) -> set[str]:
    names: set[str] = set()
    for parameter in parameters:
        if not isinstance(parameter, dict):
            continue
        if parameter.get("in") in {"path", "query"} and isinstance(parameter.get("name"), str):
            names.add(parameter["name"])
    return names


def _diff_contracts(discovered: set[str], contract: dict[str, str]) -> tuple[list[str], list[str]]:
    expected = set(contract)
    missing = sorted(expected - discovered)
    extra = sorted(discovered - expected)
    return missing, extra


def _diff_parameters(discovered: dict[str, set[str]], prefix: str | None = None) -> dict[str, list[str]]:
    """Endpoints whose documented parameters the options class does not declare."""
    undeclared: dict[str, list[str]] = {}
    for endpoint, options_cls in endpoint_coverage(prefix).items():
        if endpoint not in discovered:
            continue
        missing = sorted(discovered[endpoint] - CLIENT_PARAMETERS - wire_parameters(options_cls))
        if missing:
            undeclared[endpoint] = missing
    return undeclared


def _main() -> int:
    parser = argparse.ArgumentParser(
        description="Compare the SDK's options classes with a Watson Assistant OpenAPI document."
    )
    parser.add_argument("--openapi", required=True, type=Path)
    parser.add_argument(
        "--api-version",
        choices=("v1", "v2"),
        default=None,
        help="only compare endpoints of one API version",
    )
    parser.add_argument("--strict-parameters", action="store_true")
    args = parser.parse_args()

    prefix = f"/{args.api_version}/" if args.api_version else None
    discovered = _load_openapi(args.openapi, prefix)
    contract = {
        endpoint: name
        for endpoint, name in SDK_ENDPOINT_COVERAGE.items()
        if prefix is None or endpoint.split(" ", 1)[1].startswith(prefix)
    }
    logger.debug("loaded %d operations from %s", len(discovered), args.openapi)
    missing, extra = _diff_contracts(set(discovered), contract)

    if missing:
        print("Missing endpoints in OpenAPI for covered SDK options:")
        for endpoint in missing:
            print(f"  - {endpoint} ({contract[endpoint]})")

    if extra:
        print("OpenAPI endpoints without an SDK options class:")
        for endpoint in extra:
            print(f"  - {endpoint}")

    undeclared = _diff_parameters(discovered, prefix)
    if undeclared:
        print("OpenAPI parameters not declared by the SDK options class:")
        for endpoint, names in sorted(undeclared.items()):
            print(f"  - {endpoint}: {', '.join(names)}")

    if missing or extra or (undeclared and args.strict_parameters):
        print("Contract coverage check failed")
        return 1

    print("Contract coverage check passed")
    return 0


def main() -> None:
    raise SystemExit(_main())
