"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or runs one health check from the command line.
"""

import argparse
import asyncio
import json

import uvicorn

from health_passthrough.api.routers.passthrough import api_render_failure_payload, api_render_result_payload
from health_passthrough.bootstrap import bootstrap_create_application, bootstrap_create_orchestrator
from health_passthrough.config import AppSettings, config_load_settings, config_setup_logging
from health_passthrough.passthrough import PassthroughDispatchError, PassthroughInputError


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when a `check` run is not serving or fails.
    """

    argument_parser = argparse.ArgumentParser(description="gRPC health passthrough runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "check"),
        help="Runtime command: `api` starts the server, `check` runs one health check and prints the result",
        type=str,
    )
    argument_parser.add_argument("--target", dest="target", type=str, help="Remote address in host:port form")
    argument_parser.add_argument("--service", dest="service", type=str, default="", help="Service name to check")
    argument_parser.add_argument(
        "--insecure",
        dest="insecure",
        action="store_true",
        default=None,
        help="Use a plaintext channel instead of TLS",
    )
    argument_parser.add_argument(
        "--metadata",
        dest="metadata",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Metadata entry to send; repeat for multiple entries",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    config_setup_logging(settings.log_level)

    if parsed_arguments.command == "check":
        payload = {
            "target": parsed_arguments.target,
            "service": parsed_arguments.service,
            "insecure": parsed_arguments.insecure,
            "metadata": main_parse_metadata_arguments(parsed_arguments.metadata),
        }
        exit_code = asyncio.run(main_run_check(settings, payload))
        if exit_code:
            raise SystemExit(exit_code)
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


def main_parse_metadata_arguments(raw_entries: list[str]) -> list[dict[str, str]]:
    """Parse `KEY=VALUE` command-line entries into payload metadata.

    Args:
        raw_entries: Raw command-line values.

    Returns:
        list[dict[str, str]]: Metadata payload entries; values without `=` are skipped.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    metadata: list[dict[str, str]] = []
    for raw_entry in raw_entries:
        key, separator, value = raw_entry.partition("=")
        if not separator or not key.strip():
            continue
        metadata.append({"key": key.strip(), "value": value})
    return metadata


async def main_run_check(settings: AppSettings, payload: dict[str, object]) -> int:
    """Run one health check and print the JSON result.

    Returns:
        int: 0 when the target is serving, 1 otherwise.
    """

    orchestrator = bootstrap_create_orchestrator(settings)
    try:
        prepared = orchestrator.passthrough_prepare(payload)
    except PassthroughInputError as error:
        print(json.dumps({"error": str(error)}, indent=2))
        return 1

    try:
        result = await orchestrator.passthrough_dispatch(prepared)
    except PassthroughDispatchError as error:
        print(json.dumps(api_render_failure_payload(error, prepared), indent=2))
        return 1

    print(json.dumps(api_render_result_payload(prepared, result), indent=2))
    return 0 if result.serving else 1


if __name__ == "__main__":
    main()
