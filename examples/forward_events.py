"""Example of forwarding events to a local endpoint configured from the environment."""
import json
import sys

import requests
import structlog

from webhook_proxy import ConfigurationError, EndpointSettings
from webhook_proxy.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def print_response(webhook_id: str, response: requests.Response) -> None:
    logger.info(
        "endpoint_responded",
        webhook_id=webhook_id,
        status=response.status_code,
        body=response.text[:200],
    )


def main() -> int:
    configure_logging(level="DEBUG", json_output=False)

    try:
        settings = EndpointSettings.from_env(env_file=".env")
    except ConfigurationError as e:
        logger.error("invalid_endpoint_settings", error=str(e))
        return 1

    client = settings.build_client(log=logger, response_handler=print_response)

    event = {"id": "evt_test_123", "type": "invoice.created", "data": {"object": {}}}
    if not client.supports_event_type(False, event["type"]):
        logger.info("event_not_subscribed", event_type=event["type"])
        return 0

    try:
        client.post(
            "wh_example",
            json.dumps(event),
            {"Content-Type": "application/json; charset=utf-8"},
        )
    except requests.exceptions.RequestException:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
