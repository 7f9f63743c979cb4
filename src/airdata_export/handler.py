from datetime import datetime

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent, event_source

from common.awair_client import AwairClient
from common.config import get_settings
from common.errors import TriggerError
from common.pipeline import export_hour
from common.s3 import S3Publisher

logger = Logger()


def _trigger_time(event: EventBridgeEvent) -> datetime:
    raw = event.get("time")
    if not raw:
        raise TriggerError("event has no 'time' field")
    try:
        # EventBridge sends ISO-8601 with a trailing Z
        return datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except ValueError as exc:
        raise TriggerError(f"invalid event time: {raw!r}") from exc


@event_source(data_class=EventBridgeEvent)
@logger.inject_lambda_context
def lambda_handler(event: EventBridgeEvent, context: object) -> str:
    logger.info("handle_request", event_time=event.get("time"), source=event.get("source"))
    try:
        trigger = _trigger_time(event)
        settings = get_settings()
        client = AwairClient.from_settings(settings)
        publisher = S3Publisher.from_settings(settings)
        return export_hour(trigger, client, publisher)
    except Exception as exc:
        logger.exception("airdata_export_failed")
        raise exc
