"""AWS Lambda and CloudWatch Logs backends via boto3."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from lambdaview.models import LogStreamRef, RawEvent
from lambdaview.sources import MAX_STREAMS, SourceUnavailable

if TYPE_CHECKING:
    from mypy_boto3_lambda import LambdaClient
    from mypy_boto3_logs import CloudWatchLogsClient
    from mypy_boto3_logs.type_defs import OutputLogEventTypeDef

    from lambdaview.models import AppConfig

logger = logging.getLogger(__name__)

LOG_GROUP_PREFIX = "/aws/lambda/"


def create_clients(config: AppConfig) -> tuple[LambdaClient, CloudWatchLogsClient]:
    """Create the Lambda and CloudWatch Logs clients.

    Both clients share one session, time out after ``config.fetch_timeout``
    seconds and never retry.
    """
    try:
        session = boto3.Session(region_name=config.region)
        client_config = Config(
            connect_timeout=config.fetch_timeout,
            read_timeout=config.fetch_timeout,
            retries={"total_max_attempts": 1},
        )
        lambda_client = session.client("lambda", endpoint_url=config.endpoint_url, config=client_config)
        logs_client = session.client("logs", endpoint_url=config.endpoint_url, config=client_config)
    except (BotoCoreError, ClientError) as e:
        msg = f"Cannot create AWS clients: {e}"
        raise SourceUnavailable(msg) from e
    return lambda_client, logs_client


def log_group_name(function_name: str) -> str:
    """Return the CloudWatch log group of a Lambda function."""
    return f"{LOG_GROUP_PREFIX}{function_name}"


def _ms_to_seconds(ms: int) -> int:
    """Convert epoch milliseconds to epoch seconds."""
    return ms // 1000


def _to_raw_event(event: OutputLogEventTypeDef) -> RawEvent:
    return RawEvent(
        timestamp=_ms_to_seconds(event.get("timestamp", 0)),
        message=event.get("message", "").rstrip("\n"),
    )


def _is_not_found(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ResourceNotFoundException"


class CloudWatchLogSource:
    """LogSource backed by CloudWatch Logs."""

    def __init__(self, client: CloudWatchLogsClient) -> None:
        self._client = client

    def list_streams(self, entity: str) -> list[LogStreamRef]:
        group = log_group_name(entity)
        logger.debug("Listing streams of %s", group)
        try:
            response = self._client.describe_log_streams(
                logGroupName=group,
                orderBy="LastEventTime",
                descending=True,
                limit=MAX_STREAMS,
            )
        except ClientError as e:
            if _is_not_found(e):
                return []
            msg = f"Cannot list log streams of {group}: {e}"
            raise SourceUnavailable(msg) from e
        except BotoCoreError as e:
            msg = f"Cannot list log streams of {group}: {e}"
            raise SourceUnavailable(msg) from e

        streams = response.get("logStreams", [])[:MAX_STREAMS]
        return [LogStreamRef(group=group, name=stream["logStreamName"]) for stream in streams]

    def fetch_events(self, stream: LogStreamRef) -> list[RawEvent]:
        logger.debug("Fetching events of %s/%s", stream.group, stream.name)
        try:
            response = self._client.get_log_events(logGroupName=stream.group, logStreamName=stream.name)
        except (BotoCoreError, ClientError) as e:
            msg = f"Cannot fetch events of {stream.name}: {e}"
            raise SourceUnavailable(msg) from e
        return [_to_raw_event(event) for event in response.get("events", [])]


def _format_config(configuration: dict[str, Any]) -> dict[str, str]:
    """Map a Lambda function configuration to display fields."""
    return {
        "Description": str(configuration.get("Description", "")),
        "Last modified": str(configuration.get("LastModified", "")),
        "memory size": str(configuration.get("MemorySize", 0)),
        "role": str(configuration.get("Role", "")),
        "runtime": str(configuration.get("Runtime", "")),
        "timeout": str(configuration.get("Timeout", 0)),
    }


class LambdaDirectory:
    """EntityDirectory backed by the Lambda API."""

    def __init__(self, client: LambdaClient) -> None:
        self._client = client

    def list_entities(self) -> list[str]:
        logger.debug("Listing Lambda functions")
        names: list[str] = []
        try:
            paginator = self._client.get_paginator("list_functions")
            for page in paginator.paginate():
                names.extend(function["FunctionName"] for function in page.get("Functions", []))
        except (BotoCoreError, ClientError) as e:
            msg = f"Cannot list Lambda functions: {e}"
            raise SourceUnavailable(msg) from e
        return names

    def get_metadata(self, entity: str) -> dict[str, str]:
        logger.debug("Fetching configuration of %s", entity)
        try:
            configuration = self._client.get_function_configuration(FunctionName=entity)
        except (BotoCoreError, ClientError) as e:
            msg = f"Cannot describe function {entity}: {e}"
            raise SourceUnavailable(msg) from e
        return _format_config(dict(configuration))
