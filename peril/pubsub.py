"""Declaring queues and publishing JSON messages over AMQP."""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

import pika
import pika.exceptions


class SimpleQueueType(IntEnum):
    """Whether a queue survives broker restarts or lives with its consumer."""

    DURABLE = 0
    TRANSIENT = 1


def declare_and_bind(conn: Any, exchange: str, queue_name: str, key: str, queue_type: SimpleQueueType):
    """Open a channel, declare a queue and bind it to the exchange.

    Returns the channel and the name of the declared queue.
    """
    try:
        channel = conn.channel()
    except pika.exceptions.AMQPError as exc:
        raise RuntimeError("couldnt open channel on conn") from exc

    transient = queue_type == SimpleQueueType.TRANSIENT
    try:
        result = channel.queue_declare(
            queue=queue_name,
            durable=queue_type == SimpleQueueType.DURABLE,
            auto_delete=transient,
            exclusive=transient,
        )
    except pika.exceptions.AMQPError as exc:
        raise RuntimeError("couldnt create queue") from exc

    declared = result.method.queue
    channel.queue_bind(queue=declared, exchange=exchange, routing_key=key)
    return channel, declared


def _field_name(name: str) -> str:
    return "".join("ID" if part == "id" else part.capitalize() for part in name.split("_"))


def _to_wire(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            _field_name(f.name): _to_wire(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_wire(item) for item in value]
    return value


def publish_json(channel: Any, exchange: str, key: str, value: Any) -> None:
    """Serialise a value to JSON and publish it with the given routing key."""
    body = json.dumps(_to_wire(value)).encode("utf-8")
    channel.basic_publish(
        exchange=exchange,
        routing_key=key,
        body=body,
        properties=pika.BasicProperties(content_type="application/json"),
    )