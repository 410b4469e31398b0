"""Testes do PubSubPublisher com PublisherClient mockado."""

from __future__ import annotations

import asyncio
from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as gcp_exceptions

from app.infra.pubsub.publisher import PubSubPublisher
from utils.errors import PublishError


def _client_returning(future: Future) -> MagicMock:
    client = MagicMock()
    client.topic_path.side_effect = lambda project, topic: f"projects/{project}/topics/{topic}"
    client.publish.return_value = future
    return client


def _resolved(value: str) -> Future:
    future: Future = Future()
    future.set_result(value)
    return future


def _failed(exc: BaseException) -> Future:
    future: Future = Future()
    future.set_exception(exc)
    return future


@pytest.mark.asyncio
async def test_publish_returns_message_id() -> None:
    client = _client_returning(_resolved("1234567890"))
    publisher = PubSubPublisher(client, "my-project")

    message_id = await publisher.publish("orders", b"raw")

    assert message_id == "1234567890"
    client.publish.assert_called_once_with("projects/my-project/topics/orders", b"raw")


@pytest.mark.asyncio
async def test_publish_topic_not_found_raises_publish_error() -> None:
    client = _client_returning(_failed(gcp_exceptions.NotFound("topic not found")))
    publisher = PubSubPublisher(client, "my-project")

    with pytest.raises(PublishError) as exc_info:
        await publisher.publish("missing", b"raw")

    assert exc_info.value.topic == "missing"
    assert exc_info.value.reason == "NotFound"


@pytest.mark.asyncio
async def test_publish_sync_failure_raises_publish_error() -> None:
    client = MagicMock()
    client.topic_path.return_value = "projects/p/topics/t"
    client.publish.side_effect = RuntimeError("client stopped")
    publisher = PubSubPublisher(client, "p")

    with pytest.raises(PublishError, match="RuntimeError"):
        await publisher.publish("t", b"raw")


@pytest.mark.asyncio
async def test_publish_timeout_raises_publish_error() -> None:
    pending: Future = Future()
    client = _client_returning(pending)
    publisher = PubSubPublisher(client, "p", timeout_seconds=0.01)

    with pytest.raises(PublishError) as exc_info:
        await publisher.publish("slow", b"raw")

    assert exc_info.value.reason == "timeout"


@pytest.mark.asyncio
async def test_cancelled_request_cancels_wait() -> None:
    pending: Future = Future()
    client = _client_returning(pending)
    publisher = PubSubPublisher(client, "p")

    task = asyncio.create_task(publisher.publish("orders", b"raw"))
    await asyncio.sleep(0)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert pending.cancelled()


@pytest.mark.asyncio
async def test_check_topic_uses_full_path() -> None:
    client = _client_returning(_resolved("1"))
    publisher = PubSubPublisher(client, "p")

    await publisher.check_topic("publisher-dead")

    client.get_topic.assert_called_once_with(request={"topic": "projects/p/topics/publisher-dead"})


def test_close_stops_client() -> None:
    client = MagicMock()
    PubSubPublisher(client, "p").close()
    client.stop.assert_called_once_with()
