"""Testes do DeadLetterRecord."""

from __future__ import annotations

import base64
import json

import pytest
from pydantic import ValidationError

from app.domain.dead_letter import DeadLetterRecord


def test_to_bytes_uses_wire_field_names_and_standard_base64() -> None:
    data = b"\xfb\xff\xfe raw"
    record = DeadLetterRecord(request_path="/", data=data)

    decoded = json.loads(record.to_bytes())

    assert decoded == {
        "request_path": "/",
        "data": base64.b64encode(data).decode("ascii"),
    }
    # base64 padrão (com + e /), não a variante url-safe
    assert "+" in decoded["data"] or "/" in decoded["data"]


def test_from_bytes_restores_exact_payload_and_path() -> None:
    data = b'{"webhookId":"wh_1"}\n'
    record = DeadLetterRecord(request_path="//orders//", data=data)

    restored = DeadLetterRecord.from_bytes(record.to_bytes())

    assert restored.data == data
    assert restored.request_path == "//orders//"


def test_empty_payload() -> None:
    restored = DeadLetterRecord.from_bytes(DeadLetterRecord(request_path="", data=b"").to_bytes())
    assert restored.data == b""


def test_from_bytes_rejects_invalid_base64() -> None:
    with pytest.raises(ValidationError):
        DeadLetterRecord.from_bytes(b'{"request_path": "/", "data": "***"}')


def test_record_is_frozen() -> None:
    record = DeadLetterRecord(request_path="/", data=b"x")
    with pytest.raises(ValidationError):
        record.data = b"y"  # type: ignore[misc]
