"""Registro de dead letter publicado no tópico de fallback.

Formato no barramento (JSON, bytes em base64 padrão):
    {"request_path": "/orders", "data": "eyJ3ZWJob29rSWQiOiAi..."}
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class DeadLetterRecord(BaseModel):
    """Payload sem rota (ou com falha de publish) junto do path original.

    `data` é sempre o corpo bruto recebido, byte a byte; `request_path`
    é o path original, sem alteração pela lógica de roteamento.
    """

    model_config = ConfigDict(frozen=True)

    request_path: str
    data: bytes

    @field_validator("data", mode="before")
    @classmethod
    def decode_data(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except binascii.Error as exc:
                raise ValueError("data must be standard base64") from exc
        return value

    @field_serializer("data")
    def encode_data(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")

    def to_bytes(self) -> bytes:
        """Serializa o registro para publicação."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, raw: bytes) -> DeadLetterRecord:
        """Reconstrói o registro a partir da mensagem do tópico dead.

        Raises:
            pydantic.ValidationError: Se a mensagem não tiver o formato esperado.
        """
        return cls.model_validate_json(raw)
