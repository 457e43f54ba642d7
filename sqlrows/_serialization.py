"""JSON encoding backed by msgspec."""

from typing import Any

import msgspec

__all__ = ("encode_json",)

_encoder = msgspec.json.Encoder(enc_hook=str)


def encode_json(data: Any) -> str:
    """Encode data to a JSON string.

    Values msgspec cannot encode natively are passed through ``str``.

    Args:
        data: Data to encode.

    Returns:
        The JSON document.
    """
    return _encoder.encode(data).decode("utf-8")
