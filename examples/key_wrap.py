"""Key wrap message types for a cloud key vault.

This module shows value types inside a larger JSON document: key operation
requests and results whose binary fields are URL-safe base64, as produced by
cloud key management services (which often omit the padding).
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from b64value import (
    DeserializationError,
    UrlBase64,
    aes_gcm,
    dumps,
)


class KeyOperationRequest:
    """Request body for a wrapKey or unwrapKey operation.

    The request structure is:
    {
        "alg": "<algorithm>",
        "value": "<url-safe base64>"
    }

    Attributes:
        algorithm: The key wrap algorithm, e.g. "RSA-OAEP-256".
        value: The key material to wrap, or the wrapped key to unwrap.
    """

    def __init__(self, algorithm: str, value: UrlBase64) -> None:
        self.algorithm = algorithm
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        return {"alg": self.algorithm, "value": self.value}

    def serialize(self) -> str:
        """Serialize the request to a JSON string."""
        return dumps(self.to_dict())

    @staticmethod
    def parse(message: str) -> KeyOperationRequest:
        """Parse a serialized request.

        Args:
            message: The JSON message string.

        Returns:
            A new KeyOperationRequest.

        Raises:
            json.JSONDecodeError: If the message is not valid JSON.
            KeyError: If required fields are missing.
            DeserializationError: If the value field is not valid base64.
        """
        json_data = json.loads(message)
        return KeyOperationRequest(
            algorithm=json_data["alg"],
            value=UrlBase64.from_json_value(json_data["value"]),
        )


class KeyOperationResult:
    """Response body for a key operation.

    Attributes:
        kid: Identifier of the key encryption key that was used.
        value: The wrapped or unwrapped key material.
    """

    def __init__(self, kid: str, value: UrlBase64) -> None:
        self.kid = kid
        self.value = value

    def serialize(self) -> str:
        return dumps({"kid": self.kid, "value": self.value})

    @staticmethod
    def parse(message: str) -> KeyOperationResult:
        """Parse a serialized result.

        Raises:
            json.JSONDecodeError: If the message is not valid JSON.
            KeyError: If required fields are missing.
            DeserializationError: If the value field is not valid base64.
        """
        json_data = json.loads(message)
        return KeyOperationResult(
            kid=json_data["kid"],
            value=UrlBase64.from_json_value(json_data["value"]),
        )

    def data_key(self) -> AESGCM:
        """Build a cipher from unwrapped key material.

        Raises:
            LengthError: If the unwrapped key is not 32 bytes.
        """
        return aes_gcm(self.value)


def unwrap_data_key(message: str) -> Optional[AESGCM]:
    """Parse an unwrap result and build its data key, or None if malformed."""
    try:
        return KeyOperationResult.parse(message).data_key()
    except (DeserializationError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return None


if __name__ == "__main__":
    key = UrlBase64(AESGCM.generate_key(bit_length=256))
    result = KeyOperationResult("https://vault.example/keys/kek/1", key)
    message = result.serialize()
    print(message)

    # Key vaults routinely drop the padding; both forms parse.
    unpadded = message.replace("=", "")
    cipher = unwrap_data_key(unpadded)
    print(f"unwrapped: {cipher is not None}")
