"""Watermark framing around the ciphertext."""

from . import config
from .errors import InvalidEnvelopeError
from .version import RELEASE, VERSION

# What decrypt searches for by default. Fixed at v1.1 regardless of the
# running VERSION/RELEASE; see CRYFA_WATERMARK_MATCH.
WATERMARK_LITERAL = b"#cryfa v1.1\n"
TRAILER = b"\n\n"


def current_watermark() -> bytes:
    return f"#cryfa v{VERSION}.{RELEASE}\n".encode("ascii")


def expected_watermark() -> bytes:
    if config.WATERMARK_MATCH == "current":
        return current_watermark()
    return WATERMARK_LITERAL


def wrap(ciphertext: bytes) -> bytes:
    return current_watermark() + bytes(ciphertext) + TRAILER


def unwrap(envelope: bytes) -> bytes:
    """Remove the watermark and the trailing newlines.

    The watermark may sit anywhere in the blob; its first occurrence is cut
    out. The last ``len(TRAILER)`` bytes are dropped unconditionally.
    """
    envelope = bytes(envelope)
    watermark = expected_watermark()
    index = envelope.find(watermark)
    if index < 0:
        raise InvalidEnvelopeError("invalid encrypted file!")
    body = envelope[:index] + envelope[index + len(watermark):]
    return body[:-len(TRAILER)]


__all__ = [
    "TRAILER",
    "WATERMARK_LITERAL",
    "current_watermark",
    "expected_watermark",
    "unwrap",
    "wrap",
]
