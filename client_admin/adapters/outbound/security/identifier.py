# client_admin/adapters/outbound/security/identifier.py

import secrets
import time

_MASK_64 = (1 << 64) - 1

# 100ns ticks between 0001-01-01 and the unix epoch
_EPOCH_TICKS = 621355968000000000


def current_ticks() -> int:
    """Current time in 100 nanosecond ticks since 0001-01-01."""
    return time.time_ns() // 100 + _EPOCH_TICKS


def build_client_id(raw: bytes, ticks: int) -> str:
    """
    Fold the random bytes into a 64-bit accumulator, subtract the ticks and
    render the two's-complement value as lowercase hex.
    """
    accumulator = 1
    for byte in raw:
        accumulator = (accumulator * (byte + 1)) & _MASK_64
    return f"{(accumulator - ticks) & _MASK_64:x}"


def generate_client_id() -> str:
    """Generate a new external client identifier."""
    return build_client_id(secrets.token_bytes(16), current_ticks())
