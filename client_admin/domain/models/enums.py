# client_admin/domain/models/enums.py

from enum import IntEnum
from typing import Dict, List, Type


class ClientType(IntEnum):
    """Client classification driving the default security posture."""
    EMPTY = 0
    WEB = 1
    SPA = 2
    NATIVE = 3
    MACHINE = 4
    DEVICE = 5


class HashType(IntEnum):
    """Hash algorithm applied to shared secrets before storage."""
    NONE = 0
    SHA256 = 1
    SHA512 = 2


class TokenUsage(IntEnum):
    RE_USE = 0
    ONE_TIME_ONLY = 1


class TokenExpiration(IntEnum):
    SLIDING = 0
    ABSOLUTE = 1


class AccessTokenType(IntEnum):
    JWT = 0
    REFERENCE = 1


def enum_items(enum_cls: Type[IntEnum]) -> List[Dict[str, object]]:
    """
    Render an enum as a list of ``{"value", "label"}`` selection items.
    """
    return [
        {"value": member.value, "label": member.name.replace("_", " ").title()}
        for member in enum_cls
    ]
