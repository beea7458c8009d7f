"""Sentinel values shared across arraykit.

``ABSENT`` marks "no value" where ``None`` is a legitimate element and so
cannot double as the empty result.
"""

from typing_extensions import Sentinel

#: Returned by accessors when the sequence holds no element to return.
ABSENT = Sentinel("ABSENT")
