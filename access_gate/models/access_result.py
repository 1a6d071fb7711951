#!/usr/bin/env python3
"""
Access Result Model - Data structures for demo access decisions
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from access_gate.config import RESPONSE_MESSAGES

ACCESS_CODE_FIELD = "accessCode"


class AccessError(Exception):
    """Base class for reasons an access attempt was not granted"""


class MissingInputError(AccessError):
    """Client supplied no access code"""


class MismatchError(AccessError):
    """Access code supplied but incorrect"""


class MalformedRequestError(AccessError):
    """Request body is not valid JSON or could not be read"""


class UnexpectedFaultError(AccessError):
    """Unexpected runtime fault while evaluating a request"""


class AccessOutcome(Enum):
    """Outcome of a single access check, with its HTTP status"""

    GRANTED = 200
    MISSING_CODE = 400
    DENIED = 401
    INTERNAL_ERROR = 500

    @property
    def status_code(self) -> int:
        return self.value


@dataclass(frozen=True)
class AccessRequest:
    """Candidate access code taken from a request body"""

    access_code: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> "AccessRequest":
        """Create from a parsed JSON document. Non-objects carry no code."""
        if isinstance(data, dict):
            return cls(access_code=data.get(ACCESS_CODE_FIELD))
        return cls()

    @property
    def is_missing(self) -> bool:
        """True when the code is absent or empty (null, "", false, 0)"""
        code = self.access_code
        if code is None or code is False or code == "":
            return True
        return isinstance(code, (int, float)) and not isinstance(code, bool) and code == 0


@dataclass(frozen=True)
class AccessResult:
    """Complete access decision for one request"""

    outcome: AccessOutcome
    body: Dict[str, Any] = field(default_factory=dict)
    error: Optional[AccessError] = None

    @property
    def status_code(self) -> int:
        return self.outcome.status_code

    @property
    def granted(self) -> bool:
        return self.outcome is AccessOutcome.GRANTED

    def to_response(self) -> Tuple[int, Dict[str, Any]]:
        """Return (status_code, json_body)"""
        return self.status_code, dict(self.body)

    @classmethod
    def granted_result(cls) -> "AccessResult":
        return cls(
            outcome=AccessOutcome.GRANTED,
            body={"message": RESPONSE_MESSAGES["access_granted"], "accessGranted": True},
        )

    @classmethod
    def missing_code(cls) -> "AccessResult":
        return cls(
            outcome=AccessOutcome.MISSING_CODE,
            body={"error": RESPONSE_MESSAGES["code_required"]},
            error=MissingInputError(RESPONSE_MESSAGES["code_required"]),
        )

    @classmethod
    def denied(cls) -> "AccessResult":
        return cls(
            outcome=AccessOutcome.DENIED,
            body={"error": RESPONSE_MESSAGES["invalid_code"], "accessGranted": False},
            error=MismatchError(RESPONSE_MESSAGES["invalid_code"]),
        )

    @classmethod
    def internal_error(cls, error: AccessError) -> "AccessResult":
        return cls(
            outcome=AccessOutcome.INTERNAL_ERROR,
            body={"error": RESPONSE_MESSAGES["internal_error"]},
            error=error,
        )
