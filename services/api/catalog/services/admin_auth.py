"""Shared-secret admin check.

A single process-wide password, compared by exact equality. No sessions,
tokens or rate limiting.
"""

import secrets
from enum import Enum


class AdminAuthResult(str, Enum):
    OK = "ok"
    MISSING = "missing"
    MISMATCH = "mismatch"


def check_admin_password(candidate: object, configured: str) -> AdminAuthResult:
    """Compare a submitted password against the configured admin password.

    An empty candidate counts as missing. Non-string values are compared in
    their string form. An unconfigured (empty) admin password never matches.
    """
    if not candidate:
        return AdminAuthResult.MISSING
    if not configured:
        return AdminAuthResult.MISMATCH
    if secrets.compare_digest(str(candidate).encode("utf-8"), configured.encode("utf-8")):
        return AdminAuthResult.OK
    return AdminAuthResult.MISMATCH
