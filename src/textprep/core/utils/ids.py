"""Simple identifier generation."""

import hashlib
from datetime import datetime, timezone


def simple_uid(seed: str, now: datetime | None = None) -> str:
    """Derive a UUID-shaped identifier from *seed* and the current time.

    The md5 hex digest of ``"<seed>.<RFC3339 timestamp>"`` is split into
    8-4-4-4-12 groups. Not a real UUID: two calls within the same second
    with the same seed collide.
    """
    now = now or datetime.now(timezone.utc).astimezone()
    stamp = now.replace(microsecond=0).isoformat()
    if stamp.endswith("+00:00"):
        stamp = stamp[:-6] + "Z"
    digest = hashlib.md5(f"{seed}.{stamp}".encode()).hexdigest()
    return f"{digest[:8]}-{digest[8:12]}-{digest[12:16]}-{digest[16:20]}-{digest[20:32]}"
