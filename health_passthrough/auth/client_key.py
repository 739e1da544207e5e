"""Client-key metadata transform producing a time-stepped HMAC credential.

When the caller supplies a `client-key` metadata entry, its value is treated as a
shared secret. The secret signs the start of the current time window with
HMAC-SHA256, and the hex signature replaces both the secret and any caller
`Authorization` entry as `Authorization: TOTP <signature>`.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from typing import Callable, Final, Sequence

from health_passthrough.domain import MetadataEntry

CLIENT_KEY_METADATA_KEY: Final[str] = "client-key"
AUTHORIZATION_METADATA_KEY: Final[str] = "Authorization"
AUTHORIZATION_SCHEME: Final[str] = "TOTP"
DEFAULT_WINDOW_SECONDS: Final[int] = 30


def auth_compute_window_start(unix_seconds: float, window_seconds: int = DEFAULT_WINDOW_SECONDS) -> int:
    """Round a unix timestamp down to the start of its window.

    Args:
        unix_seconds: Current unix time in seconds.
        window_seconds: Window size in seconds.

    Returns:
        int: Window start in whole unix seconds.

    Raises:
        ValueError: Raised when window size is not positive.
    """

    if window_seconds <= 0:
        raise ValueError("window_seconds must be > 0")
    whole_seconds = int(unix_seconds)
    return whole_seconds - (whole_seconds % window_seconds)


def auth_sign_window(secret: str, window_start: int) -> str:
    """Return the hex HMAC-SHA256 of the window start keyed by `secret`."""

    return hmac.new(
        secret.encode("utf-8"),
        str(window_start).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def auth_apply_client_key_authorization(
    entries: Sequence[MetadataEntry],
    unix_seconds_provider: Callable[[], float] = time.time,
    window_seconds: int = DEFAULT_WINDOW_SECONDS,
) -> list[MetadataEntry]:
    """Replace a `client-key` entry with a derived `Authorization` credential.

    Args:
        entries: Normalized metadata entries in caller order.
        unix_seconds_provider: Clock returning unix seconds, sampled once.
        window_seconds: Credential window size in seconds.

    Returns:
        list[MetadataEntry]: Entries unchanged when no `client-key` exists;
        otherwise every entry except `client-key`/`authorization` ones, followed
        by the new `Authorization` entry.

    Raises:
        ValueError: Raised when window size is not positive.
    """

    client_key_entry = next(
        (entry for entry in entries if entry.entry_key_matches(CLIENT_KEY_METADATA_KEY)),
        None,
    )
    if client_key_entry is None:
        return list(entries)

    window_start = auth_compute_window_start(unix_seconds_provider(), window_seconds)
    signature = auth_sign_window(client_key_entry.entry_value_text(), window_start)

    retained_entries = [
        entry
        for entry in entries
        if not entry.entry_key_matches(CLIENT_KEY_METADATA_KEY)
        and not entry.entry_key_matches(AUTHORIZATION_METADATA_KEY)
    ]
    retained_entries.append(
        MetadataEntry(key=AUTHORIZATION_METADATA_KEY, value=f"{AUTHORIZATION_SCHEME} {signature}")
    )
    return retained_entries
