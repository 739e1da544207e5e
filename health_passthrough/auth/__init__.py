"""Metadata authentication transforms."""

from .client_key import (
    AUTHORIZATION_METADATA_KEY,
    AUTHORIZATION_SCHEME,
    CLIENT_KEY_METADATA_KEY,
    DEFAULT_WINDOW_SECONDS,
    auth_apply_client_key_authorization,
    auth_compute_window_start,
    auth_sign_window,
)

__all__ = [
    "AUTHORIZATION_METADATA_KEY",
    "AUTHORIZATION_SCHEME",
    "CLIENT_KEY_METADATA_KEY",
    "DEFAULT_WINDOW_SECONDS",
    "auth_apply_client_key_authorization",
    "auth_compute_window_start",
    "auth_sign_window",
]
