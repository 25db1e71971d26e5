"""Shared UI components for the claim forms."""

from ui.components.common import (
    run_async, get_or_create_event_loop,
    current_errors, field_error, to_attachments,
)
