"""Shared helpers for the claim form pages."""

import asyncio
from typing import Dict, List

import streamlit as st

from core.attachment_merger import AttachmentResource


# ---------------------------------------------------------------------------
# Async helpers
# ---------------------------------------------------------------------------

def get_or_create_event_loop():
    try:
        loop = asyncio.get_event_loop()
        if loop.is_closed():
            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)
        return loop
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        return loop


def run_async(coro):
    return get_or_create_event_loop().run_until_complete(coro)


# ---------------------------------------------------------------------------
# Form helpers
# ---------------------------------------------------------------------------

def current_errors() -> Dict[str, str]:
    return st.session_state.get("errors", {})


def field_error(name: str) -> None:
    """Show the validation message for one field, if any."""
    message = current_errors().get(name)
    if message:
        st.markdown(
            f'<p style="color: #c0392b; font-size: 12px; margin-top: -8px;">{message}</p>',
            unsafe_allow_html=True,
        )


def to_attachments(uploaded_files) -> List[AttachmentResource]:
    """Streamlit uploads -> attachments; empty uploads are dropped."""
    attachments = []
    for uploaded in uploaded_files or []:
        content = uploaded.getvalue()
        if not content:
            continue
        attachments.append(
            AttachmentResource(
                name=uploaded.name,
                content=content,
                media_type=uploaded.type or "application/octet-stream",
            )
        )
    return attachments
