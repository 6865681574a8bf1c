from __future__ import annotations

import uuid

from fastapi import Request


def get_client_id(request: Request) -> str:
    """Return the session's client id, issuing one on first use."""
    client_id = request.session.get("client_id")
    if not client_id:
        client_id = uuid.uuid4().hex
        request.session["client_id"] = client_id
    return client_id
