"""
Per-client profile state.

Responsibilities:
- Remember which jobs each client has favourited.
- Keep a short, most-recent-first history of each client's search filters.
- Identify clients through the session cookie.
"""
