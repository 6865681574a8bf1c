"""
Job recommendation package.

Responsibilities:
- Derive a user's preferred categories, locations and work arrangements
  from their favourite jobs and recent searches.
- Rank catalog jobs in fixed score bands with a human-readable reason.
- Memoise results and debounce recomputation for interactive callers.
"""
