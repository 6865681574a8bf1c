"""
Job catalog package.

Responsibilities:
- Load the job listings CSV into immutable ``Job`` records.
- Filter and sort listings the way the job board's search bar does.
- Expose the distinct facet values used to populate filter dropdowns.
"""
