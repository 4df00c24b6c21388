"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that every resource uses
(settings, the store, shared responses). Keep resource-specific SQL in the
corresponding feature package (e.g. `tasks/`).
"""
