"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that both features use
(DB wiring, settings, logging, error envelopes, id/vote validation).
Keep feature-specific SQL and business logic in the corresponding feature
package (e.g. `questions/`).
"""
