"""Monthly aggregations over a record store.

Each aggregator takes a record store and a validated month ordinal, fetches
the month's records once and reduces them with pandas. `combined` runs the
three of them concurrently for a single report.
"""
