"""transaction_analytics package.

Query and aggregation engine over a flat collection of sale transactions:
filtered/paginated listing, monthly sale statistics, fixed price-range
histograms, category breakdowns and a combined report that computes the last
three concurrently.

Architecture:
- Records live in a record store (MongoDB in production, pandas in tests)
- Filters are declarative and translated by each store
- Aggregations are computed with pandas; the combined report fans out with Dask
- Pydantic models validate records and shape results
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
