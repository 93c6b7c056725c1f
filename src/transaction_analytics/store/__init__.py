"""Record store adapters.

Every store implements the `RecordStore` protocol: `find`, `count` and
`find_all` over a `TransactionFilter`, returning validated `Transaction`
models ordered by id.
"""

from transaction_analytics.store.base import RecordStore
from transaction_analytics.store.frame import FrameRecordStore
from transaction_analytics.store.mongo import MongoRecordStore, to_mongo_query

__all__ = ["RecordStore", "FrameRecordStore", "MongoRecordStore", "to_mongo_query"]
