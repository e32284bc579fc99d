"""Example SQL for the platform connector's sync log table.

Sync logs are not exposed over the REST API. The platform connector writes
them to ``fivetran_metadata.log`` in the destination warehouse, where they
can be queried and turned into ``LogEntry`` objects with
``LogEntry.from_rows``.
"""

from __future__ import annotations

from enum import Enum


class LogQuery(str, Enum):
    """Kinds of example log queries."""

    RECENT_SYNCS = "recent_syncs"
    FAILED_SYNCS = "failed_syncs"
    SYNC_DURATION = "sync_duration"
    SCHEMA_CHANGES = "schema_changes"


_QUERIES: dict[LogQuery, str] = {
    LogQuery.RECENT_SYNCS: """\
SELECT time_stamp, event, message_event, message_data
FROM fivetran_metadata.log
WHERE connector_id = 'your_connector_id'
ORDER BY time_stamp DESC
LIMIT 10
""",
    LogQuery.FAILED_SYNCS: """\
SELECT connector_id, time_stamp, message_event, message_data
FROM fivetran_metadata.log
WHERE connector_id = 'your_connector_id'
  AND (event = 'SEVERE'
       OR message_event LIKE '%error%'
       OR message_event LIKE '%fail%')
ORDER BY time_stamp DESC
LIMIT 50
""",
    LogQuery.SYNC_DURATION: """\
WITH sync_events AS (
  SELECT connector_id,
         time_stamp,
         message_event,
         LAG(time_stamp) OVER (PARTITION BY connector_id ORDER BY time_stamp) AS prev_time
  FROM fivetran_metadata.log
  WHERE message_event IN ('sync_start', 'sync_end')
    AND connector_id = 'your_connector_id'
)
SELECT connector_id,
       time_stamp AS sync_end_time,
       DATEDIFF('minute', prev_time, time_stamp) AS duration_minutes
FROM sync_events
WHERE message_event = 'sync_end'
ORDER BY time_stamp DESC
LIMIT 20
""",
    LogQuery.SCHEMA_CHANGES: """\
SELECT connector_id, time_stamp, message_event, message_data
FROM fivetran_metadata.log
WHERE connector_id = 'your_connector_id'
  AND (message_event LIKE '%schema%'
       OR message_event LIKE '%column%'
       OR message_event LIKE '%table%')
ORDER BY time_stamp DESC
LIMIT 100
""",
}


def available_queries() -> list[str]:
    return [kind.value for kind in LogQuery]


def query_example(kind: LogQuery | str) -> str:
    """Return example SQL for ``kind``.

    Replace ``'your_connector_id'`` with a real connector id before running
    it. Raises ``ValueError`` for an unknown kind.
    """
    try:
        query = LogQuery(kind)
    except ValueError:
        raise ValueError(
            f"Unknown log query {kind!r}; expected one of {', '.join(available_queries())}"
        ) from None
    return _QUERIES[query]
