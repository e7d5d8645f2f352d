"""BigQuery access for the public JHU CSSE COVID-19 dataset."""

from __future__ import annotations

import concurrent.futures
import logging
import time
from typing import Annotated, Any, Mapping, Optional, Sequence

from fastapi import Depends, Request
from google.api_core.exceptions import GoogleAPIError
from google.cloud import bigquery

from .config import settings
from .normalize import normalize_country
from .sql_builder import build_covid19_query

logger = logging.getLogger(__name__)


class QueryExecutionError(RuntimeError):
    """Raised when BigQuery fails or times out while running a query."""


def get_bigquery_client(request: Request) -> bigquery.Client:
    """Return the process-wide client created in the application lifespan."""
    return request.app.state.bq_client


BigQueryDep = Annotated[bigquery.Client, Depends(get_bigquery_client)]


def extract_latest_total(rows: Sequence[Mapping[str, Any]]) -> Optional[Any]:
    """Return the last column of the last row, or None when there are no rows.

    The JHU tables keep one column per day with the newest date last, and rows
    come back in the table's natural order, so this value is the latest
    cumulative count for the final row returned.
    """
    if not rows:
        return None
    last_row = rows[-1]
    last_column = list(last_row.keys())[-1]
    return last_row[last_column]


def query_covid19_dataset(
    client: bigquery.Client, table_name: str, country: Optional[str] = None
) -> Optional[Any]:
    """Query one JHU table, optionally filtered by country, and return the latest total.

    Raises InvalidTableError before touching BigQuery when the table is unknown,
    and QueryExecutionError when the query itself fails.
    """
    sql, params = build_covid19_query(table_name, normalize_country(country))
    job_config = bigquery.QueryJobConfig(
        query_parameters=[
            bigquery.ScalarQueryParameter(name, "STRING", value)
            for name, value in params.items()
        ],
        # BigQuery cancels the job itself once this elapses.
        job_timeout_ms=settings.query_timeout_ms,
    )
    timeout = settings.query_timeout_ms / 1000
    deadline = time.monotonic() + timeout

    try:
        query_job = client.query(
            sql,
            job_config=job_config,
            location=settings.query_location,
            timeout=timeout,
        )
        # Submitting and waiting share one deadline.
        remaining = max(deadline - time.monotonic(), 0.0)
        rows = list(query_job.result(timeout=remaining))
    except (GoogleAPIError, concurrent.futures.TimeoutError) as exc:
        raise QueryExecutionError(f"BigQuery execution error on {table_name}") from exc

    logger.debug("Query on %s returned %d rows", table_name, len(rows))
    return extract_latest_total(rows)
