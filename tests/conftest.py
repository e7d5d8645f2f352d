from typing import Any, Dict
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def make_bq_client():
    """Factory for a mock BigQuery client answering per table.

    Values are either a list of row mappings or an exception to raise from
    ``QueryJob.result``.
    """

    def factory(rows_by_table: Dict[str, Any]) -> MagicMock:
        client = MagicMock()
        client.jobs = []

        def run_query(sql, job_config=None, location=None, timeout=None):
            job = MagicMock()
            client.jobs.append(job)
            for table, outcome in rows_by_table.items():
                if f".{table}`" in sql:
                    if isinstance(outcome, Exception):
                        job.result.side_effect = outcome
                    else:
                        job.result.return_value = outcome
                    return job
            job.result.return_value = []
            return job

        client.query.side_effect = run_query
        return client

    return factory
