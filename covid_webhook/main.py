"""FastAPI entry point for the COVID-19 statistics fulfillment webhook."""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from google.cloud import bigquery

from .agent import run_agent
from .config import settings
from .db import BigQueryDep
from .models import WebhookRequest, WebhookResponse

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One client per process, shared by every request
    app.state.bq_client = bigquery.Client(project=settings.gcp_project)
    logger.info("BigQuery client ready for dataset %s", settings.dataset)
    try:
        yield
    finally:
        try:
            app.state.bq_client.close()
        except Exception as e:
            logger.warning("Error closing BigQuery client: %s", e)


app = FastAPI(
    title="COVID-19 Statistics Webhook",
    description="Fulfillment webhook answering coronavirus statistics intents",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
def health_check() -> dict:
    """Lightweight health check for uptime probes."""
    return {"status": "ok"}


@app.post(
    "/webhook", response_model=WebhookResponse, response_model_exclude_none=True
)
def webhook(
    body: WebhookRequest, request: Request, client: BigQueryDep
) -> WebhookResponse:
    """Fulfill a recognized intent with statistics from the JHU dataset."""
    logger.debug("Dialogflow Request headers: %s", json.dumps(dict(request.headers)))
    logger.debug("Dialogflow Request body: %s", body.model_dump_json(by_alias=True))
    # Handlers turn every failure into an apology, so this always replies.
    return run_agent(body, client)
