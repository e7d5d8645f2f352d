"""Webhook dispatch: routes recognized intents to their fulfillment handlers."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from google.cloud import bigquery

from .intent import confirmed_cases, death
from .models import (
    FulfillmentResult,
    ResponseMessage,
    TextMessage,
    WebhookRequest,
    WebhookResponse,
)

logger = logging.getLogger(__name__)

IntentHandler = Callable[["WebhookAgent", bigquery.Client], FulfillmentResult]

INTENT_MAP: Mapping[str, IntentHandler] = MappingProxyType(
    {
        "coronavirus.confirmed_cases": confirmed_cases,
        "coronavirus.death": death,
    }
)


class WebhookAgent:
    """Per-request view of a fulfillment event that collects reply lines."""

    def __init__(self, request: WebhookRequest) -> None:
        query_result = request.query_result
        self.intent: str = query_result.intent.display_name
        self.parameters: Dict[str, Any] = dict(query_result.parameters)
        self.query_text: Optional[str] = query_result.query_text
        # Console responses are carried through as received.
        self.fulfillment_messages: Optional[List[Dict[str, Any]]] = (
            query_result.fulfillment_messages
        )
        self._messages: List[str] = []

    def add(self, message: str) -> None:
        """Append a line to the reply."""
        self._messages.append(message)

    @property
    def messages(self) -> List[str]:
        return list(self._messages)

    def handle_request(
        self, intent_map: Mapping[str, IntentHandler], client: bigquery.Client
    ) -> None:
        """Run the handler registered for this intent and apply its result."""
        handler = intent_map.get(self.intent)
        if handler is None:
            logger.warning("No handler for requested intent %s", self.intent)
            return

        logger.info("Fulfilling %s for query %r", self.intent, self.query_text)
        result = handler(self, client)
        if result.status == "failed":
            logger.info("Intent %s answered with an apology", self.intent)
        if result.message:
            self.add(result.message)

    def build_response(self) -> WebhookResponse:
        """Render collected reply lines as a webhook response."""
        if not self._messages:
            return WebhookResponse()
        return WebhookResponse(
            fulfillment_text="\n".join(self._messages),
            fulfillment_messages=[
                ResponseMessage(text=TextMessage(text=[message]))
                for message in self._messages
            ],
        )


def run_agent(request: WebhookRequest, client: bigquery.Client) -> WebhookResponse:
    """Process a fulfillment event end-to-end and return the reply."""
    agent = WebhookAgent(request)
    agent.handle_request(INTENT_MAP, client)
    return agent.build_response()
