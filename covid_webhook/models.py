"""Pydantic models for webhook payloads and handler results."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Intent(BaseModel):
    """Intent matched by the conversational agent."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    display_name: str = Field(
        ..., alias="displayName", description="Routing key, e.g. coronavirus.death"
    )
    name: Optional[str] = Field(default=None, description="Full intent resource name")


class QueryResult(BaseModel):
    """Recognition result for the user's utterance."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    query_text: Optional[str] = Field(default=None, alias="queryText")
    intent: Intent
    parameters: Dict[str, Any] = Field(
        default_factory=dict, description="Extracted entity values keyed by name"
    )
    fulfillment_messages: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        alias="fulfillmentMessages",
        description="Console-defined responses, carried through unchanged",
    )
    language_code: Optional[str] = Field(default=None, alias="languageCode")


class WebhookRequest(BaseModel):
    """Incoming fulfillment event."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    response_id: Optional[str] = Field(default=None, alias="responseId")
    session: Optional[str] = None
    query_result: QueryResult = Field(..., alias="queryResult")
    original_detect_intent_request: Optional[Dict[str, Any]] = Field(
        default=None, alias="originalDetectIntentRequest"
    )


class TextMessage(BaseModel):
    text: List[str]


class ResponseMessage(BaseModel):
    text: TextMessage


class WebhookResponse(BaseModel):
    """Outgoing fulfillment payload."""

    model_config = ConfigDict(populate_by_name=True)

    fulfillment_text: Optional[str] = Field(
        default=None, alias="fulfillmentText", description="All reply lines joined"
    )
    fulfillment_messages: List[ResponseMessage] = Field(
        default_factory=list, alias="fulfillmentMessages"
    )


class FulfillmentResult(BaseModel):
    """Outcome of an intent handler, consumed uniformly by the dispatcher."""

    status: Literal["success", "failed"]
    message: Optional[str] = Field(
        default=None, description="Reply text; absent when nothing should be said"
    )
    reason: Optional[str] = Field(
        default=None, description="Failure detail for the logs, never shown to users"
    )
