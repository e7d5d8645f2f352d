"""Fulfillment handlers for the coronavirus statistics intents."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from google.cloud import bigquery

from .db import query_covid19_dataset
from .models import FulfillmentResult

logger = logging.getLogger(__name__)

COUNTRY_PARAMETER = "geo-country"

# Confirmed-case count separating the two travel advisories. A count equal to
# the threshold matches neither branch and produces no advisory.
TRAVEL_ADVISORY_THRESHOLD = 5000


def number_with_commas(value: Any) -> str:
    """Format a count with thousands separators, e.g. 1234567 -> 1,234,567."""
    return f"{value:,}"


def resolve_location(country: Optional[str]) -> str:
    """Return the location phrase used in replies."""
    if country:
        return f"in {country}"
    return "worldwide"


def confirmed_cases(agent, client: bigquery.Client) -> FulfillmentResult:
    """Report confirmed cases and a travel advisory for a country or worldwide."""
    logger.info("confirmed_cases: agent.parameters = %s", json.dumps(agent.parameters))

    country = agent.parameters.get(COUNTRY_PARAMETER)
    result_location = resolve_location(country)
    apology = f"I'm sorry, I can't find statistics for confirmed cases {result_location}"

    try:
        total_confirmed = query_covid19_dataset(client, "confirmed_cases", country)
        if total_confirmed is None:
            reason = f"No data found for confirmed cases {result_location}"
            logger.warning(reason)
            return FulfillmentResult(status="failed", message=apology, reason=reason)

        base = (
            f"There are approximately {number_with_commas(total_confirmed)} confirmed "
            f"cases of coronavirus {result_location}."
        )
        if total_confirmed < TRAVEL_ADVISORY_THRESHOLD:
            message = f"{base} Hence it is safe to travel"
        elif total_confirmed > TRAVEL_ADVISORY_THRESHOLD:
            message = f"{base} Hence it is unsafe to travel"
        else:
            # TODO: decide which advisory applies at exactly the threshold.
            logger.info("Confirmed cases equal the advisory threshold; no advisory sent")
            return FulfillmentResult(status="success")
    except Exception as exc:
        logger.exception("Confirmed cases lookup failed %s", result_location)
        return FulfillmentResult(status="failed", message=apology, reason=str(exc))

    logger.info("response: %s", message)
    return FulfillmentResult(status="success", message=message)


def death(agent, client: bigquery.Client) -> FulfillmentResult:
    """Report deaths, plus the death rate when confirmed cases are available."""
    logger.info("death: agent.parameters = %s", json.dumps(agent.parameters))

    country = agent.parameters.get(COUNTRY_PARAMETER)
    result_location = resolve_location(country)
    apology = f"I'm sorry, I can't find statistics for deaths {result_location}"

    try:
        total_deaths = query_covid19_dataset(client, "deaths", country)
        if total_deaths is None:
            reason = f"No data found for deaths {result_location}"
            logger.warning(reason)
            return FulfillmentResult(status="failed", message=apology, reason=reason)

        message = (
            "According to Johns Hopkins University, as of today, approximately "
            f"{number_with_commas(total_deaths)} people have died from coronavirus "
            f"{result_location}."
        )

        # Runs only after the deaths query has completed.
        total_confirmed = query_covid19_dataset(client, "confirmed_cases", country)
        if total_confirmed:
            death_rate = total_deaths / total_confirmed * 100.0
            message += f" The death rate {result_location} is {death_rate:.2f}%"
    except Exception as exc:
        logger.exception("Deaths lookup failed %s", result_location)
        return FulfillmentResult(status="failed", message=apology, reason=str(exc))

    logger.info("response: %s", message)
    return FulfillmentResult(status="success", message=message)
