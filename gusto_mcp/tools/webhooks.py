"""
Webhook and Event Tools
"""

from __future__ import annotations

from pydantic import Field

from ..endpoints import FormattedParams, GustoTool, ToolParams
from ..formatters import EntityKind


class ListWebhookSubscriptionsParams(FormattedParams):
    pass


class CreateWebhookSubscriptionParams(ToolParams):
    url: str = Field(min_length=1, description="Webhook URL")
    subscription_types: list[str] = Field(
        min_length=1, description="Event types to subscribe to (e.g. Employee, Payroll)"
    )


class DeleteWebhookSubscriptionParams(ToolParams):
    subscription_id: str = Field(min_length=1, description="Webhook subscription UUID")


class ListEventsParams(FormattedParams):
    starting_after_uuid: str | None = Field(default=None, description="Return events after this UUID")
    resource_uuid: str | None = Field(default=None, description="Filter by resource UUID")
    resource_type: str | None = Field(default=None, description="Filter by resource type")
    limit: int | None = Field(default=None, ge=1, le=100, description="Maximum number of events")


WEBHOOK_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_list_webhook_subscriptions",
        description="List all webhook subscriptions.",
        params=ListWebhookSubscriptionsParams,
        handler=lambda client, p: client.list_webhook_subscriptions(),
        kind=EntityKind.WEBHOOK_SUBSCRIPTION,
    ),
    GustoTool(
        name="gusto_create_webhook_subscription",
        description="Create a webhook subscription.",
        params=CreateWebhookSubscriptionParams,
        handler=lambda client, p: client.create_webhook_subscription(p.body()),
        result_key="subscription",
    ),
    GustoTool(
        name="gusto_delete_webhook_subscription",
        description="Delete a webhook subscription.",
        params=DeleteWebhookSubscriptionParams,
        handler=lambda client, p: client.delete_webhook_subscription(p.subscription_id),
        success_message="Subscription deleted",
    ),
    GustoTool(
        name="gusto_list_events",
        description="List events (changes to resources) for polling-based sync.",
        params=ListEventsParams,
        handler=lambda client, p: client.list_events(
            starting_after_uuid=p.starting_after_uuid,
            resource_uuid=p.resource_uuid,
            resource_type=p.resource_type,
            limit=p.limit,
        ),
        kind=EntityKind.EVENT,
    ),
]
