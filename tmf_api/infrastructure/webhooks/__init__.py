from .httpx_webhook_client import HttpxWebhookClient

__all__ = ["HttpxWebhookClient"]
