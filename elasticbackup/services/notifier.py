from elasticbackup.clients.webhook_client import WebhookClient
from elasticbackup.models import RunContext


class Notifier:
    def __init__(self, webhook_url: str | None, context: RunContext):
        self.webhook: WebhookClient | None = WebhookClient(webhook_url) if webhook_url else None
        self.context: RunContext = context

    def format(self, message: str) -> str:
        return f"[{self.context.host}][{self.context.run_date}] {message}"

    def notify(self, message: str) -> None:
        if self.webhook is None:
            return
        self.webhook.post(self.format(message))
