import requests
import logging

logger = logging.getLogger(__name__)


class WebhookClient:
    def __init__(self, url: str, timeout: float = 10):
        self.url: str = url
        self.timeout: float = timeout

    def post(self, text: str) -> bool:
        try:
            requests.post(url=self.url, json={"text": text}, timeout=self.timeout)
            return True
        except Exception as e:
            logger.warning(f"Error posting notification to webhook: {e}")
            return False
