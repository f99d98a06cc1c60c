"""
Notification Module

Contract for the fire-and-forget notifier an account reports its activity
to, plus logging and webhook implementations. The ledger never inspects a
notifier's return value.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from .config import LedgerConfig, get_config


logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Receives account activity and large-transaction alerts"""
    
    @abstractmethod
    def send_email(self, recipient: str, subject: str, body: str) -> None:
        """Send an email alert"""
        pass
    
    @abstractmethod
    def send_sms(self, number: str, body: str) -> None:
        """Send an SMS alert"""
        pass
    
    @abstractmethod
    def log_activity(self, account_id: str, activity: str) -> None:
        """Record an activity line for an account"""
        pass


class LogNotifier(Notifier):
    """Simple logging notifier for development"""
    
    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger
    
    def send_email(self, recipient: str, subject: str, body: str) -> None:
        self.logger.info(f"EMAIL to {recipient}: {subject} | {body[:100]}")
    
    def send_sms(self, number: str, body: str) -> None:
        self.logger.info(f"SMS to {number}: {body[:100]}")
    
    def log_activity(self, account_id: str, activity: str) -> None:
        self.logger.info(f"[{account_id}] {activity}")


class WebhookNotifier(Notifier):
    """Notifier that POSTs every call as JSON to an external endpoint"""
    
    def __init__(self, url: str, timeout: int = 30):
        self.url = url
        self.timeout = timeout
    
    @classmethod
    def from_config(cls, config: Optional[LedgerConfig] = None) -> Optional['WebhookNotifier']:
        """Build a notifier from settings; None when no webhook_url is set"""
        config = config or get_config()
        if not config.webhook_url:
            return None
        return cls(config.webhook_url, timeout=config.webhook_timeout)
    
    def send_email(self, recipient: str, subject: str, body: str) -> bool:
        return self._post({
            "channel": "email",
            "recipient": recipient,
            "subject": subject,
            "body": body,
        })
    
    def send_sms(self, number: str, body: str) -> bool:
        return self._post({
            "channel": "sms",
            "recipient": number,
            "body": body,
        })
    
    def log_activity(self, account_id: str, activity: str) -> bool:
        return self._post({
            "channel": "activity",
            "recipient": account_id,
            "body": activity,
        })
    
    def _post(self, payload: Dict[str, Any]) -> bool:
        """Send payload to the webhook. Returns True if it answered 200."""
        payload["timestamp"] = datetime.now(timezone.utc).isoformat()
        try:
            response = requests.post(
                self.url,
                json=payload,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"}
            )
            return response.status_code == 200
        except requests.RequestException as e:
            logger.warning(f"Webhook send failed: {e}")
            return False
