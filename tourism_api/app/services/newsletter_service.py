"""
Business logic for newsletter subscriptions.

Subscribing is idempotent by e‑mail address: a second subscription
with an address that is already on the list returns the existing
record untouched and discards the rest of the new payload.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.collection import Collection
from ..core.emails import normalize_email
from ..schemas.newsletter import Newsletter, NewsletterCreate

logger = logging.getLogger(__name__)


class NewsletterService:
    def __init__(self) -> None:
        self.subscribers: Collection[Newsletter] = Collection("newsletter subscription")

    def get_subscriber_by_email(self, email: str) -> Optional[Newsletter]:
        email = normalize_email(email)
        return self.subscribers.find(lambda s: s.email == email)

    def list_subscribers(self) -> List[Newsletter]:
        return self.subscribers.all()

    def subscribe(self, data: NewsletterCreate) -> Newsletter:
        existing = self.get_subscriber_by_email(data.email)
        if existing is not None:
            logger.info("%s is already subscribed (subscription %s)", data.email, existing.id)
            return existing
        now = datetime.now(timezone.utc)
        subscriber = self.subscribers.insert(
            lambda subscription_id: Newsletter(id=subscription_id, created_at=now, **data.model_dump())
        )
        logger.info("Subscribed %s to the newsletter", subscriber.email)
        return subscriber
