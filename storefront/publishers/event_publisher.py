"""
RabbitMQ Event Publisher for order events
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

import pika

from storefront.config import settings
from storefront.schemas.order import OrderEvent

logger = logging.getLogger(__name__)

ORDER_CREATED = ("OrderCreated", "order.created")
ORDER_STATUS_CHANGED = ("OrderStatusChanged", "order.status.changed")


class EventPublisher:
    """Publisher for sending order events to RabbitMQ"""
    
    def __init__(self, enabled: Optional[bool] = None):
        self.enabled = settings.EVENTS_ENABLED if enabled is None else enabled
        self.rabbitmq_url = settings.RABBITMQ_URL
        self.exchange = settings.RABBITMQ_EXCHANGE
    
    def build_event(self, event_type: str, data: Dict) -> OrderEvent:
        """Wrap event data in the common envelope"""
        return OrderEvent(
            event_type=event_type,
            event_id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc).isoformat(),
            source=settings.SERVICE_NAME,
            data=data
        )
    
    def publish_order_created(self, order_data: Dict) -> bool:
        """Publish OrderCreated event"""
        return self._publish(*ORDER_CREATED, order_data)
    
    def publish_order_status_changed(self, order_data: Dict) -> bool:
        """Publish OrderStatusChanged event"""
        return self._publish(*ORDER_STATUS_CHANGED, order_data)
    
    def _publish(self, event_type: str, routing_key: str, data: Dict) -> bool:
        """
        Publish an event to the topic exchange
        
        Returns:
            True if published successfully, False if disabled or on error
        """
        if not self.enabled:
            logger.debug("Event publishing disabled, skipping %s", event_type)
            return False
        
        event = self.build_event(event_type, data)
        try:
            connection = pika.BlockingConnection(pika.URLParameters(self.rabbitmq_url))
            try:
                channel = connection.channel()
                channel.exchange_declare(
                    exchange=self.exchange,
                    exchange_type='topic',
                    durable=True
                )
                
                # Enable publisher confirms
                channel.confirm_delivery()
                
                channel.basic_publish(
                    exchange=self.exchange,
                    routing_key=routing_key,
                    body=event.model_dump_json(),
                    properties=pika.BasicProperties(
                        delivery_mode=2,  # Persistent message
                        content_type='application/json',
                        correlation_id=event.event_id
                    )
                )
            finally:
                connection.close()
        except (pika.exceptions.AMQPError, OSError) as e:
            logger.warning("Could not publish %s event: %s", event_type, e)
            return False
        
        logger.info("Event published: %s (ID: %s)", event_type, event.event_id)
        return True
