import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with: order, product. Receivers place the order with the external provider.
third_party_exchange_requested = Signal()


@receiver(third_party_exchange_requested)
def log_third_party_exchange(sender, order, product, **kwargs):
    logger.info(
        f"Third-party exchange requested: order={order.order_no} product={product.id} "
        f"provider={(product.third_party_config or {}).get('provider', 'unknown')}"
    )
