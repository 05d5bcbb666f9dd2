"""Payment pass-through to the external processor.

Nothing is charged or stored here: the payment payload is forwarded to
``{PAYMENT_API_URL}/payments`` and the processor's confirmation object is
returned unchanged.
"""
import logging
from typing import Any, Dict

import requests

from teenhealth.core.config import Settings
from teenhealth.core.errors import BadRequestError, InternalError, UnavailableError
from teenhealth.services.logger import log_debug

logger = logging.getLogger(__name__)


class PaymentGateway:
    def __init__(self, settings: Settings, session: requests.Session = None):
        self.base_url = settings.PAYMENT_API_URL.rstrip("/")
        self.api_key = settings.PAYMENT_API_KEY
        self.timeout = settings.PAYMENT_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def create_payment(self, payment: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}/payments"
        log_debug("payment_request", {"url": url, "amount": payment.get("amount"), "currency": payment.get("currency")})

        try:
            resp = self.session.post(
                url,
                json=payment,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            raise UnavailableError("Payment service temporarily unavailable") from exc

        if resp.status_code in (401, 403):
            # The processor refused our API key; the payer cannot fix that
            logger.error("Payment processor rejected credentials (status %s)", resp.status_code)
            raise InternalError("Error processing payment", context={"processor_status": resp.status_code})
        if 400 <= resp.status_code < 500:
            raise BadRequestError(_error_message(resp), context={"processor_status": resp.status_code})
        if resp.status_code >= 500:
            raise UnavailableError(
                "Payment service temporarily unavailable",
                context={"processor_status": resp.status_code},
            )

        try:
            confirmation = resp.json()
        except ValueError as exc:
            raise InternalError("Error processing payment") from exc
        if not isinstance(confirmation, dict):
            raise InternalError("Error processing payment")

        logger.info("Payment %s accepted by processor", confirmation.get("id"))
        return confirmation


def _error_message(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        return "Payment rejected"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or "Payment rejected")
    return "Payment rejected"
