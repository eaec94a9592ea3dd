"""CancelTransaction Use Case

Cancels a charge with the gateway and drops the local transaction.
"""

import logging

from libs.result import Result, Return, Error
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.services.notification_service import NotificationService
from src.app.services.payment_gateway import (
    PaymentGateway,
    PaymentGatewayError,
    CancelAcknowledgement,
)
from src.app.use_cases.messages import cancellation_message
from src.domain.transaction import Transaction
from .dtos import CancelResultDTO
from .errors import gateway_error, transaction_not_found
from .transaction_locks import TransactionLocks

logger = logging.getLogger(__name__)


class CancelTransaction:
    """
    Use Case: Cancel a transaction

    Business Rules:
    1. The local record is removed whatever the gateway answers: a
       transaction the buyer has cancelled must not stay reachable
    2. Admin is notified only when the gateway acknowledged the cancel
    3. A rejected cancel reports GATEWAY_REJECTED, a failed call GATEWAY_ERROR;
       in both cases the record is already gone

    Flow:
    1. Look up transaction
    2. Under the transaction lock, ask the gateway to cancel
    3. Remove the record (always)
    4. Notify on acknowledgement
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        gateway: PaymentGateway,
        notifications: NotificationService,
        locks: TransactionLocks,
    ):
        self.transaction_repo = transaction_repo
        self.gateway = gateway
        self.notifications = notifications
        self.locks = locks

    async def execute(self, transaction_id: str) -> Result[CancelResultDTO]:
        """
        Execute cancellation

        Args:
            transaction_id: Transaction identifier

        Returns:
            Result[CancelResultDTO]: Success when the gateway acknowledged

        Errors:
            TRANSACTION_NOT_FOUND: Unknown or already removed transaction
            GATEWAY_REJECTED: Gateway refused the cancel (record removed)
            GATEWAY_ERROR: Gateway call failed (record removed)
        """
        if await self.transaction_repo.get(transaction_id) is None:
            return Return.err(transaction_not_found(transaction_id))

        async with self.locks.get(transaction_id):
            transaction = await self.transaction_repo.get(transaction_id)
            if transaction is None:
                return Return.err(transaction_not_found(transaction_id))

            failure = None
            acknowledgement = None
            try:
                acknowledgement = await self.gateway.cancel_charge(transaction.charge_id)
            except PaymentGatewayError as e:
                logger.error(f"Cancel call failed for {transaction_id}, removing locally: [{e.code}] {e.message}")
                failure = e
            finally:
                await self.transaction_repo.delete(transaction_id)

        self.locks.discard(transaction_id)

        if failure is not None:
            error = gateway_error(failure, code="GATEWAY_ERROR")
            return Return.err(
                Error(code=error.code, message=f"Failed to cancel transaction: {error.message}", reason=error.reason)
            )
        return await self._report(transaction, acknowledgement)

    async def _report(
        self, transaction: Transaction, acknowledgement: CancelAcknowledgement
    ) -> Result[CancelResultDTO]:
        if not acknowledgement.acknowledged:
            logger.warning(
                f"Gateway rejected cancel of {transaction.id}, removed locally: {acknowledgement.message}"
            )
            return Return.err(
                Error(
                    code="GATEWAY_REJECTED",
                    message=acknowledgement.message or "Failed to cancel transaction",
                    reason="Gateway did not acknowledge the cancellation; the local transaction was removed",
                )
            )

        logger.info(f"Transaction {transaction.id} cancelled (reff={transaction.reff})")
        try:
            await self.notifications.send_message(cancellation_message(transaction))
        except Exception as e:
            logger.error(f"Cancellation notification for {transaction.id} failed: {e}")

        return Return.ok(
            CancelResultDTO(transaction_id=transaction.id, message="Transaction cancelled")
        )
