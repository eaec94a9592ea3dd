"""CheckPaymentStatus Use Case

Reconciles a transaction with the gateway and provisions the purchase the
first time the payment is reported successful.
"""

import logging

from libs.result import Result, Return
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.services.notification_service import NotificationService
from src.app.services.payment_gateway import PaymentGateway, PaymentGatewayError
from src.app.services.provisioning_service import (
    ProvisioningService,
    ProvisioningError,
    ProvisioningResult,
)
from src.app.use_cases.messages import payment_success_message
from src.domain.transaction import Transaction
from .dtos import StatusResultDTO
from .errors import gateway_error, transaction_not_found
from .transaction_locks import TransactionLocks

logger = logging.getLogger(__name__)


class CheckPaymentStatus:
    """
    Use Case: Check payment status and provision on success

    Business Rules:
    1. Unknown transactions fail without contacting the gateway
    2. Gateway status overwrites the stored status on every check
    3. Provisioning runs at most once per transaction: the check, the
       provisioning call and the provisioned flag write happen under the
       transaction's lock
    4. Provisioning failure does not undo the payment: the caller gets a
       success status with a warning and provisioned stays False
    5. Admin is notified only when provisioning succeeded

    Flow:
    1. Look up transaction (fail fast if absent)
    2. Acquire the transaction lock and re-read it
    3. Fetch gateway status and store it
    4. If paid and not provisioned: provision, set flag, notify
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        gateway: PaymentGateway,
        provisioning: ProvisioningService,
        notifications: NotificationService,
        locks: TransactionLocks,
    ):
        self.transaction_repo = transaction_repo
        self.gateway = gateway
        self.provisioning = provisioning
        self.notifications = notifications
        self.locks = locks

    async def execute(self, transaction_id: str) -> Result[StatusResultDTO]:
        """
        Execute status check

        Args:
            transaction_id: Transaction identifier

        Returns:
            Result[StatusResultDTO]: Current status, with provisioning payload
            when this call provisioned the purchase

        Errors:
            TRANSACTION_NOT_FOUND: Unknown or already removed transaction
            GATEWAY_UNAVAILABLE / GATEWAY_TIMEOUT / GATEWAY_REJECTED
        """
        # Step 1: Fail fast for unknown ids
        if await self.transaction_repo.get(transaction_id) is None:
            return Return.err(transaction_not_found(transaction_id))

        async with self.locks.get(transaction_id):
            # Step 2: The record may have been cancelled or swept while waiting
            transaction = await self.transaction_repo.get(transaction_id)
            if transaction is None:
                return Return.err(transaction_not_found(transaction_id))

            # Step 3: Reconcile status
            try:
                charge_status = await self.gateway.get_status(transaction.charge_id)
            except PaymentGatewayError as e:
                logger.error(f"Status check failed for {transaction_id}: [{e.code}] {e.message}")
                return Return.err(gateway_error(e))

            transaction.status = charge_status.status
            await self.transaction_repo.save(transaction)

            if not transaction.is_paid:
                return Return.ok(
                    StatusResultDTO(
                        status=transaction.status,
                        message=f"Status: {transaction.status}",
                        transaction=transaction,
                    )
                )

            if transaction.provisioned:
                return Return.ok(
                    StatusResultDTO(
                        status=transaction.status,
                        message="Payment confirmed, panel already created",
                        transaction=transaction,
                    )
                )

            # Step 4: First observed success
            try:
                result = await self._provision(transaction)
            except ProvisioningError as e:
                logger.error(
                    f"Provisioning failed for paid transaction {transaction_id} "
                    f"(user={transaction.username}, product={transaction.product_type}): {e.message}"
                )
                return Return.ok(
                    StatusResultDTO(
                        status=transaction.status,
                        message="Payment succeeded but the panel could not be created. Please contact the admin.",
                        transaction=transaction,
                        provisioning_error=e.message,
                    )
                )

            transaction.mark_provisioned()
            await self.transaction_repo.save(transaction)
            logger.info(f"Transaction {transaction_id} paid and provisioned")

        await self._notify(transaction)

        return Return.ok(
            StatusResultDTO(
                status=transaction.status,
                message="Payment succeeded and the panel is being created",
                transaction=transaction,
                provisioning=result,
            )
        )

    async def _provision(self, transaction: Transaction) -> ProvisioningResult:
        if transaction.is_admin_panel:
            return await self.provisioning.create_admin_panel(transaction.username)
        return await self.provisioning.create_server(transaction.username, transaction.product_type)

    async def _notify(self, transaction: Transaction) -> None:
        try:
            await self.notifications.send_message(payment_success_message(transaction))
        except Exception as e:
            logger.error(f"Payment notification for {transaction.id} failed: {e}")
