"""Transaction Lifecycle Manager

Single entry point for the purchase transaction lifecycle: create, status
reconciliation with at-most-once provisioning, cancellation and sweeping.
The store, the gateway and provisioning clients are injected so each
instance is self-contained.
"""

from datetime import datetime, timedelta
from typing import Callable, List, Optional

from libs.result import Result
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.services.notification_service import NotificationService
from src.app.services.payment_gateway import PaymentGateway
from src.app.services.provisioning_service import ProvisioningService
from src.app.services.qr_code_renderer import QrCodeRenderer
from src.domain.base import utc_now
from src.domain.product import ProductCatalog
from src.domain.transaction import Transaction
from .cancel_transaction import CancelTransaction
from .check_payment_status import CheckPaymentStatus
from .create_transaction import CreateTransaction
from .dtos import (
    CreateTransactionCommandDTO,
    TransactionDescriptorDTO,
    StatusResultDTO,
    CancelResultDTO,
    SweepResultDTO,
)
from .sweep_transactions import SweepTransactions
from .transaction_locks import TransactionLocks


class TransactionLifecycleManager:
    """
    Owns the in-flight transaction store and the per-transaction locks.

    Usage:
        manager = TransactionLifecycleManager(
            transaction_repo=InMemoryTransactionRepository(),
            gateway=gateway,
            provisioning=provisioning,
            notifications=notifications,
            catalog=ProductCatalog(prices),
            qr_renderer=QrCodeImageRenderer(),
        )
        result = await manager.create(command)
        result = await manager.check_status(result.value.transaction_id)
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        gateway: PaymentGateway,
        provisioning: ProvisioningService,
        notifications: NotificationService,
        catalog: ProductCatalog,
        qr_renderer: QrCodeRenderer,
        ttl: timedelta = timedelta(minutes=10),
        max_age: timedelta = timedelta(hours=24),
        gateway_timezone: str = "Asia/Jakarta",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.transaction_repo = transaction_repo
        self.catalog = catalog
        self.locks = TransactionLocks()

        self._create = CreateTransaction(
            transaction_repo=transaction_repo,
            gateway=gateway,
            catalog=catalog,
            qr_renderer=qr_renderer,
            ttl=ttl,
            gateway_timezone=gateway_timezone,
            clock=clock,
        )
        self._check_status = CheckPaymentStatus(
            transaction_repo=transaction_repo,
            gateway=gateway,
            provisioning=provisioning,
            notifications=notifications,
            locks=self.locks,
        )
        self._cancel = CancelTransaction(
            transaction_repo=transaction_repo,
            gateway=gateway,
            notifications=notifications,
            locks=self.locks,
        )
        self._sweep = SweepTransactions(
            transaction_repo=transaction_repo,
            locks=self.locks,
            max_age=max_age,
            clock=clock,
        )

    async def create(self, command: CreateTransactionCommandDTO) -> Result[TransactionDescriptorDTO]:
        return await self._create.execute(command)

    async def check_status(self, transaction_id: str) -> Result[StatusResultDTO]:
        return await self._check_status.execute(transaction_id)

    async def cancel(self, transaction_id: str) -> Result[CancelResultDTO]:
        return await self._cancel.execute(transaction_id)

    async def sweep(self, now: Optional[datetime] = None) -> Result[SweepResultDTO]:
        return await self._sweep.execute(now)

    async def list_active(self) -> List[Transaction]:
        return await self.transaction_repo.list_all()
