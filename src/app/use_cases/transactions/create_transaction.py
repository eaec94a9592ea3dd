"""CreateTransaction Use Case

Creates a QRIS charge with the payment gateway and registers the
resulting purchase transaction.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from libs.result import Result, Return, Error
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.services.payment_gateway import PaymentGateway, PaymentGatewayError, Charge
from src.app.services.qr_code_renderer import QrCodeRenderer
from src.domain.base import utc_now
from src.domain.product import ProductCatalog
from src.domain.transaction import (
    Transaction,
    STATUS_PENDING,
    generate_reference,
    generate_temporary_id,
)
from .dtos import CreateTransactionCommandDTO, TransactionDescriptorDTO
from .errors import gateway_error

logger = logging.getLogger(__name__)


class CreateTransaction:
    """
    Use Case: Create a purchase transaction

    Business Rules:
    1. Product must exist in the catalog with a price > 0
    2. final_price = original_price - discount_applied (0 <= discount <= price)
    3. Every creation uses a fresh reference and a fresh store key
    4. Nothing is stored when the gateway call fails

    Flow:
    1. Resolve product price
    2. Apply the pre-resolved discount
    3. Create the charge with the gateway
    4. Store a pending, unprovisioned transaction
    5. Render the QR payload and return the descriptor
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        gateway: PaymentGateway,
        catalog: ProductCatalog,
        qr_renderer: QrCodeRenderer,
        ttl: timedelta = timedelta(minutes=10),
        gateway_timezone: str = "Asia/Jakarta",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.transaction_repo = transaction_repo
        self.gateway = gateway
        self.catalog = catalog
        self.qr_renderer = qr_renderer
        self.ttl = ttl
        self.gateway_timezone = gateway_timezone
        self.clock = clock

    async def execute(self, command: CreateTransactionCommandDTO) -> Result[TransactionDescriptorDTO]:
        """
        Execute transaction creation

        Args:
            command: CreateTransactionCommandDTO with product, subject and discount

        Returns:
            Result[TransactionDescriptorDTO]: Payment payload or error

        Errors:
            INVALID_PRODUCT: Unknown product or product without a price
            INVALID_INPUT: Discount outside [0, original_price]
            GATEWAY_UNAVAILABLE / GATEWAY_TIMEOUT / GATEWAY_REJECTED
        """
        # Step 1: Resolve price
        product = self.catalog.get(command.product_type)
        if not product:
            return Return.err(
                Error(
                    code="INVALID_PRODUCT",
                    message="Invalid product type",
                    reason=f"product_type={command.product_type}",
                )
            )
        original_price = product.price

        # Step 2: Apply discount
        if command.discount_applied < 0 or command.discount_applied > original_price:
            return Return.err(
                Error(
                    code="INVALID_INPUT",
                    message="Discount must be between 0 and the product price",
                    reason=f"discount_applied={command.discount_applied}, price={original_price}",
                )
            )
        final_price = original_price - command.discount_applied

        # Step 3: Create charge
        reference = generate_reference()
        logger.info(f"Creating charge {reference} for {command.product_type} ({final_price})")
        try:
            charge = await self.gateway.create_charge(amount=final_price, reference=reference)
        except PaymentGatewayError as e:
            logger.error(f"Charge creation failed for {reference}: [{e.code}] {e.message}")
            return Return.err(gateway_error(e))

        # Step 4: Store transaction
        created_at = self.clock()
        transaction_id = await self._fresh_id(charge)
        transaction = Transaction(
            id=transaction_id,
            reff=reference,
            atlantic_id=charge.id,
            product_type=command.product_type,
            username=command.username,
            is_admin_panel=command.is_admin_panel,
            original_price=original_price,
            discount_applied=command.discount_applied,
            final_price=final_price,
            discount_id=command.discount_id,
            user_id=command.user_id,
            status=STATUS_PENDING,
            provisioned=False,
            created_at=created_at,
            expires_at=self._resolve_expiry(charge.expired_at, created_at),
        )
        await self.transaction_repo.add(transaction)
        logger.info(f"Transaction {transaction.id} created (reff={reference})")

        # Step 5: Build descriptor
        qr_source = charge.qr_string or charge.qr_image or ""
        return Return.ok(
            TransactionDescriptorDTO(
                transaction_id=transaction.id,
                reff=reference,
                product_type=transaction.product_type,
                username=transaction.username,
                original_price=original_price,
                final_price=final_price,
                discount_applied=transaction.discount_applied,
                qr_image=self._render_qr(qr_source, final_price),
                qr_string=qr_source,
                expires_at=transaction.expires_at,
                atlantic_id=charge.id,
                fee=charge.fee or 0,
                get_balance=charge.get_balance if charge.get_balance is not None else final_price,
            )
        )

    async def _fresh_id(self, charge: Charge) -> str:
        if not charge.id:
            return generate_temporary_id()
        if await self.transaction_repo.get(charge.id) is not None:
            logger.warning(f"Gateway reused charge id {charge.id}, storing under a temporary id")
            return generate_temporary_id()
        return charge.id

    def _resolve_expiry(self, expired_at: Optional[str], created_at: datetime) -> datetime:
        """
        Gateway expiry when it parses, else created_at + ttl

        Naive gateway timestamps are in the gateway's local timezone.
        """
        fallback = created_at + self.ttl
        if not expired_at:
            return fallback
        try:
            parsed = datetime.fromisoformat(expired_at)
        except ValueError:
            logger.warning(f"Unparseable gateway expiry {expired_at!r}, using {self.ttl} from now")
            return fallback
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=ZoneInfo(self.gateway_timezone))
        return parsed.astimezone(timezone.utc)

    def _render_qr(self, qr_source: str, final_price: int) -> str:
        content = qr_source or f"Payment: {final_price}"
        try:
            return self.qr_renderer.to_data_url(content)
        except Exception as e:
            logger.error(f"QR rendering failed, using fallback payload: {e}")
            return self.qr_renderer.to_data_url(f"Payment: {final_price}")
