"""PlaceOrder Use Case

Storefront order flow around the transaction lifecycle: discount
resolution before the charge, account statistics after it.
"""

import logging

from libs.result import Result, Return, Error
from src.app.repositories.exceptions import PersistenceError
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.coupons.resolve_order_discount import ResolveOrderDiscount
from src.app.use_cases.coupons.dtos import DiscountResolutionDTO
from src.app.use_cases.transactions.dtos import CreateTransactionCommandDTO, TransactionDescriptorDTO
from src.app.use_cases.transactions.lifecycle_manager import TransactionLifecycleManager
from .dtos import PlaceOrderCommandDTO

logger = logging.getLogger(__name__)


class PlaceOrder:
    """
    Use Case: Place an order

    Flow:
    1. Validate product (before touching any discount)
    2. Resolve and consume the user's discount when requested
    3. Create the transaction through the lifecycle manager
    4. Record the order on the user's account (best effort)
    """

    def __init__(
        self,
        manager: TransactionLifecycleManager,
        resolve_discount: ResolveOrderDiscount,
        user_repo: UserRepository,
    ):
        self.manager = manager
        self.resolve_discount = resolve_discount
        self.user_repo = user_repo

    async def execute(self, command: PlaceOrderCommandDTO) -> Result[TransactionDescriptorDTO]:
        product = self.manager.catalog.get(command.product_type)
        if not product:
            return Return.err(
                Error(
                    code="INVALID_PRODUCT",
                    message="Invalid product type",
                    reason=f"product_type={command.product_type}",
                )
            )

        resolution = DiscountResolutionDTO()
        if command.apply_discount and command.user_id:
            discount_result = await self.resolve_discount.execute(command.user_id, product.price)
            if discount_result.is_ok():
                resolution = discount_result.value

        result = await self.manager.create(
            CreateTransactionCommandDTO(
                product_type=command.product_type,
                username=command.username,
                is_admin_panel=command.is_admin_panel,
                discount_applied=resolution.discount_applied,
                discount_id=resolution.discount_id,
                user_id=command.user_id,
            )
        )
        if result.is_err():
            return result

        if command.user_id:
            await self._record_order(command.user_id, result.value.final_price)

        return result

    async def _record_order(self, user_id: str, amount: int) -> None:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            return
        user.record_order(amount)
        try:
            await self.user_repo.update(user)
        except PersistenceError as e:
            logger.error(f"Failed to record order for user {user_id}: {e.message}")
