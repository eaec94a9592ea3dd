"""Service wiring and FastAPI dependency providers

ServiceContainer builds every adapter and long-lived service once per
application. Routes obtain use cases through the get_* providers, which
tests replace with app.dependency_overrides.
"""

import logging
import os
import time
from datetime import timedelta
from typing import Optional

from fastapi import Depends, Request
from telegram import Bot

from config import ApplicationConfig
from src.adapter.repositories import (
    InMemoryTransactionRepository,
    JsonDocumentStore,
    JsonUserRepository,
    JsonPromoRepository,
    JsonDiscountRepository,
)
from src.adapter.services import (
    AtlanticPaymentGateway,
    PterodactylProvisioningService,
    QrCodeImageRenderer,
    BcryptPasswordHasher,
    create_notification_service,
)
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.services import (
    PaymentGateway,
    ProvisioningService,
    NotificationService,
    QrCodeRenderer,
    PasswordHasher,
)
from src.app.use_cases.accounts import RegisterUser, LoginUser, GetUser, ListUsers
from src.app.use_cases.coupons import (
    CreatePromo,
    GeneratePromo,
    ListPromos,
    ClaimCoupon,
    GetActiveDiscount,
    UseDiscount,
    ResolveOrderDiscount,
    CleanupExpiredDiscounts,
)
from src.app.use_cases.orders import PlaceOrder
from src.app.use_cases.transactions import TransactionLifecycleManager
from src.bot import AdminBot, build_admin_bot
from src.domain.product import ProductCatalog
from src.worker import TransactionSweeperWorker, DiscountCleanupWorker

logger = logging.getLogger(__name__)

USERS_FILE = "dataLogin.json"
PROMOS_FILE = "promoCodes.json"
DISCOUNTS_FILE = "userDiscounts.json"


class ServiceContainer:
    """
    Application-scoped services

    Every collaborator can be injected; anything left out is built from
    the configuration.
    """

    def __init__(
        self,
        config=ApplicationConfig,
        gateway: Optional[PaymentGateway] = None,
        provisioning: Optional[ProvisioningService] = None,
        notifications: Optional[NotificationService] = None,
        transaction_repo: Optional[TransactionRepository] = None,
        qr_renderer: Optional[QrCodeRenderer] = None,
        password_hasher: Optional[PasswordHasher] = None,
        data_dir: Optional[str] = None,
    ):
        self.config = config
        self.started_at = time.monotonic()

        data_dir = data_dir or config.DATA_DIR
        self.user_repo = JsonUserRepository(JsonDocumentStore(os.path.join(data_dir, USERS_FILE), "users"))
        self.promo_repo = JsonPromoRepository(JsonDocumentStore(os.path.join(data_dir, PROMOS_FILE), "promos"))
        self.discount_repo = JsonDiscountRepository(
            JsonDocumentStore(os.path.join(data_dir, DISCOUNTS_FILE), "discounts")
        )

        self.telegram_bot: Optional[Bot] = None
        if notifications is None:
            if config.TELEGRAM_BOT_TOKEN and config.ADMIN_TELEGRAM_ID:
                self.telegram_bot = Bot(config.TELEGRAM_BOT_TOKEN)
            notifications = create_notification_service(self.telegram_bot, config.ADMIN_TELEGRAM_ID)
        self.notifications = notifications

        self.gateway = gateway or AtlanticPaymentGateway(
            base_url=config.GATEWAY_BASE_URL,
            api_key=config.GATEWAY_API_KEY,
            create_timeout=config.GATEWAY_CREATE_TIMEOUT,
            status_timeout=config.GATEWAY_STATUS_TIMEOUT,
        )
        self.provisioning = provisioning or PterodactylProvisioningService(
            domain=config.PANEL_DOMAIN,
            application_key=config.PANEL_APPLICATION_KEY,
            location_id=config.PANEL_LOCATION_ID,
            nest_id=config.PANEL_NEST_ID,
            egg_id=config.PANEL_EGG_ID,
            timeout=config.PANEL_TIMEOUT,
        )
        self.password_hasher = password_hasher or BcryptPasswordHasher()
        self.catalog = ProductCatalog(config.PRODUCT_PRICES)

        self.manager = TransactionLifecycleManager(
            transaction_repo=transaction_repo or InMemoryTransactionRepository(),
            gateway=self.gateway,
            provisioning=self.provisioning,
            notifications=self.notifications,
            catalog=self.catalog,
            qr_renderer=qr_renderer or QrCodeImageRenderer(),
            ttl=timedelta(minutes=config.TRANSACTION_TTL_MINUTES),
            max_age=timedelta(hours=config.TRANSACTION_MAX_AGE_HOURS),
            gateway_timezone=config.GATEWAY_TIMEZONE,
        )

        self.sweeper = TransactionSweeperWorker(self.manager, config.SWEEP_INTERVAL_SECONDS)
        self.discount_cleanup = DiscountCleanupWorker(
            CleanupExpiredDiscounts(self.discount_repo), config.DISCOUNT_CLEANUP_INTERVAL_SECONDS
        )
        self.admin_bot: Optional[AdminBot] = None

    def uptime(self) -> float:
        return time.monotonic() - self.started_at

    async def start(self):
        """Start background workers, the Telegram client and the admin bot"""
        self.sweeper.start()
        self.discount_cleanup.start()

        if self.telegram_bot is not None:
            await self.telegram_bot.initialize()

        if self.config.TELEGRAM_BOT_ENABLED and self.config.TELEGRAM_BOT_TOKEN:
            self.admin_bot = build_admin_bot(
                token=self.config.TELEGRAM_BOT_TOKEN,
                admin_id=self.config.ADMIN_TELEGRAM_ID,
                list_users=ListUsers(self.user_repo),
                generate_promo=GeneratePromo(self.promo_repo),
                list_promos=ListPromos(self.promo_repo),
            )
            await self.admin_bot.start()

        logger.info("Services started")

    async def shutdown(self):
        await self.sweeper.shutdown()
        await self.discount_cleanup.shutdown()
        if self.admin_bot is not None:
            await self.admin_bot.shutdown()
            self.admin_bot = None
        if self.telegram_bot is not None:
            await self.telegram_bot.shutdown()
        logger.info("Services stopped")


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_lifecycle_manager(container: ServiceContainer = Depends(get_container)) -> TransactionLifecycleManager:
    return container.manager


def get_place_order(container: ServiceContainer = Depends(get_container)) -> PlaceOrder:
    return PlaceOrder(
        manager=container.manager,
        resolve_discount=ResolveOrderDiscount(container.discount_repo),
        user_repo=container.user_repo,
    )


def get_register_user(container: ServiceContainer = Depends(get_container)) -> RegisterUser:
    return RegisterUser(container.user_repo, container.password_hasher)


def get_login_user(container: ServiceContainer = Depends(get_container)) -> LoginUser:
    return LoginUser(container.user_repo, container.password_hasher)


def get_get_user(container: ServiceContainer = Depends(get_container)) -> GetUser:
    return GetUser(container.user_repo)


def get_list_users(container: ServiceContainer = Depends(get_container)) -> ListUsers:
    return ListUsers(container.user_repo)


def get_claim_coupon(container: ServiceContainer = Depends(get_container)) -> ClaimCoupon:
    return ClaimCoupon(
        container.user_repo, container.promo_repo, container.discount_repo, container.notifications
    )


def get_active_discount(container: ServiceContainer = Depends(get_container)) -> GetActiveDiscount:
    return GetActiveDiscount(container.discount_repo)


def get_use_discount(container: ServiceContainer = Depends(get_container)) -> UseDiscount:
    return UseDiscount(container.discount_repo)


def get_create_promo(container: ServiceContainer = Depends(get_container)) -> CreatePromo:
    return CreatePromo(container.promo_repo)


def get_list_promos(container: ServiceContainer = Depends(get_container)) -> ListPromos:
    return ListPromos(container.promo_repo)
