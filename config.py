import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


DEFAULT_PRODUCT_PRICES = {
    "1gb": 1000,
    "2gb": 2000,
    "3gb": 3000,
    "4gb": 4000,
    "5gb": 5000,
    "unli": 10000,
    "reseller": 3000,
    "admin": 5000,
    "pt": 8000,
    "owner": 10000,
    "tk": 12000,
    "ceo": 15000,
}


class ApplicationConfig:
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 2001)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENVIRONMENT = data.get("ENVIRONMENT", "development")

    # JSON document storage (users, promos, discounts)
    DATA_DIR = data.get("DATA_DIR", os.path.join(ROOT_PATH, "database"))

    # Payment gateway (Atlantic H2H)
    GATEWAY_BASE_URL = data.get("GATEWAY_BASE_URL", "https://atlantich2h.com")
    GATEWAY_API_KEY = data.get("GATEWAY_API_KEY", "")
    GATEWAY_CREATE_TIMEOUT = data.get("GATEWAY_CREATE_TIMEOUT", 30.0)  # Seconds
    GATEWAY_STATUS_TIMEOUT = data.get("GATEWAY_STATUS_TIMEOUT", 10.0)  # Seconds, status and cancel
    GATEWAY_TIMEZONE = data.get("GATEWAY_TIMEZONE", "Asia/Jakarta")  # For naive expired_at values

    # Control panel (Pterodactyl application API)
    PANEL_DOMAIN = data.get("PANEL_DOMAIN", "https://your-pterodactyl-domain.com")
    PANEL_APPLICATION_KEY = data.get("PANEL_APPLICATION_KEY", "")
    PANEL_LOCATION_ID = int(data.get("PANEL_LOCATION_ID", 1))
    PANEL_NEST_ID = int(data.get("PANEL_NEST_ID", 1))
    PANEL_EGG_ID = int(data.get("PANEL_EGG_ID", 15))
    PANEL_TIMEOUT = data.get("PANEL_TIMEOUT", 30.0)

    # Telegram notifications and admin bot
    TELEGRAM_BOT_TOKEN = data.get("TELEGRAM_BOT_TOKEN", "")
    ADMIN_TELEGRAM_ID = str(data.get("ADMIN_TELEGRAM_ID", ""))
    TELEGRAM_BOT_ENABLED = bool(data.get("TELEGRAM_BOT_ENABLED", False))

    # Product catalog (prices in Rupiah)
    PRODUCT_PRICES = {**DEFAULT_PRODUCT_PRICES, **data.get("PRODUCT_PRICES", {})}

    # Transaction lifecycle
    TRANSACTION_TTL_MINUTES = data.get("TRANSACTION_TTL_MINUTES", 10)
    TRANSACTION_MAX_AGE_HOURS = data.get("TRANSACTION_MAX_AGE_HOURS", 24)
    SWEEP_INTERVAL_SECONDS = data.get("SWEEP_INTERVAL_SECONDS", 60)
    DISCOUNT_CLEANUP_INTERVAL_SECONDS = data.get("DISCOUNT_CLEANUP_INTERVAL_SECONDS", 86400)  # Daily
