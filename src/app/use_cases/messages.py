"""Administrator notification texts"""

from src.domain.promo import Promo
from src.domain.transaction import Transaction
from src.domain.user import User


def format_rupiah(amount: int) -> str:
    """1500000 -> 'Rp 1.500.000'"""
    return "Rp " + f"{int(amount):,}".replace(",", ".")


def payment_success_message(transaction: Transaction) -> str:
    lines = [
        "✅ PAYMENT RECEIVED",
        "",
        f"👤 User: {transaction.username}",
        f"🎯 Product: {transaction.product_type}",
        f"💰 Total: {format_rupiah(transaction.final_price)}",
    ]
    if transaction.discount_applied > 0:
        lines.append(f"🎫 Discount: {format_rupiah(transaction.discount_applied)}")
    lines.append(f"📝 Type: {'Admin Panel' if transaction.is_admin_panel else 'User Panel'}")
    lines.append(f"🆔 Ref: {transaction.reff}")
    return "\n".join(lines)


def cancellation_message(transaction: Transaction) -> str:
    return "\n".join([
        "❌ TRANSACTION CANCELLED",
        "",
        f"👤 User: {transaction.username}",
        f"🎯 Product: {transaction.product_type}",
        f"💰 Total: {format_rupiah(transaction.final_price)}",
        f"🆔 Ref: {transaction.reff}",
        "📝 Reason: cancelled by user",
    ])


def coupon_claimed_message(user: User, promo: Promo) -> str:
    return "\n".join([
        "🎫 COUPON CLAIMED",
        "",
        f"👤 User: {user.name}",
        f"📧 Email: {user.email}",
        f"🎫 Code: {promo.code}",
        f"💰 Discount: {promo.discount}%",
        f"📊 Usage: {promo.used_count}/{promo.max_uses}",
    ])
