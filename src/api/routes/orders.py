"""Order API Routes

FastAPI routes for the purchase transaction lifecycle.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError
from src.api.schemas.order_request import CreateOrderRequestSchema, TransactionRequestSchema
from src.app.use_cases.orders import PlaceOrder, PlaceOrderCommandDTO
from src.app.use_cases.transactions import TransactionLifecycleManager
from src.depends import get_lifecycle_manager, get_place_order

router = APIRouter(tags=["Orders"])

GATEWAY_ERROR_RESPONSE = {
    "description": "Payment gateway failure",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "GATEWAY_TIMEOUT",
                    "message": "Timed out contacting the payment gateway. Please try again."
                }
            }
        }
    }
}


@router.post(
    "/create-order",
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Invalid product or request",
            "content": {
                "application/json": {
                    "example": {"error": {"code": "INVALID_PRODUCT", "message": "Invalid product type"}}
                }
            }
        },
        500: GATEWAY_ERROR_RESPONSE,
    }
)
async def create_order(
    request: CreateOrderRequestSchema,
    use_case: PlaceOrder = Depends(get_place_order),
):
    """
    Create a QRIS payment for a panel product.

    **Request body:**
    - `productType` (required): Product id from /api/products
    - `username` (required): Panel username to provision after payment
    - `isAdminPanel` (optional): Provision a root-admin account instead of a server
    - `userId` (optional): Storefront account placing the order
    - `applyDiscount` (optional): Consume the account's active discount

    **Returns:**
    - 200: QR payload, pricing and the transaction id to poll
    - 400: Invalid product type or request
    - 500: Payment gateway unavailable, timed out or rejected the charge
    """
    command = PlaceOrderCommandDTO(
        product_type=request.product_type,
        username=request.username,
        is_admin_panel=request.is_admin_panel,
        user_id=request.user_id,
        apply_discount=request.apply_discount,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    descriptor = result.value
    return {
        "success": True,
        "transactionId": descriptor.transaction_id,
        "reff": descriptor.reff,
        "productType": descriptor.product_type,
        "username": descriptor.username,
        "originalPrice": descriptor.original_price,
        "finalPrice": descriptor.final_price,
        "discountApplied": descriptor.discount_applied,
        "qrImage": descriptor.qr_image,
        "qrString": descriptor.qr_string,
        "expiresAt": descriptor.expires_at.isoformat(),
        "atlanticId": descriptor.atlantic_id,
        "fee": descriptor.fee,
        "getBalance": descriptor.get_balance,
    }


@router.post(
    "/check-payment-status",
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Transaction not found",
            "content": {
                "application/json": {
                    "example": {"error": {"code": "TRANSACTION_NOT_FOUND", "message": "Transaction not found"}}
                }
            }
        },
        500: GATEWAY_ERROR_RESPONSE,
    }
)
async def check_payment_status(
    request: TransactionRequestSchema,
    manager: TransactionLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Reconcile a transaction with the gateway.

    The first check that sees a successful payment creates the panel and
    returns its credentials under `transaction.panelInfo`. Later checks
    report success without creating anything.
    """
    result = await manager.check_status(request.transaction_id)

    if result.is_err():
        raise ClientError(result.error)

    outcome = result.value
    transaction = outcome.transaction.to_document()
    if outcome.provisioning is not None:
        transaction["panelInfo"] = outcome.provisioning.model_dump(mode="json")
    if outcome.provisioning_error is not None:
        transaction["provisioningError"] = outcome.provisioning_error

    return {
        "success": True,
        "status": outcome.status,
        "message": outcome.message,
        "transaction": transaction,
    }


@router.post(
    "/cancel-transaction",
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Transaction not found",
            "content": {
                "application/json": {
                    "example": {"error": {"code": "TRANSACTION_NOT_FOUND", "message": "Transaction not found"}}
                }
            }
        },
        500: GATEWAY_ERROR_RESPONSE,
    }
)
async def cancel_transaction(
    request: TransactionRequestSchema,
    manager: TransactionLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Cancel a pending transaction.

    The transaction is removed locally even when the gateway refuses the
    cancellation or cannot be reached; the error is still reported.
    """
    result = await manager.cancel(request.transaction_id)

    if result.is_err():
        raise ClientError(result.error)

    return {"success": True, "message": result.value.message}


@router.get("/active-transactions", status_code=status.HTTP_200_OK)
async def active_transactions(
    manager: TransactionLifecycleManager = Depends(get_lifecycle_manager),
):
    """List in-flight transactions (debugging aid)"""
    transactions = [t.to_document() for t in await manager.list_active()]
    return {"success": True, "count": len(transactions), "transactions": transactions}
