# payments.py  –  integration providers, orders, fulfillments, transactions,
#                  subscriptions, coupons and custom payment providers
#
# Payments endpoints are addressed by (altId, altType) rather than locationId;
# altId defaults to the configured location and altType to "location".

from ..marshal import passthrough, without
from .base import ToolModule, tool

ALT = {"altType": "location"}
ALT_TYPE = {"type": "string", "enum": ["location"], "description": "Alt Type"}
ALT_TYPE_ANY = {"type": "string", "description": "Alt Type (type of identifier)"}
ALT_ID = {"type": "string", "description": "Alt ID (unique identifier like location ID)"}
LOCATION_ID = {"type": "string", "description": "Location ID"}
SUB_ACCOUNT = {"type": "string", "description": "Location ID (sub-account ID)"}
PAYMENT_MODE = {"type": "string", "description": "Mode of payment (live/test)"}
STRINGS = {"type": "array", "items": {"type": "string"}}


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _page(limit_description, limit_default, offset_description="Starting index for pagination"):
    return {
        "limit": {"type": "number", "description": limit_description, "default": limit_default},
        "offset": {"type": "number", "description": offset_description, "default": 0},
    }


def _keys(mode):
    return {
        "type": "object",
        "description": f"{mode.capitalize()} payment configuration",
        "properties": {
            "apiKey": _s(f"API key for {mode} payments"),
            "publishableKey": _s(f"Publishable key for {mode} payments"),
        },
        "required": ["apiKey", "publishableKey"],
    }


def _coupon_fields(future_default):
    applies = {"type": "boolean", "description": "Whether coupon applies to future subscription payments"}
    per_customer = {"type": "boolean", "description": "Whether to limit coupon to once per customer"}
    if future_default:
        applies["default"] = True
        per_customer["default"] = False
    return {
        "name": _s("Coupon name"),
        "code": _s("Coupon code"),
        "discountType": _s("Type of discount", enum=["percentage", "amount"]),
        "discountValue": {"type": "number", "description": "Discount value"},
        "startDate": _s("Start date in YYYY-MM-DDTHH:mm:ssZ format"),
        "endDate": _s("End date in YYYY-MM-DDTHH:mm:ssZ format"),
        "usageLimit": {"type": "number", "description": "Maximum number of times coupon can be used"},
        "productIds": {**STRINGS, "description": "Product IDs that the coupon applies to"},
        "applyToFuturePayments": applies,
        "applyToFuturePaymentsConfig": {
            "type": "object",
            "description": "Configuration for future payments application",
            "properties": {
                "type": _s("Type of future payments config", enum=["forever", "fixed"]),
                "duration": {"type": "number", "description": "Duration for fixed type"},
                "durationType": _s("Duration type", enum=["months"]),
            },
            "required": ["type"],
        },
        "limitPerCustomer": per_customer,
    }


COUPON_REQUIRED = ["altId", "altType", "name", "code", "discountType", "discountValue", "startDate"]


class PaymentTools(ToolModule):
    domain = "payments"

    # ── integration providers ────────────────────────────────
    @tool("create_whitelabel_integration_provider", "Create a white-label integration provider for payments", {
        "altId": _s("Location ID or company ID based on altType"),
        "altType": ALT_TYPE,
        "uniqueName": _s("A unique name for the integration provider (lowercase, hyphens only)"),
        "title": _s("The title or name of the integration provider"),
        "provider": _s("The type of payment provider", enum=["authorize-net", "nmi"]),
        "description": _s("A brief description of the integration provider"),
        "imageUrl": _s("The URL to an image representing the integration provider"),
    }, required=["altId", "altType", "uniqueName", "title", "provider", "description", "imageUrl"],
        location="altId", fill=ALT)
    async def create_whitelabel_integration_provider(self, args):
        return passthrough(await self.client.post("/payments/integrations/provider/whitelabel", args))

    @tool("list_whitelabel_integration_providers", "List white-label integration providers with optional pagination", {
        "altId": _s("Location ID or company ID based on altType"),
        "altType": ALT_TYPE,
        **_page("Maximum number of items to return", 0),
    }, required=["altId", "altType"], location="altId", fill=ALT)
    async def list_whitelabel_integration_providers(self, args):
        return passthrough(await self.client.get("/payments/integrations/provider/whitelabel", args))

    # ── orders ───────────────────────────────────────────────
    @tool("list_orders", "List orders with optional filtering and pagination", {
        "locationId": SUB_ACCOUNT,
        "altId": ALT_ID,
        "altType": ALT_TYPE_ANY,
        "status": _s("Order status filter"),
        "paymentMode": PAYMENT_MODE,
        "startAt": _s("Starting date interval for orders (YYYY-MM-DD)"),
        "endAt": _s("Ending date interval for orders (YYYY-MM-DD)"),
        "search": _s("Search term for order name"),
        "contactId": _s("Contact ID for filtering orders"),
        "funnelProductIds": _s("Comma-separated funnel product IDs"),
        **_page("Maximum number of items per page", 10),
    }, required=["altId", "altType"], location="altId", fill=ALT)
    async def list_orders(self, args):
        return passthrough(await self.client.get("/payments/orders", args))

    @tool("get_order_by_id", "Get a specific order by its ID", {
        "orderId": _s("ID of the order to retrieve"),
        "locationId": SUB_ACCOUNT,
        "altId": ALT_ID,
        "altType": ALT_TYPE_ANY,
    }, required=["orderId", "altId", "altType"], location="altId", fill=ALT)
    async def get_order_by_id(self, args):
        return passthrough(await self.client.get(f"/payments/orders/{args['orderId']}", without(args, "orderId")))

    @tool("create_order_fulfillment", "Create a fulfillment for an order", {
        "orderId": _s("ID of the order to fulfill"),
        "altId": _s("Location ID or Agency ID"),
        "altType": ALT_TYPE,
        "trackings": {
            "type": "array",
            "description": "Fulfillment tracking information",
            "items": {
                "type": "object",
                "properties": {
                    "trackingNumber": _s("Tracking number from shipping carrier"),
                    "shippingCarrier": _s("Shipping carrier name"),
                    "trackingUrl": _s("Tracking URL"),
                },
            },
        },
        "items": {
            "type": "array",
            "description": "Items being fulfilled",
            "items": {
                "type": "object",
                "properties": {
                    "priceId": _s("The ID of the product price"),
                    "qty": {"type": "number", "description": "Quantity of the item"},
                },
                "required": ["priceId", "qty"],
            },
        },
        "notifyCustomer": {"type": "boolean", "description": "Whether to notify the customer"},
    }, required=["orderId", "altId", "altType", "trackings", "items", "notifyCustomer"],
        location="altId", fill=ALT)
    async def create_order_fulfillment(self, args):
        path = f"/payments/orders/{args['orderId']}/fulfillments"
        return passthrough(await self.client.post(path, without(args, "orderId")))

    @tool("list_order_fulfillments", "List all fulfillments for an order", {
        "orderId": _s("ID of the order"),
        "altId": _s("Location ID or Agency ID"),
        "altType": ALT_TYPE,
    }, required=["orderId", "altId", "altType"], location="altId", fill=ALT)
    async def list_order_fulfillments(self, args):
        path = f"/payments/orders/{args['orderId']}/fulfillments"
        return passthrough(await self.client.get(path, without(args, "orderId")))

    # ── transactions ─────────────────────────────────────────
    @tool("list_transactions", "List transactions with optional filtering and pagination", {
        "locationId": SUB_ACCOUNT,
        "altId": ALT_ID,
        "altType": ALT_TYPE_ANY,
        "paymentMode": PAYMENT_MODE,
        "startAt": _s("Starting date interval for transactions (YYYY-MM-DD)"),
        "endAt": _s("Ending date interval for transactions (YYYY-MM-DD)"),
        "entitySourceType": _s("Source of the transactions"),
        "entitySourceSubType": _s("Source sub-type of the transactions"),
        "search": _s("Search term for transaction name"),
        "subscriptionId": _s("Subscription ID for filtering transactions"),
        "entityId": _s("Entity ID for filtering transactions"),
        "contactId": _s("Contact ID for filtering transactions"),
        **_page("Maximum number of items per page", 10),
    }, required=["altId", "altType"], location="altId", fill=ALT)
    async def list_transactions(self, args):
        return passthrough(await self.client.get("/payments/transactions", args))

    @tool("get_transaction_by_id", "Get a specific transaction by its ID", {
        "transactionId": _s("ID of the transaction to retrieve"),
        "locationId": SUB_ACCOUNT,
        "altId": ALT_ID,
        "altType": ALT_TYPE_ANY,
    }, required=["transactionId", "altId", "altType"], location="altId", fill=ALT)
    async def get_transaction_by_id(self, args):
        path = f"/payments/transactions/{args['transactionId']}"
        return passthrough(await self.client.get(path, without(args, "transactionId")))

    # ── subscriptions ────────────────────────────────────────
    @tool("list_subscriptions", "List subscriptions with optional filtering and pagination", {
        "altId": ALT_ID,
        "altType": ALT_TYPE,
        "entityId": _s("Entity ID for filtering subscriptions"),
        "paymentMode": PAYMENT_MODE,
        "startAt": _s("Starting date interval for subscriptions (YYYY-MM-DD)"),
        "endAt": _s("Ending date interval for subscriptions (YYYY-MM-DD)"),
        "entitySourceType": _s("Source of the subscriptions"),
        "search": _s("Search term for subscription name"),
        "contactId": _s("Contact ID for the subscription"),
        "id": _s("Subscription ID for filtering"),
        **_page("Maximum number of items per page", 10),
    }, required=["altId", "altType"], location="altId", fill=ALT)
    async def list_subscriptions(self, args):
        return passthrough(await self.client.get("/payments/subscriptions", args))

    @tool("get_subscription_by_id", "Get a specific subscription by its ID", {
        "subscriptionId": _s("ID of the subscription to retrieve"),
        "altId": ALT_ID,
        "altType": ALT_TYPE,
    }, required=["subscriptionId", "altId", "altType"], location="altId", fill=ALT)
    async def get_subscription_by_id(self, args):
        path = f"/payments/subscriptions/{args['subscriptionId']}"
        return passthrough(await self.client.get(path, without(args, "subscriptionId")))

    # ── coupons ──────────────────────────────────────────────
    @tool("list_coupons", "List all coupons for a location with optional filtering", {
        "altId": LOCATION_ID,
        "altType": ALT_TYPE,
        **_page("Maximum number of coupons to return", 100, "Number of coupons to skip for pagination"),
        "status": _s("Filter coupons by status", enum=["scheduled", "active", "expired"]),
        "search": _s("Search term to filter coupons by name or code"),
    }, required=["altId", "altType"], location="altId", fill=ALT)
    async def list_coupons(self, args):
        return passthrough(await self.client.get("/payments/coupon/list", args))

    @tool("create_coupon", "Create a new promotional coupon", {
        "altId": LOCATION_ID,
        "altType": ALT_TYPE,
        **_coupon_fields(future_default=True),
    }, required=COUPON_REQUIRED, location="altId", fill=ALT)
    async def create_coupon(self, args):
        return passthrough(await self.client.post("/payments/coupon", args))

    @tool("update_coupon", "Update an existing coupon", {
        "id": _s("Coupon ID"),
        "altId": LOCATION_ID,
        "altType": ALT_TYPE,
        **_coupon_fields(future_default=False),
    }, required=["id"] + COUPON_REQUIRED, location="altId", fill=ALT)
    async def update_coupon(self, args):
        return passthrough(await self.client.put("/payments/coupon", args))

    @tool("delete_coupon", "Delete a coupon permanently", {
        "altId": LOCATION_ID,
        "altType": ALT_TYPE,
        "id": _s("Coupon ID"),
    }, required=["altId", "altType", "id"], location="altId", fill=ALT)
    async def delete_coupon(self, args):
        return passthrough(await self.client.delete("/payments/coupon", json=args))

    @tool("get_coupon", "Get coupon details by ID or code", {
        "altId": LOCATION_ID,
        "altType": ALT_TYPE,
        "id": _s("Coupon ID"),
        "code": _s("Coupon code"),
    }, required=["altId", "altType", "id", "code"], location="altId", fill=ALT)
    async def get_coupon(self, args):
        return passthrough(await self.client.get("/payments/coupon", args))

    # ── custom providers ─────────────────────────────────────
    @tool("create_custom_provider_integration", "Create a new custom payment provider integration", {
        "locationId": LOCATION_ID,
        "name": _s("Name of the custom provider"),
        "description": _s("Description of the payment gateway"),
        "paymentsUrl": _s("URL to load in iframe for payment session"),
        "queryUrl": _s("URL for querying payment events"),
        "imageUrl": _s("Public image URL for the payment gateway logo"),
    }, required=["locationId", "name", "description", "paymentsUrl", "queryUrl", "imageUrl"])
    async def create_custom_provider_integration(self, args):
        return passthrough(await self.client.post("/payments/custom-provider/provider", without(args, "locationId"),
                                                  params={"locationId": args["locationId"]}))

    @tool("delete_custom_provider_integration", "Delete an existing custom payment provider integration",
          {"locationId": LOCATION_ID}, required=["locationId"])
    async def delete_custom_provider_integration(self, args):
        return passthrough(await self.client.delete("/payments/custom-provider/provider",
                                                    params={"locationId": args["locationId"]}))

    @tool("get_custom_provider_config", "Fetch existing payment config for a location",
          {"locationId": LOCATION_ID}, required=["locationId"])
    async def get_custom_provider_config(self, args):
        return passthrough(await self.client.get("/payments/custom-provider/connect",
                                                 {"locationId": args["locationId"]}))

    @tool("create_custom_provider_config", "Create new payment config for a location", {
        "locationId": LOCATION_ID,
        "live": _keys("live"),
        "test": _keys("test"),
    }, required=["locationId", "live", "test"])
    async def create_custom_provider_config(self, args):
        return passthrough(await self.client.post("/payments/custom-provider/connect", without(args, "locationId"),
                                                  params={"locationId": args["locationId"]}))

    @tool("disconnect_custom_provider_config", "Disconnect existing payment config for a location", {
        "locationId": LOCATION_ID,
        "liveMode": {"type": "boolean", "description": "Whether to disconnect live or test mode config"},
    }, required=["locationId", "liveMode"])
    async def disconnect_custom_provider_config(self, args):
        return passthrough(await self.client.post("/payments/custom-provider/disconnect", without(args, "locationId"),
                                                  params={"locationId": args["locationId"]}))
