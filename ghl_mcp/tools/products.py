# products.py  –  products, prices, inventory and collections
#
# Tool names in this family carry a "ghl_" prefix.  Inventory and collection
# endpoints address the location as altId/altType.

from ..errors import MissingDataError
from ..marshal import pick, unwrap, without
from .base import ToolModule, tool

PRODUCT_TYPES = ["DIGITAL", "PHYSICAL", "SERVICE", "PHYSICAL/DIGITAL"]
LOCATION = {"type": "string", "description": "GHL Location ID (optional, uses default if not provided)"}


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _n(description):
    return {"type": "number", "description": description}


def _b(description):
    return {"type": "boolean", "description": description}


def _alt(args):
    return {"altId": args["locationId"], "altType": "location"}


class ProductTools(ToolModule):
    domain = "products"

    @tool("ghl_create_product", "Create a new product in GoHighLevel", {
        "locationId": LOCATION,
        "name": _s("Product name"),
        "productType": _s("Type of product", enum=PRODUCT_TYPES),
        "description": _s("Product description"),
        "image": _s("Product image URL"),
        "availableInStore": _b("Whether product is available in store"),
        "slug": _s("Product URL slug"),
    }, required=["name", "productType"], action="create product")
    async def create_product(self, args):
        product = unwrap(await self.client.post("/products/", dict(args)))
        return {
            "success": True,
            "product": product,
            "message": f"Product \"{product.get('name', args['name'])}\" created successfully with ID: {product.get('_id')}",
        }

    @tool("ghl_list_products", "List products with optional filtering", {
        "locationId": LOCATION,
        "limit": _n("Maximum number of products to return"),
        "offset": _n("Number of products to skip"),
        "search": _s("Search term for product names"),
        "storeId": _s("Filter by store ID"),
        "includedInStore": _b("Filter by store inclusion status"),
        "availableInStore": _b("Filter by store availability"),
    }, required=[], action="list products")
    async def list_products(self, args):
        params = pick(args, "locationId", "limit", "offset", "search", "storeId", "includedInStore",
                      "availableInStore")
        data = unwrap(await self.client.get("/products/", params))
        products = data.get("products") or []
        # total arrives as [{"total": n}]
        total = data.get("total") or [{}]
        if isinstance(total, list):
            total = (total[0] if total else {}).get("total") or 0
        return {
            "success": True,
            "products": products,
            "total": total,
            "message": f"Retrieved {len(products)} of {total} products",
        }

    @tool("ghl_get_product", "Get a specific product by ID", {
        "productId": _s("Product ID to retrieve"),
        "locationId": LOCATION,
    }, required=["productId"], action="get product")
    async def get_product(self, args):
        product = unwrap(await self.client.get(f"/products/{args['productId']}", pick(args, "locationId")))
        return {"success": True, "product": product, "message": "Product retrieved successfully"}

    @tool("ghl_update_product", "Update an existing product", {
        "productId": _s("Product ID to update"),
        "locationId": LOCATION,
        "name": _s("Product name"),
        "productType": _s("Type of product", enum=PRODUCT_TYPES),
        "description": _s("Product description"),
        "image": _s("Product image URL"),
        "availableInStore": _b("Whether product is available in store"),
    }, required=["productId"], action="update product")
    async def update_product(self, args):
        product = unwrap(await self.client.put(f"/products/{args['productId']}", without(args, "productId")))
        return {"success": True, "product": product, "message": "Product updated successfully"}

    @tool("ghl_delete_product", "Delete a product by ID", {
        "productId": _s("Product ID to delete"),
        "locationId": LOCATION,
    }, required=["productId"], action="delete product")
    async def delete_product(self, args):
        data = unwrap(await self.client.delete(f"/products/{args['productId']}", params=pick(args, "locationId")))
        deleted = bool(data.get("status"))
        return {
            "success": True,
            "deleted": deleted,
            "productId": args["productId"],
            "message": "Product successfully deleted" if deleted else "Deletion failed",
        }

    # ── prices ───────────────────────────────────────────────
    @tool("ghl_create_price", "Create a price for a product", {
        "productId": _s("Product ID to create price for"),
        "name": _s("Price name/variant name"),
        "type": _s("Price type", enum=["one_time", "recurring"]),
        "currency": _s("Currency code (e.g., USD)"),
        "amount": _n("Price amount in cents"),
        "locationId": LOCATION,
        "compareAtPrice": _n("Compare at price (for discounts)"),
    }, required=["productId", "name", "type", "currency", "amount"], action="create price")
    async def create_price(self, args):
        price = unwrap(await self.client.post(f"/products/{args['productId']}/price", without(args, "productId")))
        return {"success": True, "price": price, "message": f"Price \"{args['name']}\" created successfully"}

    @tool("ghl_list_prices", "List prices for a product", {
        "productId": _s("Product ID to list prices for"),
        "locationId": LOCATION,
        "limit": _n("Maximum number of prices to return"),
        "offset": _n("Number of prices to skip"),
    }, required=["productId"], action="list prices")
    async def list_prices(self, args):
        params = pick(args, "locationId", "limit", "offset")
        data = unwrap(await self.client.get(f"/products/{args['productId']}/price", params))
        prices = data.get("prices") or []
        total = data.get("total") or len(prices)
        return {
            "success": True,
            "prices": prices,
            "total": total,
            "message": f"Retrieved {len(prices)} of {total} prices for product {args['productId']}",
        }

    # ── inventory ────────────────────────────────────────────
    @tool("ghl_list_inventory", "List inventory items with stock levels", {
        "locationId": LOCATION,
        "limit": _n("Maximum number of items to return"),
        "offset": _n("Number of items to skip"),
        "search": _s("Search term for inventory items"),
    }, required=[], action="list inventory")
    async def list_inventory(self, args):
        params = {**_alt(args), **pick(args, "limit", "offset", "search")}
        data = unwrap(await self.client.get("/products/inventory", params))
        inventory = data.get("inventory") or []
        total = (data.get("total") or {}).get("total", len(inventory))
        return {
            "success": True,
            "inventory": inventory,
            "total": total,
            "message": f"Retrieved {len(inventory)} of {total} inventory items",
        }

    # ── collections ──────────────────────────────────────────
    @tool("ghl_create_product_collection", "Create a new product collection", {
        "locationId": LOCATION,
        "name": _s("Collection name"),
        "slug": _s("Collection URL slug"),
        "image": _s("Collection image URL"),
        "seo": {
            "type": "object",
            "properties": {
                "title": _s("SEO title"),
                "description": _s("SEO description"),
            },
        },
    }, required=["name", "slug"], action="create collection")
    async def create_product_collection(self, args):
        body = {**without(args, "locationId"), **_alt(args)}
        collection = unwrap(await self.client.post("/products/collections", body), "data", required=True)
        return {
            "success": True,
            "collection": collection,
            "message": f"Product collection \"{args['name']}\" created successfully",
        }

    @tool("ghl_list_product_collections", "List product collections", {
        "locationId": LOCATION,
        "limit": _n("Maximum number of collections to return"),
        "offset": _n("Number of collections to skip"),
        "name": _s("Search by collection name"),
    }, required=[], action="list collections")
    async def list_product_collections(self, args):
        params = {**_alt(args), **pick(args, "limit", "offset", "name")}
        data = unwrap(await self.client.get("/products/collections", params))
        collections = data.get("data")
        if collections is None:
            raise MissingDataError("No data returned from API")
        total = data.get("total") or len(collections)
        return {
            "success": True,
            "collections": collections,
            "total": total,
            "message": f"Retrieved {len(collections)} of {total} product collections",
        }
