# store.py  –  shipping zones, shipping rates, carriers and store settings
#
# Every /store endpoint takes the location as altId with altType=location,
# in the query string for reads and deletes and in the body for writes.
# Payloads come back double-nested under data.data.

from ..errors import MissingDataError
from ..marshal import pick, unwrap
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "GHL Location ID (optional, uses default if not provided)"}
RATE_FIELDS = ("name", "description", "currency", "amount", "conditionType", "minCondition", "maxCondition",
               "isCarrierRate", "shippingCarrierId", "percentageOfRateFee", "shippingCarrierServices")
CARRIER_FIELDS = ("name", "callbackUrl", "services", "allowsMultipleServiceSelection")


def _s(description):
    return {"type": "string", "description": description}


def _n(description):
    return {"type": "number", "description": description}


def _countries(description):
    return {
        "type": "array",
        "description": description,
        "items": {
            "type": "object",
            "properties": {
                "code": _s("Country code (e.g., US, CA)"),
                "states": {
                    "type": "array",
                    "description": "Optional array of state codes for this country",
                    "items": {
                        "type": "object",
                        "properties": {"code": _s("State code (e.g., CA, NY)")},
                        "required": ["code"],
                    },
                },
            },
            "required": ["code"],
        },
    }


def _alt(args):
    return {"altId": args["locationId"], "altType": "location"}


def _payload(envelope, what):
    found = unwrap(envelope, "data")
    if found is None:
        raise MissingDataError(f"No {what} data returned from API")
    return found


class StoreTools(ToolModule):
    domain = "Store"

    # ── shipping zones ───────────────────────────────────────
    @tool("ghl_create_shipping_zone", "Create a new shipping zone with specific countries and states", {
        "locationId": LOCATION,
        "name": _s("Name of the shipping zone"),
        "countries": _countries("Array of countries with optional state restrictions"),
    }, required=["name", "countries"], action="create shipping zone")
    async def create_shipping_zone(self, args):
        body = {**_alt(args), **pick(args, "name", "countries")}
        zone = _payload(await self.client.post("/store/shipping-zone", body), "shipping zone")
        return {
            "success": True,
            "shippingZone": zone,
            "message": f"Shipping zone \"{zone.get('name', args['name'])}\" created with "
                       f"{len(zone.get('countries') or [])} country(ies)",
        }

    @tool("ghl_list_shipping_zones", "List all shipping zones for a location", {
        "locationId": LOCATION,
        "limit": _n("Number of zones to return (optional)"),
        "offset": _n("Number of zones to skip (optional)"),
        "withShippingRate": {"type": "boolean", "description": "Include shipping rates in response (optional)"},
    }, action="list shipping zones")
    async def list_shipping_zones(self, args):
        params = {**_alt(args), **pick(args, "limit", "offset", "withShippingRate")}
        data = unwrap(await self.client.get("/store/shipping-zone", params))
        zones = data.get("data") or []
        total = data.get("total") or len(zones)
        return {"success": True, "shippingZones": zones, "total": total,
                "message": f"Found {total} shipping zones" if zones else "No shipping zones found"}

    @tool("ghl_get_shipping_zone", "Get details of a specific shipping zone", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone to retrieve"),
        "withShippingRate": {"type": "boolean", "description": "Include shipping rates in response (optional)"},
    }, required=["shippingZoneId"], action="get shipping zone")
    async def get_shipping_zone(self, args):
        params = {**_alt(args), **pick(args, "withShippingRate")}
        zone = unwrap(await self.client.get(f"/store/shipping-zone/{args['shippingZoneId']}", params), "data")
        if zone is None:
            raise MissingDataError("Shipping zone not found")
        return {"success": True, "shippingZone": zone, "message": "Shipping zone retrieved successfully"}

    @tool("ghl_update_shipping_zone", "Update a shipping zone's name or countries", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone to update"),
        "name": _s("New name for the shipping zone (optional)"),
        "countries": _countries("Updated array of countries with optional state restrictions (optional)"),
    }, required=["shippingZoneId"], action="update shipping zone")
    async def update_shipping_zone(self, args):
        body = {**_alt(args), **pick(args, "name", "countries")}
        path = f"/store/shipping-zone/{args['shippingZoneId']}"
        zone = _payload(await self.client.put(path, body), "shipping zone")
        return {"success": True, "shippingZone": zone, "message": "Shipping zone updated successfully"}

    @tool("ghl_delete_shipping_zone", "Delete a shipping zone and all its associated shipping rates", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone to delete"),
    }, required=["shippingZoneId"], action="delete shipping zone")
    async def delete_shipping_zone(self, args):
        unwrap(await self.client.delete(f"/store/shipping-zone/{args['shippingZoneId']}", params=_alt(args)))
        return {"success": True,
                "message": "Shipping zone and all associated shipping rates deleted successfully"}

    # ── shipping rates ───────────────────────────────────────
    @tool("ghl_get_available_shipping_rates",
          "Get available shipping rates for an order based on destination and order details", {
              "locationId": LOCATION,
              "country": _s("Destination country code"),
              "address": {
                  "type": "object",
                  "description": "Shipping address details",
                  "properties": {
                      "street1": _s("Street address line 1"),
                      "city": _s("City"),
                      "country": _s("Country code"),
                  },
                  "required": ["street1", "city", "country"],
              },
              "totalOrderAmount": _n("Total order amount"),
              "totalOrderWeight": _n("Total order weight"),
              "products": {
                  "type": "array",
                  "description": "Array of products in the order",
                  "items": {
                      "type": "object",
                      "properties": {
                          "id": _s("Product ID"),
                          "quantity": _n("Product quantity"),
                      },
                      "required": ["id", "quantity"],
                  },
              },
          }, required=["country", "address", "totalOrderAmount", "totalOrderWeight", "products"],
          action="get available shipping rates")
    async def get_available_shipping_rates(self, args):
        body = {**_alt(args), **pick(args, "country", "address", "totalOrderAmount", "totalOrderWeight",
                                     "source", "products", "couponCode")}
        rates = unwrap(await self.client.post("/store/shipping-zone/shipping-rates", body), "data", default=[])
        return {
            "success": True,
            "shippingRates": rates,
            "message": f"{len(rates)} shipping rates available for {args['country']}" if rates
            else "No shipping rates available for the specified order criteria",
        }

    @tool("ghl_create_shipping_rate", "Create a new shipping rate for a shipping zone", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone"),
        "name": _s("Name of the shipping rate"),
        "currency": _s("Currency code (e.g., USD)"),
        "amount": _n("Shipping rate amount"),
        "conditionType": _s("Condition type for rate calculation"),
    }, required=["shippingZoneId", "name", "currency", "amount", "conditionType"], action="create shipping rate")
    async def create_shipping_rate(self, args):
        body = {**_alt(args), **pick(args, *RATE_FIELDS)}
        path = f"/store/shipping-zone/{args['shippingZoneId']}/shipping-rate"
        rate = _payload(await self.client.post(path, body), "shipping rate")
        return {"success": True, "shippingRate": rate,
                "message": f"Shipping rate \"{args['name']}\" created successfully"}

    @tool("ghl_list_shipping_rates", "List all shipping rates for a specific shipping zone", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone"),
    }, required=["shippingZoneId"], action="list shipping rates")
    async def list_shipping_rates(self, args):
        params = {**_alt(args), **pick(args, "limit", "offset")}
        path = f"/store/shipping-zone/{args['shippingZoneId']}/shipping-rate"
        data = unwrap(await self.client.get(path, params))
        rates = data.get("data") or []
        total = data.get("total") or len(rates)
        return {"success": True, "shippingRates": rates, "total": total,
                "message": f"Found {total} shipping rates for zone {args['shippingZoneId']}"}

    @tool("ghl_get_shipping_rate", "Get details of a specific shipping rate", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone"),
        "shippingRateId": _s("ID of the shipping rate to retrieve"),
    }, required=["shippingZoneId", "shippingRateId"], action="get shipping rate")
    async def get_shipping_rate(self, args):
        path = f"/store/shipping-zone/{args['shippingZoneId']}/shipping-rate/{args['shippingRateId']}"
        rate = unwrap(await self.client.get(path, _alt(args)), "data")
        if rate is None:
            raise MissingDataError("Shipping rate not found")
        return {"success": True, "shippingRate": rate, "message": "Shipping rate retrieved successfully"}

    @tool("ghl_update_shipping_rate", "Update a shipping rate's properties", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone"),
        "shippingRateId": _s("ID of the shipping rate to update"),
    }, required=["shippingZoneId", "shippingRateId"], action="update shipping rate")
    async def update_shipping_rate(self, args):
        body = {**_alt(args), **pick(args, *RATE_FIELDS)}
        path = f"/store/shipping-zone/{args['shippingZoneId']}/shipping-rate/{args['shippingRateId']}"
        rate = _payload(await self.client.put(path, body), "shipping rate")
        return {"success": True, "shippingRate": rate, "message": "Shipping rate updated successfully"}

    @tool("ghl_delete_shipping_rate", "Delete a shipping rate", {
        "locationId": LOCATION,
        "shippingZoneId": _s("ID of the shipping zone"),
        "shippingRateId": _s("ID of the shipping rate to delete"),
    }, required=["shippingZoneId", "shippingRateId"], action="delete shipping rate")
    async def delete_shipping_rate(self, args):
        path = f"/store/shipping-zone/{args['shippingZoneId']}/shipping-rate/{args['shippingRateId']}"
        unwrap(await self.client.delete(path, params=_alt(args)))
        return {"success": True, "message": "Shipping rate deleted successfully"}

    # ── shipping carriers ────────────────────────────────────
    @tool("ghl_create_shipping_carrier", "Create a new shipping carrier for dynamic rate calculation", {
        "locationId": LOCATION,
        "name": _s("Name of the shipping carrier"),
        "callbackUrl": _s("Callback URL for carrier rate requests"),
        "services": {
            "type": "array",
            "description": "Array of available services",
            "items": {
                "type": "object",
                "properties": {
                    "name": _s("Service name"),
                    "value": _s("Service value"),
                },
                "required": ["name", "value"],
            },
        },
    }, required=["name", "callbackUrl", "services"], action="create shipping carrier")
    async def create_shipping_carrier(self, args):
        body = {**_alt(args), **pick(args, *CARRIER_FIELDS)}
        carrier = _payload(await self.client.post("/store/shipping-carrier", body), "shipping carrier")
        return {"success": True, "shippingCarrier": carrier,
                "message": f"Shipping carrier \"{args['name']}\" created successfully"}

    @tool("ghl_list_shipping_carriers", "List all shipping carriers for a location",
          {"locationId": LOCATION}, action="list shipping carriers")
    async def list_shipping_carriers(self, args):
        carriers = unwrap(await self.client.get("/store/shipping-carrier", _alt(args)), "data", default=[])
        return {"success": True, "shippingCarriers": carriers,
                "message": f"Found {len(carriers)} shipping carriers"}

    @tool("ghl_get_shipping_carrier", "Get details of a specific shipping carrier", {
        "locationId": LOCATION,
        "shippingCarrierId": _s("ID of the shipping carrier to retrieve"),
    }, required=["shippingCarrierId"], action="get shipping carrier")
    async def get_shipping_carrier(self, args):
        path = f"/store/shipping-carrier/{args['shippingCarrierId']}"
        carrier = unwrap(await self.client.get(path, _alt(args)), "data")
        if carrier is None:
            raise MissingDataError("Shipping carrier not found")
        return {"success": True, "shippingCarrier": carrier, "message": "Shipping carrier retrieved successfully"}

    @tool("ghl_update_shipping_carrier", "Update a shipping carrier's properties", {
        "locationId": LOCATION,
        "shippingCarrierId": _s("ID of the shipping carrier to update"),
    }, required=["shippingCarrierId"], action="update shipping carrier")
    async def update_shipping_carrier(self, args):
        body = {**_alt(args), **pick(args, *CARRIER_FIELDS)}
        path = f"/store/shipping-carrier/{args['shippingCarrierId']}"
        carrier = _payload(await self.client.put(path, body), "shipping carrier")
        return {"success": True, "shippingCarrier": carrier, "message": "Shipping carrier updated successfully"}

    @tool("ghl_delete_shipping_carrier", "Delete a shipping carrier", {
        "locationId": LOCATION,
        "shippingCarrierId": _s("ID of the shipping carrier to delete"),
    }, required=["shippingCarrierId"], action="delete shipping carrier")
    async def delete_shipping_carrier(self, args):
        unwrap(await self.client.delete(f"/store/shipping-carrier/{args['shippingCarrierId']}", params=_alt(args)))
        return {"success": True, "message": "Shipping carrier deleted successfully"}

    # ── store settings ───────────────────────────────────────
    @tool("ghl_create_store_setting", "Create or update store settings including shipping origin and notifications", {
        "locationId": LOCATION,
        "shippingOrigin": {
            "type": "object",
            "description": "Shipping origin address details",
            "properties": {
                "name": _s("Business name"),
                "street1": _s("Street address line 1"),
                "city": _s("City"),
                "zip": _s("Postal/ZIP code"),
                "country": _s("Country code"),
            },
            "required": ["name", "street1", "city", "zip", "country"],
        },
    }, required=["shippingOrigin"], action="create store setting")
    async def create_store_setting(self, args):
        body = {**_alt(args), **pick(args, "shippingOrigin", "storeOrderNotification",
                                     "storeOrderFulfillmentNotification")}
        setting = _payload(await self.client.post("/store/store-setting", body), "store setting")
        return {"success": True, "storeSetting": setting, "message": "Store settings saved successfully"}

    @tool("ghl_get_store_setting", "Get current store settings", {"locationId": LOCATION},
          action="get store setting")
    async def get_store_setting(self, args):
        setting = unwrap(await self.client.get("/store/store-setting", _alt(args)), "data")
        if setting is None:
            raise MissingDataError("Store settings not found")
        return {"success": True, "storeSetting": setting, "message": "Store settings retrieved successfully"}
