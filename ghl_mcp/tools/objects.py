# objects.py  –  custom object schemas and the records stored in them
#
# Works for standard objects (contact, opportunity, business) as well as
# custom_objects.* keys.

from ..marshal import pick, unwrap
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "Location ID (uses default if not provided)"}
OWNER = {"type": "array", "items": {"type": "string"}, "maxItems": 1}
FOLLOWERS = {"type": "array", "items": {"type": "string"}, "maxItems": 10}


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _record_ids(verb):
    return {
        "schemaKey": _s("Schema key of the object"),
        "recordId": _s(f"ID of the record to {verb}"),
    }


class ObjectTools(ToolModule):
    domain = "object"

    # ── schemas ──────────────────────────────────────────────
    @tool("get_all_objects",
          "Get all objects (custom and standard) for a location including contact, opportunity, business, and "
          "custom objects", {"locationId": LOCATION}, required=[], action="get objects")
    async def get_all_objects(self, args):
        data = unwrap(await self.client.get("/objects/", pick(args, "locationId")))
        objects = data.get("objects")
        objects = objects if isinstance(objects, list) else []
        return {"success": True, "objects": objects, "message": f"Retrieved {len(objects)} objects for location"}

    @tool("create_object_schema", "Create a new custom object schema with labels, key, and primary display property", {
        "labels": {
            "type": "object",
            "description": "Singular and plural names for the custom object",
            "properties": {
                "singular": _s('Singular name (e.g., "Pet")'),
                "plural": _s('Plural name (e.g., "Pets")'),
            },
            "required": ["singular", "plural"],
        },
        "key": _s('Unique key for the object (e.g., "custom_objects.pet"). The "custom_objects." prefix is added '
                  'automatically if not included'),
        "description": _s("Description of the custom object"),
        "locationId": LOCATION,
        "primaryDisplayPropertyDetails": {
            "type": "object",
            "description": "Primary property configuration for display",
            "properties": {
                "key": _s('Property key (e.g., "custom_objects.pet.name")'),
                "name": _s('Display name (e.g., "Pet Name")'),
                "dataType": _s("Data type (TEXT or NUMERICAL)", enum=["TEXT", "NUMERICAL"]),
            },
            "required": ["key", "name", "dataType"],
        },
    }, required=["labels", "key", "primaryDisplayPropertyDetails"])
    async def create_object_schema(self, args):
        body = pick(args, "labels", "key", "description", "locationId", "primaryDisplayPropertyDetails")
        obj = unwrap(await self.client.post("/objects/", body), "object", required=True)
        return {"success": True, "object": obj,
                "message": f"Custom object schema created successfully with key: {obj.get('key', args['key'])}"}

    @tool("get_object_schema",
          "Get object schema details by key including all fields and properties for custom or standard objects", {
              "key": _s('Object key (e.g., "custom_objects.pet" for custom objects, "contact" for standard objects)'),
              "locationId": LOCATION,
              "fetchProperties": {"type": "boolean", "description": "Whether to fetch all standard/custom fields of "
                                                                    "the object", "default": True},
          }, required=["key"])
    async def get_object_schema(self, args):
        params = pick(args, "locationId")
        if "fetchProperties" in args:
            params["fetchProperties"] = str(bool(args["fetchProperties"])).lower()
        envelope = await self.client.get(f"/objects/{args['key']}", params)
        data = unwrap(envelope)
        return {
            "success": True,
            "object": unwrap(envelope, "object", required=True),
            "fields": data.get("fields"),
            "cache": data.get("cache"),
            "message": f"Object schema retrieved successfully for key: {args['key']}",
        }

    @tool("update_object_schema",
          "Update object schema properties including labels, description, and searchable fields", {
              "key": _s("Object key to update"),
              "labels": {
                  "type": "object",
                  "description": "Updated singular and plural names (optional)",
                  "properties": {
                      "singular": _s("Updated singular name"),
                      "plural": _s("Updated plural name"),
                  },
              },
              "description": _s("Updated description"),
              "locationId": LOCATION,
              "searchableProperties": {
                  "type": "array",
                  "description": 'Array of field keys that should be searchable (e.g., ["custom_objects.pet.name", '
                                 '"custom_objects.pet.breed"])',
                  "items": {"type": "string"},
              },
          }, required=["key", "searchableProperties"])
    async def update_object_schema(self, args):
        body = pick(args, "labels", "description", "locationId", "searchableProperties")
        schema = unwrap(await self.client.put(f"/objects/{args['key']}", body), "object", required=True)
        return {"success": True, "object": schema,
                "message": f"Object schema updated successfully for key: {args['key']}"}

    # ── records ──────────────────────────────────────────────
    @tool("create_object_record",
          "Create a new record in a custom or standard object with properties, owner, and followers", {
              "schemaKey": _s('Schema key of the object (e.g., "custom_objects.pet", "business")'),
              "properties": {"type": "object", "description": 'Record properties as key-value pairs (e.g., '
                                                              '{"name": "Buddy", "breed": "Golden Retriever"})'},
              "locationId": LOCATION,
              "owner": {**OWNER, "description": "Array of user IDs who own this record (limited to 1, only for "
                                                "custom objects)"},
              "followers": {**FOLLOWERS, "description": "Array of user IDs who follow this record (limited to 10)"},
          }, required=["schemaKey", "properties"])
    async def create_object_record(self, args):
        body = pick(args, "properties", "locationId", "owner", "followers")
        record = unwrap(await self.client.post(f"/objects/{args['schemaKey']}/records", body), "record", required=True)
        record_id = record.get("id")
        return {
            "success": True,
            "record": record,
            "recordId": record_id,
            "message": f"Record created successfully in {args['schemaKey']} with ID: {record_id}",
        }

    @tool("get_object_record", "Get a specific record by ID from a custom or standard object",
          _record_ids("retrieve"), required=["schemaKey", "recordId"])
    async def get_object_record(self, args):
        path = f"/objects/{args['schemaKey']}/records/{args['recordId']}"
        record = unwrap(await self.client.get(path), "record", required=True)
        return {"success": True, "record": record,
                "message": f"Record retrieved successfully from {args['schemaKey']}"}

    @tool("update_object_record", "Update an existing record in a custom or standard object", {
        **_record_ids("update"),
        "properties": {"type": "object", "description": "Updated record properties as key-value pairs"},
        "locationId": LOCATION,
        "owner": {**OWNER, "description": "Updated array of user IDs who own this record"},
        "followers": {**FOLLOWERS, "description": "Updated array of user IDs who follow this record"},
    }, required=["schemaKey", "recordId"])
    async def update_object_record(self, args):
        path = f"/objects/{args['schemaKey']}/records/{args['recordId']}"
        body = pick(args, "properties", "locationId", "owner", "followers")
        # the location rides in the query string here, not only the body
        envelope = await self.client.put(path, body, params={"locationId": args["locationId"]})
        return {"success": True, "record": unwrap(envelope, "record", required=True),
                "message": f"Record updated successfully in {args['schemaKey']}"}

    @tool("delete_object_record", "Delete a record from a custom or standard object",
          _record_ids("delete"), required=["schemaKey", "recordId"])
    async def delete_object_record(self, args):
        data = unwrap(await self.client.delete(f"/objects/{args['schemaKey']}/records/{args['recordId']}"))
        return {"success": True, "deletedId": data.get("id"),
                "message": f"Record deleted successfully from {args['schemaKey']}"}

    @tool("search_object_records", "Search records within a custom or standard object using searchable properties", {
        "schemaKey": _s("Schema key of the object to search in"),
        "query": _s('Search query using searchable properties (e.g., "name:Buddy" to search for records with name '
                    'Buddy)'),
        "locationId": LOCATION,
        "page": {"type": "number", "description": "Page number for pagination", "default": 1, "minimum": 1},
        "pageLimit": {"type": "number", "description": "Number of records per page", "default": 10,
                      "minimum": 1, "maximum": 100},
        "searchAfter": {"type": "array", "description": "Cursor for pagination (returned from previous search)",
                        "items": {"type": "string"}},
    }, required=["schemaKey", "query"])
    async def search_object_records(self, args):
        body = pick(args, "locationId", "query", defaults={"page": 1, "pageLimit": 10, "searchAfter": []})
        data = unwrap(await self.client.post(f"/objects/{args['schemaKey']}/records/search", body))
        records = data.get("records")
        records = records if isinstance(records, list) else []
        total = data.get("total")
        return {
            "success": True,
            "records": records,
            "total": total,
            "message": f"Found {len(records)} records in {args['schemaKey']} ({total} total)",
        }
