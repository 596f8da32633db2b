# associations.py  –  association definitions and the relations built on them

from ..marshal import pick, unwrap
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "GoHighLevel location ID (will use default if not provided)"}


def _s(description):
    return {"type": "string", "description": description}


def _page(limit_description):
    return {
        "skip": {"type": "number", "description": "Number of records to skip for pagination", "default": 0},
        "limit": {"type": "number", "description": limit_description, "default": 20},
    }


class AssociationTools(ToolModule):
    domain = "association"

    async def _result(self, request, message):
        return {"success": True, "data": unwrap(await request), "message": message}

    # ── associations ─────────────────────────────────────────
    @tool("ghl_get_all_associations",
          "Get all associations for a sub-account/location with pagination. Returns system-defined and "
          "user-defined associations.", {
              "locationId": LOCATION,
              **_page("Maximum number of records to return (max 100)"),
          }, action="get associations")
    async def get_all_associations(self, args):
        params = pick(args, "locationId", defaults={"skip": 0, "limit": 20})
        data = unwrap(await self.client.get("/associations/", params))
        return {"success": True, "data": data,
                "message": f"Retrieved {len(data.get('associations') or [])} associations"}

    @tool("ghl_create_association",
          "Create a new association that defines relationship types between entities like contacts, custom "
          "objects, and opportunities.", {
              "locationId": LOCATION,
              "key": _s('Unique key for the association (e.g., "student_teacher")'),
              "firstObjectLabel": {"description": 'Label for the first object in the association (e.g., "student")'},
              "firstObjectKey": {"description": 'Key for the first object (e.g., "custom_objects.children")'},
              "secondObjectLabel": {"description": 'Label for the second object in the association (e.g., "teacher")'},
              "secondObjectKey": {"description": 'Key for the second object (e.g., "contact")'},
          }, required=["key", "firstObjectLabel", "firstObjectKey", "secondObjectLabel", "secondObjectKey"],
          action="create association")
    async def create_association(self, args):
        body = pick(args, "locationId", "key", "firstObjectLabel", "firstObjectKey", "secondObjectLabel",
                    "secondObjectKey")
        return await self._result(self.client.post("/associations/", body),
                                  f"Association '{args['key']}' created successfully")

    @tool("ghl_get_association_by_id",
          "Get a specific association by its ID. Works for both system-defined and user-defined associations.", {
              "associationId": _s("The ID of the association to retrieve"),
          }, required=["associationId"], action="get association")
    async def get_association_by_id(self, args):
        return await self._result(self.client.get(f"/associations/{args['associationId']}"),
                                  "Association retrieved successfully")

    @tool("ghl_update_association",
          "Update the labels of an existing association. Only user-defined associations can be updated.", {
              "associationId": _s("The ID of the association to update"),
              "firstObjectLabel": {"description": "New label for the first object in the association"},
              "secondObjectLabel": {"description": "New label for the second object in the association"},
          }, required=["associationId", "firstObjectLabel", "secondObjectLabel"], action="update association")
    async def update_association(self, args):
        body = pick(args, "firstObjectLabel", "secondObjectLabel")
        return await self._result(self.client.put(f"/associations/{args['associationId']}", body),
                                  "Association updated successfully")

    @tool("ghl_delete_association",
          "Delete a user-defined association. This will also delete all relations created with this association.", {
              "associationId": _s("The ID of the association to delete"),
          }, required=["associationId"], action="delete association")
    async def delete_association(self, args):
        return await self._result(self.client.delete(f"/associations/{args['associationId']}"),
                                  "Association deleted successfully")

    @tool("ghl_get_association_by_key",
          "Get an association by its key name. Useful for finding both standard and user-defined associations.", {
              "keyName": _s("The key name of the association to retrieve"),
              "locationId": LOCATION,
          }, required=["keyName"], action="get association by key")
    async def get_association_by_key(self, args):
        path = f"/associations/key/{args['keyName']}"
        return await self._result(self.client.get(path, pick(args, "locationId")),
                                  f"Association with key '{args['keyName']}' retrieved successfully")

    @tool("ghl_get_association_by_object_key",
          "Get associations by object keys like contacts, custom objects, and opportunities.", {
              "objectKey": _s('The object key to search for (e.g., "custom_objects.car", "contact", "opportunity")'),
              "locationId": _s("GoHighLevel location ID (optional)"),
          }, required=["objectKey"], location=False, action="get association by object key")
    async def get_association_by_object_key(self, args):
        path = f"/associations/objectKey/{args['objectKey']}"
        return await self._result(self.client.get(path, pick(args, "locationId")),
                                  f"Association with object key '{args['objectKey']}' retrieved successfully")

    # ── relations ────────────────────────────────────────────
    @tool("ghl_create_relation",
          "Create a relation between two entities using an existing association. Links specific records together.", {
              "locationId": LOCATION,
              "associationId": _s("The ID of the association to use for this relation"),
              "firstRecordId": _s("ID of the first record (e.g., contact ID if contact is first object in association)"),
              "secondRecordId": _s("ID of the second record (e.g., custom object record ID if custom object is "
                                   "second object)"),
          }, required=["associationId", "firstRecordId", "secondRecordId"], action="create relation")
    async def create_relation(self, args):
        body = pick(args, "locationId", "associationId", "firstRecordId", "secondRecordId")
        return await self._result(self.client.post("/associations/relations", body),
                                  "Relation created successfully between records")

    @tool("ghl_get_relations_by_record",
          "Get all relations for a specific record ID with pagination and optional filtering by association IDs.", {
              "recordId": _s("The record ID to get relations for"),
              "locationId": LOCATION,
              **_page("Maximum number of records to return"),
              "associationIds": {"type": "array", "items": {"type": "string"},
                                 "description": "Optional array of association IDs to filter relations"},
          }, required=["recordId"], action="get relations")
    async def get_relations_by_record(self, args):
        params = pick(args, "locationId", "associationIds", defaults={"skip": 0, "limit": 20})
        data = unwrap(await self.client.get(f"/associations/relations/{args['recordId']}", params))
        return {"success": True, "data": data,
                "message": f"Retrieved {len(data.get('relations') or [])} relations for record"}

    @tool("ghl_delete_relation", "Delete a specific relation between two entities.", {
        "relationId": _s("The ID of the relation to delete"),
        "locationId": LOCATION,
    }, required=["relationId"], action="delete relation")
    async def delete_relation(self, args):
        path = f"/associations/relations/{args['relationId']}"
        return await self._result(self.client.delete(path, params=pick(args, "locationId")),
                                  "Relation deleted successfully")
