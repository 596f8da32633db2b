# custom_fields_v2.py  –  custom fields and folders for custom objects and
#                         company (business) records

from ..marshal import pick, unwrap
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "GoHighLevel location ID (will use default if not provided)"}
FILE_FORMATS = [".pdf", ".docx", ".doc", ".jpg", ".jpeg", ".png", ".gif", ".csv", ".xlsx", ".xls", "all"]
DATA_TYPES = ["TEXT", "LARGE_TEXT", "NUMERICAL", "PHONE", "MONETORY", "CHECKBOX", "SINGLE_OPTIONS",
              "MULTIPLE_OPTIONS", "DATE", "TEXTBOX_LIST", "FILE_UPLOAD", "RADIO", "EMAIL"]
OBJECT_KEY_HINT = 'Format: "custom_object.{objectKey}" for custom objects. Example: "custom_object.pet"'


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _options(description):
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "key": _s("Key of the option"),
                "label": _s("Label of the option"),
                "url": _s("URL associated with the option (only for RADIO type)"),
            },
            "required": ["key", "label"],
        },
        "description": description,
    }


class CustomFieldV2Tools(ToolModule):
    domain = "custom field V2"

    @tool("ghl_get_custom_field_by_id",
          "Get a custom field or folder by its ID. Supports custom objects and company (business) fields.", {
              "id": _s("The ID of the custom field or folder to retrieve"),
          }, required=["id"], action="get custom field")
    async def get_custom_field_by_id(self, args):
        data = unwrap(await self.client.get(f"/custom-fields/{args['id']}"))
        return {"success": True, "data": data, "message": "Custom field/folder retrieved successfully"}

    @tool("ghl_create_custom_field",
          "Create a new custom field for custom objects or company (business). Supports various field types "
          "including text, number, options, date, file upload, etc.", {
              "locationId": LOCATION,
              "name": _s("Field name (optional for some field types)"),
              "description": _s("Description of the field"),
              "placeholder": _s("Placeholder text for the field"),
              "showInForms": {"type": "boolean", "description": "Whether the field should be shown in forms",
                              "default": True},
              "options": _options("Options for the field (required for SINGLE_OPTIONS, MULTIPLE_OPTIONS, RADIO, "
                                  "CHECKBOX, TEXTBOX_LIST types)"),
              "acceptedFormats": _s("Allowed file formats for uploads (only for FILE_UPLOAD type)", enum=FILE_FORMATS),
              "dataType": _s("Type of field to create", enum=DATA_TYPES),
              "fieldKey": _s('Field key. Format: "custom_object.{objectKey}.{fieldKey}" for custom objects. '
                             'Example: "custom_object.pet.name"'),
              "objectKey": _s(f"The object key. {OBJECT_KEY_HINT}"),
              "maxFileLimit": {"type": "number", "description": "Maximum file limit for uploads (only for FILE_UPLOAD type)"},
              "allowCustomOption": {"type": "boolean",
                                    "description": "Allow users to add custom option values for RADIO type fields"},
              "parentId": _s("ID of the parent folder for organization"),
          }, required=["dataType", "fieldKey", "objectKey", "parentId"], action="create custom field")
    async def create_custom_field(self, args):
        body = pick(args, "locationId", "name", "description", "placeholder", "showInForms", "options",
                    "acceptedFormats", "dataType", "fieldKey", "objectKey", "maxFileLimit", "allowCustomOption",
                    "parentId", defaults={"showInForms": True})
        data = unwrap(await self.client.post("/custom-fields/", body))
        return {"success": True, "data": data, "message": f"Custom field '{args['fieldKey']}' created successfully"}

    @tool("ghl_update_custom_field",
          "Update an existing custom field by ID. Can modify name, description, options, and other properties.", {
              "id": _s("The ID of the custom field to update"),
              "locationId": LOCATION,
              "name": _s("Updated field name"),
              "description": _s("Updated description of the field"),
              "placeholder": _s("Updated placeholder text for the field"),
              "showInForms": {"type": "boolean", "description": "Whether the field should be shown in forms"},
              "options": _options("Updated options (replaces all existing options - include all options you want "
                                  "to keep)"),
              "acceptedFormats": _s("Updated allowed file formats for uploads", enum=FILE_FORMATS),
              "maxFileLimit": {"type": "number", "description": "Updated maximum file limit for uploads"},
          }, required=["id"], action="update custom field")
    async def update_custom_field(self, args):
        body = pick(args, "locationId", "name", "description", "placeholder", "showInForms", "options",
                    "acceptedFormats", "maxFileLimit", defaults={"showInForms": True})
        data = unwrap(await self.client.put(f"/custom-fields/{args['id']}", body))
        return {"success": True, "data": data, "message": "Custom field updated successfully"}

    @tool("ghl_delete_custom_field",
          "Delete a custom field by ID. This will permanently remove the field and its data.", {
              "id": _s("The ID of the custom field to delete"),
          }, required=["id"], action="delete custom field")
    async def delete_custom_field(self, args):
        data = unwrap(await self.client.delete(f"/custom-fields/{args['id']}"))
        return {"success": True, "data": data, "message": "Custom field deleted successfully"}

    @tool("ghl_get_custom_fields_by_object_key",
          "Get all custom fields and folders for a specific object key (e.g., custom object or company).", {
              "objectKey": _s(f"Object key to get fields for. {OBJECT_KEY_HINT}"),
              "locationId": LOCATION,
          }, required=["objectKey"], action="get custom fields")
    async def get_custom_fields_by_object_key(self, args):
        path = f"/custom-fields/object-key/{args['objectKey']}"
        data = unwrap(await self.client.get(path, pick(args, "locationId")))
        fields = data.get("fields") or []
        folders = data.get("folders") or []
        return {
            "success": True,
            "data": data,
            "message": f"Retrieved {len(fields)} fields and {len(folders)} folders for object '{args['objectKey']}'",
        }

    # ── folders ──────────────────────────────────────────────
    @tool("ghl_create_custom_field_folder",
          "Create a new custom field folder for organizing fields within an object.", {
              "objectKey": _s(f"Object key for the folder. {OBJECT_KEY_HINT}"),
              "name": _s("Name of the folder"),
              "locationId": LOCATION,
          }, required=["objectKey", "name"], action="create custom field folder")
    async def create_custom_field_folder(self, args):
        data = unwrap(await self.client.post("/custom-fields/folder", pick(args, "objectKey", "name", "locationId")))
        return {"success": True, "data": data, "message": f"Custom field folder '{args['name']}' created successfully"}

    @tool("ghl_update_custom_field_folder", "Update the name of an existing custom field folder.", {
        "id": _s("The ID of the folder to update"),
        "name": _s("New name for the folder"),
        "locationId": LOCATION,
    }, required=["id", "name"], action="update custom field folder")
    async def update_custom_field_folder(self, args):
        body = pick(args, "name", "locationId")
        data = unwrap(await self.client.put(f"/custom-fields/folder/{args['id']}", body))
        return {"success": True, "data": data, "message": f"Custom field folder updated to '{args['name']}'"}

    @tool("ghl_delete_custom_field_folder",
          "Delete a custom field folder. This will also affect any fields within the folder.", {
              "id": _s("The ID of the folder to delete"),
              "locationId": LOCATION,
          }, required=["id"], action="delete custom field folder")
    async def delete_custom_field_folder(self, args):
        path = f"/custom-fields/folder/{args['id']}"
        data = unwrap(await self.client.delete(path, params=pick(args, "locationId")))
        return {"success": True, "data": data, "message": "Custom field folder deleted successfully"}
