# base.py  –  declarative tool modules
#
# A domain module is a ToolModule subclass whose handlers are decorated with
# @tool(...).  The decorator carries the agent-facing descriptor (name,
# description, JSON schema); ToolModule.invoke() does the cross-cutting work
# every handler used to repeat: default the location id, drop None args,
# check required fields, and wrap failures as "Failed to <action>: <cause>".

import copy
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from ..client import GHLApiClient
from ..config import log
from ..errors import InvalidArgumentsError, ToolExecutionError, UnknownToolError

Handler = Callable[..., Awaitable[Dict[str, Any]]]


class ToolSpec:
    __slots__ = ("name", "description", "input_schema", "handler", "action", "location_key", "fill", "labels")

    def __init__(self, name, description, input_schema, handler, action, location_key, fill=None, labels=None):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.handler = handler
        self.action = action
        self.location_key = location_key
        self.fill = fill or {}
        self.labels = labels

    @property
    def required(self) -> List[str]:
        return self.input_schema.get("required", [])

    def definition(self) -> Dict[str, Any]:
        out = {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }
        # labels sit beside inputSchema, never inside its properties
        if self.labels:
            out["_meta"] = {"labels": dict(self.labels)}
        return out


def tool(
    name: str,
    description: str,
    properties: Optional[Dict[str, Any]] = None,
    required: Optional[List[str]] = None,
    action: Optional[str] = None,
    location: Union[None, bool, str] = None,
    fill: Optional[Dict[str, Any]] = None,
    labels: Optional[Dict[str, str]] = None,
    **schema_extra: Any,
):
    """Attach a tool descriptor to a handler method.

    location: None  -> default `locationId` when the schema declares it
              True  -> always default `locationId`
              "key" -> default that argument instead (e.g. "altId")
              False -> never default
    fill:     argument defaults applied before the required check but not
              advertised in the schema (e.g. {"altType": "location"})
    labels:   descriptor metadata published as `_meta.labels`
    """
    schema: Dict[str, Any] = {"type": "object", "properties": properties or {}}
    if required is not None:
        schema["required"] = list(required)
    schema.update(schema_extra)

    if location is None:
        location_key = "locationId" if "locationId" in schema["properties"] else None
    elif location is True:
        location_key = "locationId"
    else:
        location_key = location or None

    def decorate(fn: Handler) -> Handler:
        fn._tool_spec = ToolSpec(name, description, schema, fn,
                                 action or name.replace("_", " "), location_key, fill, labels)
        return fn

    return decorate


class ToolModule:
    """One domain's worth of tools sharing a GHLApiClient."""

    domain: str = ""
    _specs: Dict[str, ToolSpec] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        specs = dict(cls._specs)
        for attr in cls.__dict__.values():
            spec = getattr(attr, "_tool_spec", None)
            if spec is None:
                continue
            if spec.name in specs:
                raise ValueError(f"duplicate tool name {spec.name!r} in {cls.__name__}")
            specs[spec.name] = spec
        cls._specs = specs

    def __init__(self, client: GHLApiClient):
        self.client = client

    @property
    def location_id(self) -> str:
        return self.client.location_id

    def list_definitions(self) -> List[Dict[str, Any]]:
        return [spec.definition() for spec in self._specs.values()]

    def tool_names(self) -> List[str]:
        return list(self._specs)

    def prepare(self, spec: ToolSpec, args: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        args = {k: v for k, v in (args or {}).items() if v is not None}
        if spec.location_key and not args.get(spec.location_key):
            args[spec.location_key] = self.location_id
        for field, value in spec.fill.items():
            args.setdefault(field, value)
        properties = spec.input_schema["properties"]
        for field in spec.required:
            if args.get(field) is None and "default" in properties.get(field, {}):
                args[field] = properties[field]["default"]
        missing = [f for f in spec.required if args.get(f) is None]
        if missing:
            raise InvalidArgumentsError(missing)
        return args

    async def invoke(self, name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        spec = self._specs.get(name)
        if spec is None:
            raise UnknownToolError(name, self.domain or None)
        try:
            prepared = self.prepare(spec, args)
            return await spec.handler(self, prepared)
        except Exception as exc:
            log("[GHL MCP]", f"{name} failed:", exc)
            raise ToolExecutionError(spec.action, exc) from exc
