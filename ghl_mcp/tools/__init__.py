# tools  –  every domain module, and the registry that routes a tool name to
#           the module that owns it

from typing import Any, Dict, List, Optional

from ..client import GHLApiClient
from ..config import log
from ..errors import UnknownToolError
from .affiliates import AffiliateTools
from .associations import AssociationTools
from .base import ToolModule, ToolSpec, tool
from .blog import BlogTools
from .contacts import ContactTools
from .conversations import ConversationTools
from .custom_fields_v2 import CustomFieldV2Tools
from .invoices import InvoiceTools
from .locations import LocationTools
from .oauth import OAuthTools
from .objects import ObjectTools
from .opportunities import OpportunityTools
from .payments import PaymentTools
from .phone import PhoneTools
from .products import ProductTools
from .reporting import ReportingTools
from .reputation import ReputationTools
from .social_media import SocialMediaTools
from .store import StoreTools
from .templates import TemplateTools

# (label used in startup logs, module class) in listing order
MODULES: List[tuple] = [
    ("contact", ContactTools),
    ("conversation", ConversationTools),
    ("blog", BlogTools),
    ("opportunity", OpportunityTools),
    ("location", LocationTools),
    ("social media", SocialMediaTools),
    ("object", ObjectTools),
    ("association", AssociationTools),
    ("custom field V2", CustomFieldV2Tools),
    ("store", StoreTools),
    ("products", ProductTools),
    ("payments", PaymentTools),
    ("invoices", InvoiceTools),
    ("reporting", ReportingTools),
    ("oauth", OAuthTools),
    ("phone", PhoneTools),
    ("reputation", ReputationTools),
    ("affiliates", AffiliateTools),
    ("templates", TemplateTools),
]


class ToolRegistry:
    """All domain modules over one shared client, addressed by tool name."""

    def __init__(self, client: GHLApiClient, modules: Optional[List[tuple]] = None):
        self.client = client
        self.modules: Dict[str, ToolModule] = {}
        self._owner: Dict[str, ToolModule] = {}
        for label, cls in modules if modules is not None else MODULES:
            instance = cls(client)
            self.modules[label] = instance
            for name in instance.tool_names():
                if name in self._owner:
                    other = type(self._owner[name]).__name__
                    raise ValueError(f"tool {name!r} defined by both {other} and {cls.__name__}")
                self._owner[name] = instance

    def __len__(self) -> int:
        return len(self._owner)

    def __contains__(self, name: str) -> bool:
        return name in self._owner

    def counts(self) -> Dict[str, int]:
        return {label: len(module.tool_names()) for label, module in self.modules.items()}

    def list_definitions(self) -> List[Dict[str, Any]]:
        definitions = []
        for module in self.modules.values():
            definitions.extend(module.list_definitions())
        return definitions

    def module_for(self, name: str) -> ToolModule:
        module = self._owner.get(name)
        if module is None:
            raise UnknownToolError(name)
        return module

    async def invoke(self, name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        module = self.module_for(name)
        log("[GHL MCP]", f"Executing tool: {name}")
        result = await module.invoke(name, args)
        log("[GHL MCP]", f"Tool {name} executed successfully")
        return result


__all__ = ["MODULES", "ToolModule", "ToolRegistry", "ToolSpec", "tool"]
