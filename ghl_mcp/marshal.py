# marshal.py  –  turning tool arguments into query/body shapes and back
#
# Handlers never build requests field-by-field with `if x is not None` chains;
# they describe the shape with pick()/without() and a rename table.

from typing import Any, Dict, Mapping, Optional

from .errors import MissingDataError


def compact(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in values.items() if v is not None}


def pick(
    args: Mapping[str, Any],
    *fields: str,
    rename: Optional[Mapping[str, str]] = None,
    defaults: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Select `fields` from args, fill `defaults`, rename, drop None.

    Keys listed only in `defaults` are included too, so a pagination default
    need not be repeated in `fields`.
    """
    rename = rename or {}
    defaults = defaults or {}
    out: Dict[str, Any] = {}
    for field in list(fields) + [d for d in defaults if d not in fields]:
        value = args.get(field)
        if value is None:
            value = defaults.get(field)
        if value is not None:
            out[rename.get(field, field)] = value
    return out


def without(args: Mapping[str, Any], *fields: str) -> Dict[str, Any]:
    """Everything in args except `fields` (typically the path parameters)."""
    return {k: v for k, v in args.items() if k not in fields and v is not None}


def unwrap(envelope: Mapping[str, Any], *path: str, default: Any = None, required: bool = False) -> Any:
    """Return envelope data (optionally a nested key path), or raise.

    A missing top-level `data` is always an error.  A missing nested key
    yields `default`, or raises when `required` is set (single-entity results).
    """
    if not envelope.get("success") or envelope.get("data") is None:
        error = envelope.get("error") or {}
        raise MissingDataError(error.get("message") if isinstance(error, dict) else str(error))
    data = envelope["data"]
    for key in path:
        if not isinstance(data, dict) or data.get(key) is None:
            if required:
                raise MissingDataError(f"No {'.'.join(path)} in API response")
            return default
        data = data[key]
    return data


def passthrough(envelope: Mapping[str, Any]) -> Dict[str, Any]:
    """Checked envelope, for tools whose result is the upstream payload as-is."""
    return {"success": True, "data": unwrap(envelope)}


def truthy(args: Mapping[str, Any], *fields: str) -> Dict[str, Any]:
    """Like pick(), but 0, "" and False count as unset too."""
    return {f: args[f] for f in fields if args.get(f)}
