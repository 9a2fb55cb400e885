"""Access to client options given as a mapping or as an attribute object."""

from collections.abc import Mapping
from typing import Any, Dict


def options_to_dict(options: Any) -> Dict[str, Any]:
    """Return client options as a plain dict.

    Args:
        options: A mapping, a pydantic model, an attribute object or None
    """
    if options is None:
        return {}
    if isinstance(options, Mapping):
        return dict(options)
    if hasattr(options, "model_dump"):
        return options.model_dump()
    return dict(vars(options))


def get_option(options: Any, name: str, default: Any = None) -> Any:
    if isinstance(options, Mapping):
        return options.get(name, default)
    return getattr(options, name, default)
