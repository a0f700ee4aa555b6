from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)

AttributeNames = Union[bool, str, Iterable[str], None]


@runtime_checkable
class AttributeOwner(Protocol):
    """Entity supplying the reference values, typically a bound search form.

    Values are read as plain attributes of the owner. Which attributes are
    "safe" to filter on is the owner's policy.
    """

    def attribute_names(self) -> Iterable[str]: ...

    def safe_attribute_names(self) -> Iterable[str]: ...


def resolve_attribute_names(owner: Any, attribute_names: AttributeNames = True) -> List[str]:
    """
    - True: the owner's safe attribute names
    - None: every attribute name of the owner
    - False: no attribute at all
    - a name or an iterable of names: exactly those
    """
    if attribute_names is True:
        return list(owner.safe_attribute_names())
    if attribute_names is None:
        return list(owner.attribute_names())
    if attribute_names is False:
        return []
    if isinstance(attribute_names, str):
        return [attribute_names]
    return list(attribute_names)


def reference_attributes(owner: Any, attribute_names: AttributeNames = True) -> Dict[str, Any]:
    """Read the reference attribute set from ``owner``.

    A name the owner cannot provide raises AttributeError before any row is
    filtered.
    """
    names = resolve_attribute_names(owner, attribute_names)
    attributes = {name: getattr(owner, name) for name in names}
    logger.debug("Reference attributes from %s: %s", type(owner).__name__, attributes)
    return attributes
