"""
Type resolution over a parsed schema document.

Resolution is two-tiered: a name is first looked up in the built-in type
table; only on a miss is the document scanned to flatten user-defined
aliases. Unknown names resolve to themselves rather than failing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple

from ...logging_config import get_logger
from .builtins import get_builtin_type, is_builtin_type
from .ordering import to_sorted_pairs
from .qname import trim_ns_prefix
from .schema import NodeKind, Restriction, SchemaNode, SimpleType

logger = get_logger(__name__)

STRUCTURAL_KINDS = (NodeKind.COMPLEX_TYPE, NodeKind.GROUP, NodeKind.ATTRIBUTE_GROUP)


class ShapeKind(Enum):
    """Outcome categories of type resolution."""

    PRIMITIVE = "primitive"  # built-in with a language spelling
    RESTRICTED = "restricted"  # simple type carrying pattern/enum/length facets
    LIST = "list"  # whitespace-separated list of an item type
    UNION = "union"  # one of several member types
    STRUCTURE = "structure"  # complex type or group reference
    UNRESOLVED = "unresolved"  # nothing matched, name echoed back


@dataclass
class ResolvedType:
    """
    Fully resolved shape of a declared type name for one target language.

    ``spelling`` is the language type for primitives, the spelling of the
    underlying base for restricted types, and the local schema name for
    everything else.
    """

    kind: ShapeKind
    name: str
    spelling: str
    restriction: Optional[Restriction] = None
    item: Optional["ResolvedType"] = None
    members: List[Tuple[str, "ResolvedType"]] = field(default_factory=list)

    @property
    def is_primitive(self) -> bool:
        return self.kind == ShapeKind.PRIMITIVE


def resolve_base_of_simple_type(name: str, nodes: Sequence[SchemaNode]) -> str:
    """
    Resolve a name one level through the schema document.

    The first matching node wins:

    - a SimpleType with pattern/enum/length facets returns its own name,
      since its structure matters and it must not be aliased away;
    - an unconstrained SimpleType that is neither list nor union returns
      its declared base;
    - an Attribute or Element returns its declared type.

    Returns:
        The resolved name, or ``name`` unchanged when nothing matches
    """
    for node in nodes:
        if node.kind == NodeKind.SIMPLE_TYPE:
            if node.restriction.has_constraints() and node.name == name:
                return node.name
            elif not node.list and not node.union and node.name == name:
                return node.base
        elif node.kind == NodeKind.ATTRIBUTE:
            if node.name == name:
                return node.type
        elif node.kind == NodeKind.ELEMENT:
            if node.name == name:
                return node.type
    return name


def resolve_simple_type_node(name: str, nodes: Sequence[SchemaNode]) -> Optional[SimpleType]:
    """Find the first non-list, non-union SimpleType called ``name``."""
    for node in nodes:
        if (
            node.kind == NodeKind.SIMPLE_TYPE
            and not node.list
            and not node.union
            and node.name == name
        ):
            return node
    return None


def flatten_alias(name: str, nodes: Sequence[SchemaNode]) -> str:
    """
    Follow unconstrained aliases until a built-in or a fixed point.

    Each step applies :func:`resolve_base_of_simple_type` once. A chain that
    revisits a name stops there.
    """
    current = name
    seen = set()

    while True:
        if is_builtin_type(current) or is_builtin_type(trim_ns_prefix(current)):
            return current

        local = trim_ns_prefix(current)
        if local in seen:
            logger.warning(f"Alias cycle detected while flattening {name!r} at {local!r}")
            return current
        seen.add(local)

        next_name = resolve_base_of_simple_type(local, nodes)
        if not next_name or next_name == local:
            return current
        current = next_name


def _lookup_builtin(name: str, language: str) -> Tuple[str, bool]:
    """Try the raw name first so xml:lang and friends match exactly."""
    spelling, ok = get_builtin_type(name, language)
    if ok:
        return spelling, ok
    return get_builtin_type(trim_ns_prefix(name), language)


def _find_node(local: str, nodes: Sequence[SchemaNode], predicate) -> Optional[SchemaNode]:
    for node in nodes:
        if node.name == local and predicate(node):
            return node
    return None


def resolve_type(
    name: str,
    nodes: Sequence[SchemaNode],
    language: str,
    _seen: FrozenSet[str] = frozenset(),
) -> ResolvedType:
    """
    Resolve a type name into its full shape for a target language.

    Args:
        name: Type name as referenced in the schema, possibly prefixed
        nodes: The schema document
        language: One of SUPPORTED_LANGUAGES

    Returns:
        ResolvedType; never raises for unknown names

    Raises:
        ConfigError: If the language is not supported
    """
    spelling, ok = _lookup_builtin(name, language)
    if ok:
        return ResolvedType(ShapeKind.PRIMITIVE, name, spelling)

    local = trim_ns_prefix(name)
    if local in _seen:
        logger.warning(f"Recursive type reference {local!r}, leaving unresolved")
        return ResolvedType(ShapeKind.UNRESOLVED, local, local)
    seen = _seen | {local}

    simple = resolve_simple_type_node(local, nodes)
    if simple is not None and simple.restriction.has_constraints():
        base = flatten_alias(simple.base, nodes)
        base_spelling, ok = _lookup_builtin(base, language)
        if not ok:
            base_spelling = resolve_type(base, nodes, language, seen).spelling
        return ResolvedType(
            ShapeKind.RESTRICTED, local, base_spelling, restriction=simple.restriction
        )

    list_node = _find_node(local, nodes, lambda n: n.kind == NodeKind.SIMPLE_TYPE and n.list)
    if list_node is not None:
        item = resolve_type(list_node.base, nodes, language, seen)
        return ResolvedType(ShapeKind.LIST, local, local, item=item)

    union_node = _find_node(local, nodes, lambda n: n.kind == NodeKind.SIMPLE_TYPE and n.union)
    if union_node is not None:
        members = [
            (member_name, resolve_type(member_type, nodes, language, seen))
            for member_name, member_type in to_sorted_pairs(union_node.member_types)
        ]
        return ResolvedType(ShapeKind.UNION, local, local, members=members)

    if simple is not None:
        target = flatten_alias(local, nodes)
        if target != local:
            return resolve_type(target, nodes, language, seen)

    structure = _find_node(local, nodes, lambda n: n.kind in STRUCTURAL_KINDS)
    if structure is not None:
        return ResolvedType(ShapeKind.STRUCTURE, local, local)

    logger.debug(f"Type {name!r} not found in schema, echoing name")
    return ResolvedType(ShapeKind.UNRESOLVED, local, local)
