"""
Core schema representation for code generation.

Parsed XSD declarations arrive as an ordered collection of typed nodes.
Each node carries an explicit ``kind`` discriminant so resolvers and the
dispatcher can branch on it without isinstance chains.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Union
from enum import Enum


class NodeKind(Enum):
    """Kinds of schema declarations."""

    SIMPLE_TYPE = "simple_type"
    COMPLEX_TYPE = "complex_type"
    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    GROUP = "group"
    ATTRIBUTE_GROUP = "attribute_group"


@dataclass
class Restriction:
    """Facets narrowing a simple type."""

    pattern: Optional[str] = None
    enum: List[str] = field(default_factory=list)
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min: Optional[float] = None
    max: Optional[float] = None
    precision: Optional[int] = None
    doc: str = ""

    @property
    def has_min_length(self) -> bool:
        return self.min_length is not None

    @property
    def has_max_length(self) -> bool:
        return self.max_length is not None

    def has_constraints(self) -> bool:
        """True when a pattern, enumeration or length facet is present."""
        return (
            self.pattern is not None
            or len(self.enum) > 0
            or self.has_min_length
            or self.has_max_length
        )


@dataclass
class SimpleType:
    """A ``simpleType`` declaration."""

    name: str
    base: str = ""
    list: bool = False
    union: bool = False
    # Member name -> member type, only meaningful for unions
    member_types: Dict[str, str] = field(default_factory=dict)
    restriction: Restriction = field(default_factory=Restriction)
    anonymous: bool = False
    doc: str = ""

    kind = NodeKind.SIMPLE_TYPE


@dataclass
class Element:
    """An ``element`` declaration."""

    name: str
    type: str = ""
    plural: bool = False
    optional: bool = False
    nillable: bool = False
    default: Optional[str] = None
    doc: str = ""

    kind = NodeKind.ELEMENT


@dataclass
class Attribute:
    """An ``attribute`` declaration."""

    name: str
    type: str = ""
    plural: bool = False
    optional: bool = False
    default: Optional[str] = None
    doc: str = ""

    kind = NodeKind.ATTRIBUTE


@dataclass
class Group:
    """A named model ``group`` of elements."""

    name: str
    elements: List[Element] = field(default_factory=list)
    ref: str = ""
    plural: bool = False
    doc: str = ""

    kind = NodeKind.GROUP


@dataclass
class AttributeGroup:
    """A named ``attributeGroup``."""

    name: str
    attributes: List[Attribute] = field(default_factory=list)
    ref: str = ""
    doc: str = ""

    kind = NodeKind.ATTRIBUTE_GROUP


@dataclass
class ComplexType:
    """A ``complexType`` declaration."""

    name: str
    base: str = ""
    elements: List[Element] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)
    groups: List[Group] = field(default_factory=list)
    attribute_groups: List[AttributeGroup] = field(default_factory=list)
    mixed: bool = False
    anonymous: bool = False
    doc: str = ""

    kind = NodeKind.COMPLEX_TYPE


SchemaNode = Union[SimpleType, ComplexType, Element, Attribute, Group, AttributeGroup]


class SchemaDocument(Sequence):
    """Ordered, read-only collection of schema nodes."""

    def __init__(self, nodes: Optional[List[SchemaNode]] = None, name: str = ""):
        self._nodes = tuple(nodes or ())
        self.name = name

    def __getitem__(self, index):
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SchemaNode]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"SchemaDocument(name={self.name!r}, nodes={len(self._nodes)})"

    def of_kind(self, kind: NodeKind) -> List[SchemaNode]:
        """Get all nodes of one kind, in document order."""
        return [node for node in self._nodes if node.kind == kind]

    def count_by_kind(self) -> Dict[str, int]:
        """Count nodes per kind."""
        counts: Dict[str, int] = {}
        for node in self._nodes:
            counts[node.kind.value] = counts.get(node.kind.value, 0) + 1
        return counts
