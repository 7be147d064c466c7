"""Pytest configuration and fixtures."""

import logging

import pytest

from xsd_explorer.codegen.core.schema import (
    Attribute,
    AttributeGroup,
    ComplexType,
    Element,
    Group,
    Restriction,
    SchemaDocument,
    SimpleType,
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() between tests so caplog keeps working."""
    yield
    logger = logging.getLogger("xsd_explorer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def order_nodes():
    """Schema nodes of a small purchase-order schema, in document order."""
    return [
        SimpleType(
            "Status",
            base="xs:string",
            restriction=Restriction(enum=["active", "inactive"]),
            doc="Lifecycle state of an order.",
        ),
        SimpleType("Code", base="xs:string"),
        SimpleType("ShortCode", base="Code"),
        SimpleType("Sku", base="xs:string", restriction=Restriction(pattern="[A-Z]{3}")),
        SimpleType("Codes", base="Code", list=True),
        SimpleType(
            "Value",
            union=True,
            member_types={"b": "xs:int", "a": "xs:int", "c": "xs:string"},
        ),
        ComplexType(
            "Order",
            attributes=[Attribute("id", type="xs:ID")],
            elements=[
                Element("status", type="Status"),
                Element("item", type="Sku", plural=True),
                Element("note", type="xs:string", optional=True),
            ],
        ),
        Element("order", type="Order"),
        Element("purchase", type="Order"),
    ]


@pytest.fixture
def order_document(order_nodes):
    """The purchase-order schema as a SchemaDocument."""
    return SchemaDocument(order_nodes, name="order.xsd")


@pytest.fixture
def grouped_document():
    """A complex type pulling its content from named groups."""
    return SchemaDocument(
        [
            AttributeGroup("Audit", attributes=[Attribute("created", type="xs:dateTime")]),
            Group("Contact", elements=[Element("email", type="xs:string")]),
            ComplexType(
                "Customer",
                elements=[Element("name", type="xs:string")],
                groups=[Group("", ref="tns:Contact")],
                attribute_groups=[AttributeGroup("", ref="tns:Audit")],
            ),
        ]
    )
