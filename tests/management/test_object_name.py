from __future__ import annotations

import pytest

from brokerconsole import MalformedObjectNameError
from brokerconsole.management import (
    OBJECT_NAME_ATTRIBUTE,
    Attribute,
    AttributeList,
    ObjectInstance,
    ObjectName,
)


def test_parse_keeps_component_order():
    name = ObjectName.parse("org.apache.activemq:Type=Queue,Destination=orders,BrokerName=local")

    assert name.domain == "org.apache.activemq"
    assert list(name.key_property_list) == ["Type", "Destination", "BrokerName"]
    assert name.get_key_property("Destination") == "orders"
    assert name.get_key_property("missing") is None


def test_str_round_trips_and_omits_null_values():
    text = "broker:Type=Broker,BrokerName=localhost"

    assert str(ObjectName.parse(text)) == text
    assert str(ObjectName("broker", {"Type": "Queue", "Gone": None})) == "broker:Type=Queue"


def test_key_property_list_is_a_copy():
    name = ObjectName("broker", {"Type": "Queue"})
    props = name.key_property_list
    props["Type"] = "Topic"

    assert name.get_key_property("Type") == "Queue"


@pytest.mark.parametrize(
    "text",
    [
        "no-colon",
        ":Type=Queue",
        "broker:",
        "broker:Type",
        "broker:=Queue",
        "broker:Type=Queue,Type=Topic",
    ],
)
def test_parse_rejects_malformed_names(text):
    with pytest.raises(MalformedObjectNameError):
        ObjectName.parse(text)


def test_attribute_list_accepts_only_attributes():
    attrs = AttributeList([Attribute("a", 1)])
    attrs.append(Attribute("b", None))

    assert [a.name for a in attrs] == ["a", "b"]
    assert len(attrs) == 2
    assert attrs == AttributeList([Attribute("a", 1), Attribute("b", None)])
    with pytest.raises(TypeError, match="accepts Attribute"):
        attrs.append(("c", 3))


def test_equal_names_collapse_in_a_set():
    names = {
        ObjectName.parse("broker:Type=Queue,Destination=orders"),
        ObjectName.parse("broker:Type=Queue,Destination=orders"),
        ObjectName("broker", {"Destination": "orders", "Type": "Queue"}),
    }

    assert len(names) == 1
    assert hash(ObjectName.parse("d:a=1")) == hash(ObjectName("d", {"a": "1"}))


def test_names_are_usable_as_keys_in_wrappers():
    name = ObjectName.parse("broker:Type=Broker")
    lookup = {name: "broker-view"}

    assert lookup[ObjectName("broker", {"Type": "Broker"})] == "broker-view"
    assert hash(Attribute(OBJECT_NAME_ATTRIBUTE, name)) == hash(
        Attribute(OBJECT_NAME_ATTRIBUTE, ObjectName.parse("broker:Type=Broker"))
    )
    assert len({ObjectInstance(name, "BrokerView"), ObjectInstance(name, "BrokerView")}) == 1


def test_parse_splits_quoted_values_and_rejects_default_domain():
    name = ObjectName.parse('broker:name="a,b=c"')

    assert name.key_property_list == {"name": '"a', "b": 'c"'}
    with pytest.raises(MalformedObjectNameError):
        ObjectName.parse(":type=Foo")
