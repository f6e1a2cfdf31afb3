"""
browse_messages.py — Flatten a few queued messages and bean results.

Demonstrates a two-link filter chain: a static source feeding the map
transform filter, printing one property map per supported result.

Usage:
    python examples/browse_messages.py
"""

from brokerconsole.filters import MapTransformFilter, StaticQueryFilter
from brokerconsole.management import ObjectName
from brokerconsole.messaging import BytesMessage, MapMessage, Queue, TextMessage


def main() -> None:
    order = TextMessage(destination=Queue("orders"), text="order #1")
    order.set_property("tenant", "acme")

    source = StaticQueryFilter(
        [
            ObjectName.parse("org.apache.activemq:Type=Queue,Destination=orders"),
            order,
            BytesMessage(destination=Queue("blobs"), body=b"\x00\x01raw"),
            MapMessage(destination=Queue("stock"), fields={"sku": "A-1", "qty": 3}),
            "not a bean",
        ]
    )

    for row in MapTransformFilter(source).query([]):
        for key, value in row.items():
            print(f"{key} = {value!r}")
        print()


if __name__ == "__main__":
    main()
