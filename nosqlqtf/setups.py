"""Built-in table setups selected by the ``before-class`` suite property."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from nosqlqtf.javarandom import Random

Row = dict[str, Any]


@dataclass
class PrimIndexSetup:
    """Table ``Foo`` keyed on a composite primary key."""

    num1: int = 0
    num2: int = 0
    num3: int = 0

    def before_ddls(self) -> list[str]:
        """DDL statements to run before the tests."""
        return [
            "CREATE TABLE Foo( id1 INTEGER, id2 DOUBLE, id3 ENUM(tok0, tok1, tok2), "
            "firstName STRING,  lastName STRING, age INTEGER, id4 STRING, "
            "primary key (id1, id2, id3, id4))"
        ]

    def after_ddls(self) -> list[str]:
        """DDL statements to run after the tests."""
        return ["DROP TABLE IF EXISTS Foo"]

    def before_data(self) -> dict[str, list[Row]]:
        """Rows to insert before the tests, keyed by table name."""
        rows = [
            {
                "id1": i,
                "id2": i * 10.0 + j,
                "id3": f"tok{i % 3}",
                "id4": f"id4-{i}",
                "firstName": f"first{i}",
                "lastName": f"last{i}",
                "age": i + 10,
            }
            for i in range(1, 6)
            for j in range(3)
        ]
        return {"Foo": rows}


@dataclass
class PrimIndexSetup2:
    """Table ``Foo`` with a shard key, filled with java.util.Random data."""

    num1: int = 0
    num2: int = 0
    num3: int = 0

    def before_ddls(self) -> list[str]:
        """DDL statements to run before the tests."""
        return [
            "CREATE TABLE Foo(id1 INTEGER, id2 INTEGER, id3 INTEGER, "
            "firstName STRING,  lastName STRING, age INTEGER, id4 STRING, "
            "primary key (shard(id1, id2), id3, id4))"
        ]

    def after_ddls(self) -> list[str]:
        """DDL statements to run after the tests."""
        return ["DROP TABLE IF EXISTS Foo"]

    def before_data(self) -> dict[str, list[Row]]:
        """Rows to insert before the tests, keyed by table name."""
        rnd = Random(1)
        rows: list[Row] = []
        for i in range(self.num1):
            for _ in range(self.num2 * self.num3):
                id1 = rnd.next_int(20)
                id2 = rnd.next_int(5)
                id3 = rnd.next_int(5)
                rows.append(
                    {
                        "id1": id1,
                        "id2": id2,
                        "id3": id3,
                        "id4": f"id4-{i}",
                        "firstName": f"first{i}",
                        "lastName": f"last{i}",
                        "age": i + 10,
                    }
                )
        return {"Foo": rows}


@dataclass
class PrimIndexSetup3:
    """Same as :class:`PrimIndexSetup2` with two secondary indexes."""

    p2: PrimIndexSetup2 = field(default_factory=PrimIndexSetup2)

    def before_ddls(self) -> list[str]:
        """DDL statements to run before the tests."""
        return self.p2.before_ddls() + [
            "CREATE INDEX idx1 on Foo (age, firstName)",
            "CREATE INDEX idx2 on Foo (age)",
        ]

    def after_ddls(self) -> list[str]:
        """DDL statements to run after the tests."""
        return self.p2.after_ddls()

    def before_data(self) -> dict[str, list[Row]]:
        """Rows to insert before the tests, keyed by table name."""
        return self.p2.before_data()


@dataclass
class UserTable:
    """Table ``Users`` with nested record, array and map columns."""

    num1: int = 0
    num2: int = 0
    num3: int = 0

    def before_ddls(self) -> list[str]:
        """DDL statements to run before the tests."""
        return [
            "CREATE TABLE Users (id INTEGER, firstName STRING, lastName STRING, age INTEGER,  "
            "address RECORD( city STRING,  state STRING,  "
            "phones ARRAY(RECORD(work INTEGER, home INTEGER)),  ptr STRING),  "
            "children MAP(RECORD(age LONG, friends ARRAY(STRING))),  primary key (id))"
        ]

    def after_ddls(self) -> list[str]:
        """DDL statements to run after the tests."""
        return ["DROP TABLE IF EXISTS Users"]

    def before_data(self) -> dict[str, list[Row]]:
        """Rows to insert before the tests, keyed by table name."""
        rows = [
            {
                "id": i,
                "firstName": f"first{i}",
                "lastName": f"last{i}",
                "age": i + 10,
                "address": {
                    "city": "Boston",
                    "state": "MA",
                    "phones": [{"work": 111, "home": 222}],
                    "ptr": None,
                },
                "children": {
                    "john": {"age": 3, "friends": ["f1"]},
                    "cory": {"age": 4, "friends": ["f2"]},
                },
            }
            for i in range(10)
        ]
        return {"Users": rows}


@dataclass
class Data1Setup:
    """Table ``Data1Users`` with ten simple rows."""

    def before_ddls(self) -> list[str]:
        """DDL statements to run before the tests."""
        return [
            "CREATE TABLE Data1Users (id INTEGER, firstName STRING, lastName STRING, "
            "age INTEGER, primary key (id))"
        ]

    def after_ddls(self) -> list[str]:
        """DDL statements to run after the tests."""
        return ["DROP TABLE IF EXISTS Data1Users"]

    def before_data(self) -> dict[str, list[Row]]:
        """Rows to insert before the tests, keyed by table name."""
        rows = [
            {"id": i, "firstName": f"first{i}", "lastName": f"last{i}", "age": i + 10}
            for i in range(10)
        ]
        return {"Data1Users": rows}


@dataclass
class Data2Setup:
    """A setup that creates nothing."""

    def before_ddls(self) -> list[str]:
        """DDL statements to run before the tests."""
        return []

    def after_ddls(self) -> list[str]:
        """DDL statements to run after the tests."""
        return []

    def before_data(self) -> dict[str, list[Row]]:
        """Rows to insert before the tests, keyed by table name."""
        return {}


Setup = Union[PrimIndexSetup, PrimIndexSetup2, PrimIndexSetup3, UserTable, Data1Setup, Data2Setup]


def setup_for_class(name: str) -> Setup | None:
    """Return the setup named by a ``before-class`` property, or None if unknown."""
    if name == "PrimIndexSetup":
        return PrimIndexSetup()
    if name == "PrimIndexSetup2":
        return PrimIndexSetup2(num1=20, num2=5, num3=3)
    if name == "PrimIndexSetup3":
        return PrimIndexSetup3(p2=PrimIndexSetup2(num1=20, num2=15, num3=3))
    if name == "UserTable":
        return UserTable()
    if name == "Data1Setup":
        return Data1Setup()
    if name == "Data2Setup":
        return Data2Setup()
    return None