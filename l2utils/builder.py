"""Building SELECT queries step by step."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Query:
    """A built SELECT query together with its parts."""

    table: str
    columns: list[str]
    sql: str


class BuilderError(ValueError):
    """Raised when a builder lacks what it needs to build."""


@dataclass
class SelectBuilder:
    """Collects the parts of a SELECT query through chained calls."""

    table: str = ""
    columns: list[str] = field(default_factory=list)

    def select_from_table(self, table: str) -> SelectBuilder:
        self.table = table
        return self

    def select_columns(self, *args: str) -> SelectBuilder:
        self.columns = list(args)
        return self

    def build(self) -> Query:
        """Return the query; all columns are selected when none were given."""
        if not self.table:
            raise BuilderError("not enough arguments, SelectBuilder can't build object")
        if not self.columns:
            self.columns = ["*"]
        sql = " ".join(["SELECT", ",".join(self.columns), "FROM", self.table])
        return Query(table=self.table, columns=list(self.columns), sql=sql)


def run_builder() -> None:
    """Build a sample query and print its parts."""
    try:
        query = (
            SelectBuilder()
            .select_from_table("Products")
            .select_columns("ID", "Name", "Color", "Type")
            .build()
        )
    except BuilderError as error:
        print(error)
        return
    print(query.table)
    print("[" + " ".join(query.columns) + "]")
    print(query.sql)