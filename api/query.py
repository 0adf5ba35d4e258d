"""PostgREST query building.

Queries are built from a handful of clause kinds and rendered to the
PostgREST filter syntax by ``encode_query``:

    select=<cols>            Select
    <column>=eq.<value>      Equals
    <column>=cs.{<value>}    ArrayContains (array column contains value)
    order=<column>.desc      OrderBy
"""
from typing import Annotated, List, Literal, Tuple, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field


# Punctuation left unescaped in filter values, alongside letters and digits
_UNRESERVED = "-_.!~*'()"


class Select(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["select"] = "select"
    columns: Tuple[str, ...] = ("*",)


class Equals(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["eq"] = "eq"
    column: str
    value: str


class ArrayContains(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["cs"] = "cs"
    column: str
    value: str


class OrderBy(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["order"] = "order"
    column: str
    descending: bool = True


Clause = Annotated[Union[Select, Equals, ArrayContains, OrderBy], Field(discriminator="kind")]


class TableQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    table: str
    clauses: Tuple[Clause, ...] = ()

    def _with(self, clause) -> "TableQuery":
        return self.model_copy(update={"clauses": self.clauses + (clause,)})

    def select(self, *columns: str) -> "TableQuery":
        return self._with(Select(columns=columns or ("*",)))

    def eq(self, column: str, value: str) -> "TableQuery":
        return self._with(Equals(column=column, value=str(value)))

    def contains(self, column: str, value: str) -> "TableQuery":
        return self._with(ArrayContains(column=column, value=str(value)))

    def order(self, column: str, descending: bool = True) -> "TableQuery":
        return self._with(OrderBy(column=column, descending=descending))


def visible_videos(*columns: str) -> TableQuery:
    """Select from ``videos`` restricted to active, published rows."""
    return (
        TableQuery(table="videos")
        .select(*columns)
        .eq("link_status", "active")
        .eq("status", "published")
    )


def encode_value(value: str) -> str:
    return quote(value, safe=_UNRESERVED)


def render_clause(clause) -> Tuple[str, str]:
    if isinstance(clause, Select):
        return "select", ",".join(clause.columns)
    if isinstance(clause, Equals):
        return clause.column, f"eq.{encode_value(clause.value)}"
    if isinstance(clause, ArrayContains):
        return clause.column, f"cs.{{{encode_value(clause.value)}}}"
    if isinstance(clause, OrderBy):
        direction = "desc" if clause.descending else "asc"
        return "order", f"{clause.column}.{direction}"
    raise TypeError(f"Unsupported clause: {clause!r}")


def encode_query(query: TableQuery) -> str:
    pairs: List[Tuple[str, str]] = [render_clause(c) for c in query.clauses]
    return "&".join(f"{key}={value}" for key, value in pairs)
