from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, JsonValue

# Closed set of argument values: null, bool, number, string, list, object.
Value: TypeAlias = JsonValue


class GraphQLRequest(BaseModel):
    """A simplified JSON description of one GraphQL operation."""

    operation: str = "query"
    resource: str = ""
    fields: list[str] = Field(default_factory=list)
    parameters: dict[str, Value] = Field(default_factory=dict)
    filters: dict[str, Value] = Field(default_factory=dict)
    data: dict[str, Value] | None = None


class GraphQLResponse(BaseModel):
    success: bool = False
    data: Any = None
    error: str | None = None
    query: str | None = None


class BulkRequest(BaseModel):
    requests: list[GraphQLRequest] = Field(default_factory=list)


class BulkResponseItem(BaseModel):
    index: int
    response: GraphQLResponse


class BulkResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    responses: list[BulkResponseItem] = Field(default_factory=list)
    total_processed: int = Field(0, alias="totalProcessed")
    success_count: int = Field(0, alias="successCount")
    fail_count: int = Field(0, alias="failCount")
