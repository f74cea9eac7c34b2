"""REST API adapter for the row store.

This module provides a FastAPI-based REST API over a single table.

Endpoints:
    POST /statements - Prepare and execute a statement
    POST /rows - Insert a row
    GET /rows - List every row
    GET /stats - Table statistics
    GET /health - Health check

Usage:
    from row_store.adapters.inbound.rest_api import create_app
    from row_store.application import QueryExecutor, new_table

    app = create_app(new_table(), QueryExecutor())
    # Run with uvicorn: uvicorn app:app --host 127.0.0.1 --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from row_store import __version__
from row_store.adapters.inbound.statement_parser import PrepareError, StatementParser
from row_store.domain.entities import InvalidRowError, Row, Statement, Table
from row_store.ports.inbound.statement_executor import (
    ExecutionResult,
    ExecutionStatus,
    StatementExecutor,
)


class StatementRequest(BaseModel):
    """Request model for statement execution."""

    statement: str = Field(..., description="Statement text, e.g. 'insert 1 alice a@example.com'")


class RowModel(BaseModel):
    """A row as exchanged over HTTP."""

    id: int = Field(..., description="Row identifier")
    username: str = Field(..., description="Username (up to 32 bytes)")
    email: str = Field(..., description="Email (up to 255 bytes)")


class StatementResponse(BaseModel):
    """Response model for statement execution."""

    status: str = Field(..., description="'success' or 'table_full'")
    success: bool = Field(..., description="Whether the statement succeeded")
    affected_rows: int = Field(0, description="Number of rows inserted")
    rows: list[RowModel] = Field(default_factory=list, description="Selected rows")


class StatsResponse(BaseModel):
    """Response model for table statistics."""

    row_count: int = Field(..., description="Number of live rows")
    max_rows: int = Field(..., description="Row capacity")
    rows_per_page: int = Field(..., description="Rows per page")
    row_size: int = Field(..., description="Encoded row size in bytes")
    page_size: int = Field(..., description="Page size in bytes")
    pages_allocated: int = Field(..., description="Allocated pages")
    max_pages: int = Field(..., description="Page capacity")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


def _result_to_response(result: ExecutionResult) -> StatementResponse:
    """Convert ExecutionResult to StatementResponse."""
    rows = [RowModel(**row.to_dict()) for row in result.rows]
    return StatementResponse(
        status=result.status.value,
        success=result.success,
        affected_rows=result.affected_rows,
        rows=rows,
    )


def create_app(table: Table, executor: StatementExecutor) -> FastAPI:
    """Create a FastAPI application serving one table.

    Args:
        table: The table to serve.
        executor: Executor applying statements to the table.

    Returns:
        FastAPI application instance.
    """
    app = FastAPI(
        title="Row Store API",
        description="Fixed-schema in-memory record store",
        version=__version__,
    )
    parser = StatementParser()

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.post("/statements", response_model=StatementResponse, tags=["Statements"])
    async def execute_statement(request: StatementRequest) -> StatementResponse:
        """Prepare and execute a statement."""
        try:
            statement = parser.parse(request.statement)
        except PrepareError as e:
            raise HTTPException(
                status_code=400,
                detail={"error": e.result.value, "message": e.message},
            ) from e

        return _result_to_response(executor.execute(statement, table))

    @app.post("/rows", response_model=StatementResponse, tags=["Rows"])
    async def insert_row(request: RowModel) -> StatementResponse:
        """Insert one row."""
        row = Row(id=request.id, username=request.username, email=request.email)
        try:
            row.validate()
        except InvalidRowError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        result = executor.execute(Statement.insert(row), table)
        if result.status == ExecutionStatus.TABLE_FULL:
            raise HTTPException(status_code=409, detail="Table full")
        return _result_to_response(result)

    @app.get("/rows", response_model=list[RowModel], tags=["Rows"])
    async def list_rows() -> list[RowModel]:
        """Return every row in insertion order."""
        result = executor.execute(Statement.select(), table)
        return [RowModel(**row.to_dict()) for row in result.rows]

    @app.get("/stats", response_model=StatsResponse, tags=["Stats"])
    async def get_stats() -> StatsResponse:
        """Get table statistics."""
        stats = table.get_stats()
        return StatsResponse(
            row_count=stats.row_count,
            max_rows=stats.max_rows,
            rows_per_page=stats.rows_per_page,
            row_size=stats.row_size,
            page_size=stats.page_size,
            pages_allocated=stats.pages_allocated,
            max_pages=stats.max_pages,
        )

    return app


def run_server(
    app: FastAPI,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Run the REST API server.

    Args:
        app: The application returned by create_app.
        host: Host to bind to.
        port: Port to listen on.
    """
    import uvicorn

    uvicorn.run(app, host=host, port=port)
