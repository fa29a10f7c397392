"""MCP server exposing the Dispatcher over stdio."""

import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from . import __version__
from .adapters.google_tasks import GoogleTasksAdapter
from .config import Config
from .core.errors import TasksError
from .dispatcher import DEFAULT_LIST_URI, Dispatcher, render

logger = logging.getLogger(__name__)

SERVER_NAME = "google-tasks-server"
# How the default list URI reads once parsed into an AnyUrl
DEFAULT_LIST_ADDRESS = str(AnyUrl(DEFAULT_LIST_URI))


def to_mcp_error(error: TasksError) -> McpError:
    """Translate a TasksError into the JSON-RPC error the SDK sends."""
    return McpError(types.ErrorData(code=error.code, message=str(error)))


def create_server(dispatcher: Dispatcher) -> Server:
    """Create an MCP server with tool and resource handlers registered."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return [
            types.Resource(
                uri=r.uri,
                name=r.name,
                description=r.description,
                mimeType=r.mime_type,
            )
            for r in dispatcher.list_resources()
        ]

    @server.read_resource()
    async def read_resource(uri) -> list[ReadResourceContents]:
        address = str(uri)
        if address == DEFAULT_LIST_ADDRESS:
            address = DEFAULT_LIST_URI
        try:
            text = dispatcher.read_resource(address)
        except TasksError as e:
            raise to_mcp_error(e) from e
        return [ReadResourceContents(content=text, mime_type="application/json")]

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=t.name,
                description=t.description,
                inputSchema=t.input_schema,
            )
            for t in dispatcher.list_tools()
        ]

    # Registered without @server.call_tool() so the dispatcher does all
    # validation and errors go out as JSON-RPC errors with their code.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        try:
            payload = dispatcher.call(request.params.name, request.params.arguments)
        except TasksError as e:
            raise to_mcp_error(e) from e
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=render(payload))],
                isError=False,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool

    return server


async def serve(config: Config) -> None:
    """Run the MCP server on stdio until the client disconnects."""
    dispatcher = Dispatcher(GoogleTasksAdapter(config))
    server = create_server(dispatcher)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Google Tasks MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
