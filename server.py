import json
import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent, Resource, CallToolRequestParams
from pydantic import AnyUrl, BaseModel, ValidationError

from fontcache.models import (
    GetSystemFontsRequest, GetPaginatedFontsRequest,
    GetFontCountRequest, GetChangelogRequest
)
from fontcache.cache import FontCache
from fontcache.changelog import get_changelog_text
from fontcache.config import SERVER_NAME, CHANGELOG_PATH
from fontcache.logging_config import logger, setup_logging

FONTS_RESOURCE_URI = "font://fonts"

REQUEST_MODELS = {
    "get_system_fonts": GetSystemFontsRequest,
    "get_paginated_fonts": GetPaginatedFontsRequest,
    "get_font_count": GetFontCountRequest,
    "get_changelog_text": GetChangelogRequest,
}

TOOL_DESCRIPTIONS = {
    "get_system_fonts": "Return every installed font as {name, path, family, style}",
    "get_paginated_fonts": "Return one page of installed fonts. Input: {\"page\":0,\"page_size\":50}",
    "get_font_count": "Return the number of installed fonts",
    "get_changelog_text": "Return the application changelog as markdown text",
}

@dataclass
class AppContext:
    """State owned by the running server and shared with every handler."""
    fonts: FontCache
    changelog_path: str = CHANGELOG_PATH

def list_tools() -> List[Tool]:
    return [
        Tool(
            name=name,
            description=TOOL_DESCRIPTIONS[name],
            inputSchema=model.model_json_schema(by_alias=False),
        )
        for name, model in REQUEST_MODELS.items()
    ]

async def validate_and_parse_args(tool_name: str, args: Dict[str, Any]) -> BaseModel:
    """Validate tool arguments using Pydantic models."""
    model = REQUEST_MODELS.get(tool_name)
    if model is None:
        raise ValueError(f"Unknown tool: {tool_name}")
    try:
        return model.model_validate(args)
    except ValidationError as e:
        logger.error(f"Validation error for {tool_name}: {e}")
        raise ValueError(f"Invalid arguments for {tool_name}: {e}")

def _dump_fonts(fonts) -> str:
    return json.dumps([font.model_dump() for font in fonts], indent=2)

async def handle_tool_call(req: CallToolRequestParams, context: AppContext) -> List[TextContent]:
    """Run a tool call against the application context.

    Cache reads block while the first scan runs, so they go to a worker
    thread. Failures are logged and re-raised; the MCP runtime reports
    them to the client as tool errors.
    """
    tool_name = req.name
    args = req.arguments or {}

    logger.info(f"Handling tool call: {tool_name}")

    try:
        validated_args = await validate_and_parse_args(tool_name, args)

        if tool_name == "get_system_fonts":
            fonts = await asyncio.to_thread(context.fonts.get_all_fonts)
            content = _dump_fonts(fonts)

        elif tool_name == "get_paginated_fonts":
            fonts = await asyncio.to_thread(
                context.fonts.get_paginated_fonts,
                validated_args.page, validated_args.page_size
            )
            content = _dump_fonts(fonts)

        elif tool_name == "get_font_count":
            count = await asyncio.to_thread(context.fonts.get_font_count)
            content = json.dumps(count)

        elif tool_name == "get_changelog_text":
            content = await asyncio.to_thread(get_changelog_text, context.changelog_path)

        else:
            raise ValueError(f"Unknown tool: {tool_name}")

    except Exception as e:
        logger.error(f"Error handling tool call {tool_name}: {e}")
        raise

    logger.info(f"Successfully handled tool call: {tool_name}")
    return [TextContent(type="text", text=content)]

async def read_fonts_resource(uri: str, context: AppContext) -> str:
    if uri.rstrip("/") != FONTS_RESOURCE_URI:
        raise ValueError(f"Unknown resource {uri}")
    fonts = await asyncio.to_thread(context.fonts.get_all_fonts)
    return _dump_fonts(fonts)

def build_server(context: AppContext) -> Server:
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def _list_tools() -> List[Tool]:
        return list_tools()

    @server.call_tool()
    async def _call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        return await handle_tool_call(CallToolRequestParams(name=name, arguments=arguments), context)

    @server.list_resources()
    async def _list_resources() -> List[Resource]:
        return [Resource(uri=FONTS_RESOURCE_URI, name="All installed fonts", mimeType="application/json")]

    @server.read_resource()
    async def _read_resource(uri: AnyUrl) -> List[ReadResourceContents]:
        body = await read_fonts_resource(str(uri), context)
        return [ReadResourceContents(content=body, mime_type="application/json")]

    return server

async def main():
    setup_logging()
    logger.info(f"Starting {SERVER_NAME}")

    context = AppContext(fonts=FontCache())
    logger.info(f"Font cache created for {context.fonts.os_name}")
    server = build_server(context)

    async with stdio_server() as (read, write):
        logger.info("MCP server ready, listening for messages...")
        await server.run(read, write, server.create_initialization_options())

def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass

if __name__ == "__main__":
    run()
