#!/usr/bin/env python
"""MCP server for segmented YouTube transcripts.

Lets LLM tool callers pull arbitrary slices of long transcripts without
blowing their context window.

Usage:
    uv run python -m transcript_slicer.mcp.server

Tools provided:
    - transcripts_getTranscript: Transcript with time/index/count selection
    - transcripts_searchTranscript: Segments containing a phrase
    - transcripts_getTimestampedTranscript: Selection with H:MM:SS timestamps
"""

import asyncio
import json
import logging
import sys
import uuid
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from transcript_slicer.lib.config_manager import config
from transcript_slicer.lib.logging_config import correlation_id_var, setup_logging
from transcript_slicer.services.segmentation import SelectionCriteria
from transcript_slicer.services.youtube import (
    TranscriptError,
    TranscriptService,
    get_transcript_service,
)

logger = logging.getLogger(__name__)

# Initialize server
server = Server("youtube-transcripts")


class ToolCallError(Exception):
    """Raised from call_tool so the SDK returns an isError result."""


SELECTION_PROPERTIES: dict[str, dict] = {
    "language": {
        "type": "string",
        "description": "Language code (default: en)",
    },
    "startTime": {
        "type": ["number", "string"],
        "description": "Window start in seconds or 'MM:SS' / 'HH:MM:SS'. Caption density varies, so prefer startIndex for long videos.",
    },
    "endTime": {
        "type": ["number", "string"],
        "description": "Window end in seconds or 'MM:SS' / 'HH:MM:SS'. Prefer maxSegments for predictable sizes.",
    },
    "lastMinutes": {
        "type": "number",
        "description": "Get the last N minutes (e.g., 30 for last 30 minutes)",
    },
    "firstMinutes": {
        "type": "number",
        "description": "Get the first N minutes (e.g., 120 for first 2 hours)",
    },
    "maxSegments": {
        "type": "integer",
        "description": "Max segments to return (use 300-500 to stay under token limits)",
    },
    "startIndex": {
        "type": "integer",
        "description": "Start from segment index (0=beginning). Applied after any time window.",
    },
    "endIndex": {
        "type": "integer",
        "description": "End at segment index, inclusive (0-based). Optional when using maxSegments.",
    },
}

VIDEO_ID_PROPERTY = {
    "type": "string",
    "description": "YouTube video ID (e.g., 'dQw4w9WgXcQ') or URL",
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="transcripts_getTranscript",
            description=(
                "Get a YouTube video transcript with segmentation to stay under token limits. "
                "Filters apply in order: startTime/endTime, lastMinutes, firstMinutes, "
                "startIndex/endIndex, maxSegments; each narrows the previous result. "
                "Use startIndex+maxSegments to page reliably through long videos, e.g. "
                "startIndex 0, 1000, 2000... with maxSegments 500."
            ),
            inputSchema={
                "type": "object",
                "properties": {"videoId": VIDEO_ID_PROPERTY, **SELECTION_PROPERTIES},
                "required": ["videoId"],
            },
        ),
        Tool(
            name="transcripts_searchTranscript",
            description="Find transcript segments containing a phrase (case-insensitive). Returns segment indexes usable with startIndex.",
            inputSchema={
                "type": "object",
                "properties": {
                    "videoId": VIDEO_ID_PROPERTY,
                    "query": {
                        "type": "string",
                        "description": "Text to search for",
                    },
                    "language": SELECTION_PROPERTIES["language"],
                },
                "required": ["videoId", "query"],
            },
        ),
        Tool(
            name="transcripts_getTimestampedTranscript",
            description="Same selection as transcripts_getTranscript, with a human-readable timestamp on every segment.",
            inputSchema={
                "type": "object",
                "properties": {"videoId": VIDEO_ID_PROPERTY, **SELECTION_PROPERTIES},
                "required": ["videoId"],
            },
        ),
    ]


def dispatch_tool(name: str, arguments: dict[str, Any], service: TranscriptService) -> dict:
    """Run a tool synchronously and return its JSON payload.

    Raises:
        ValueError: Unknown tool or bad arguments
        TranscriptError: Caption provider failures
    """
    video_id = arguments.get("videoId", "")
    language = arguments.get("language")

    if name == "transcripts_getTranscript":
        criteria = SelectionCriteria.from_params(arguments)
        return service.get_transcript(video_id, language=language, criteria=criteria)

    if name == "transcripts_searchTranscript":
        return service.search_transcript(video_id, arguments.get("query", ""), language=language)

    if name == "transcripts_getTimestampedTranscript":
        criteria = SelectionCriteria.from_params(arguments)
        return service.get_timestamped_transcript(video_id, language=language, criteria=criteria)

    raise ValueError(f"Unknown tool: {name}")


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    token = correlation_id_var.set(str(uuid.uuid4()))
    logger.debug(f"Tool call {name}: {json.dumps(arguments, default=str)}")

    try:
        # Caption fetch is blocking network I/O
        result = await asyncio.to_thread(
            dispatch_tool, name, arguments or {}, get_transcript_service()
        )
    except (TranscriptError, ValueError) as e:
        logger.warning(f"Tool {name} failed: {e}")
        raise ToolCallError(f"Error: {e}") from e
    finally:
        correlation_id_var.reset(token)

    return [TextContent(type="text", text=json.dumps(result, indent=2))]


async def main():
    """Run the MCP server over stdio."""
    # stdout is the protocol channel
    setup_logging(config.get("SERVICE_NAME"), config.get("LOG_LEVEL"), stream=sys.stderr)
    logger.info("Starting youtube-transcripts MCP server")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
