"""MCP server exposing diary entries over stdio."""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from .adapters.file_entries import VaultUnavailableError
from .config import Config, load_config
from .core.entries import Entry
from .workflows import get_recent_entries, get_store

logger = logging.getLogger(__name__)

SERVER_NAME = "themis"
TOOL_NAME = "getRecentEntries"
TOOL_DESCRIPTION = "fetches diary entries from the latest N number of days"


class EntryModel(BaseModel):
    """Wire form of a diary entry."""

    date: str = Field(description="Entry date in YYYY-MM-DD format")
    path: str = Field(description="Full path to the diary entry file")
    content: str = Field(description="Full markdown content of the entry")

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryModel":
        return cls(date=entry.date, path=entry.path, content=entry.content)


class EntriesOutput(BaseModel):
    """Result of a getRecentEntries call."""

    entries: list[EntryModel] = Field(description="List of diary entries, sorted newest first")
    count: int = Field(description="Total number of entries returned")


def create_server(config: Config) -> FastMCP:
    """Build the MCP server with the entry tool bound to config's vault."""
    store = get_store(config)
    server = FastMCP(SERVER_NAME)

    @server.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def get_recent_entries_tool(
        days: Annotated[int, Field(description="Number of days to retrieve (e.g., 7 for last week)")],
    ) -> EntriesOutput:
        try:
            entries = get_recent_entries(store, days, order=config.entry_order)
        except VaultUnavailableError as e:
            logger.error(f"{TOOL_NAME} failed: {e}")
            raise ToolError(f"failed to get entries: {e}") from e

        return EntriesOutput(
            entries=[EntryModel.from_entry(e) for e in entries],
            count=len(entries),
        )

    return server


def run_server(config: Config | None = None) -> None:
    """Run the MCP server on stdio. Blocks until the client disconnects."""
    config = config or load_config()
    # stdout carries the protocol, logs go to stderr
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.log_level,
    )

    server = create_server(config)
    logger.info(f"Starting Themis MCP server (vault: {config.vault_path})")
    server.run(transport="stdio")
