"""In-memory collection of tools indexed by their unique identifier."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from .tooling import Tool, ToolingType


class ToolLibrary:
    """Stores tools by id; adding a tool whose id already exists replaces it."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def add_tool(self, tool: Tool) -> bool:
        """Add or replace a tool.

        Returns True if the id was new, False if an existing tool was replaced
        or the tool is invalid (invalid tools are not stored).
        """
        if not tool.is_valid():
            return False
        existed = tool.id in self._tools
        self._tools[tool.id] = tool
        return not existed

    def remove_tool(self, tool_id: str) -> bool:
        """Remove a tool; returns False if no tool has that id."""
        return self._tools.pop(tool_id, None) is not None

    def get_tool(self, tool_id: str) -> Tool | None:
        return self._tools.get(tool_id)

    def has_tool(self, tool_id: str) -> bool:
        return tool_id in self._tools

    def all_tools(self) -> list[Tool]:
        return list(self._tools.values())

    def tools_by_type(self, tool_type: ToolingType) -> list[Tool]:
        return [tool for tool in self._tools.values() if tool.tool_type == tool_type]

    @property
    def tool_count(self) -> int:
        return len(self._tools)

    def is_empty(self) -> bool:
        return not self._tools

    def clear(self) -> None:
        self._tools.clear()

    def validate_duplicates(self) -> list[str]:
        """Ids that occur more than once in the library."""
        counts = Counter(self._tools)
        return [tool_id for tool_id, count in counts.items() if count > 1]

    def is_valid(self) -> bool:
        """True if there are no duplicate ids and every tool is valid."""
        if self.validate_duplicates():
            return False
        return all(tool.is_valid() for tool in self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(list(self._tools.values()))