"""End-to-end MCP stdio integration test against ``python -m cyberdocs``."""

from __future__ import annotations

import base64
import sys
from pathlib import Path
from typing import Any

import anyio
import pytest

from cyberdocs.domain.documents import DOCX_MIME_TYPE


def _tool_text(result: Any) -> str:
    content = getattr(result, "content", [])
    assert content, "Tool result did not include content"
    text = getattr(content[0], "text", None)
    assert isinstance(text, str), "Tool result did not include text content"
    return text


async def _exercise_stdio_server(docs_root: Path) -> None:
    from mcp import ClientSession, StdioServerParameters
    from mcp.client.stdio import stdio_client
    from mcp.shared.exceptions import McpError

    original = (docs_root / "spec" / "spec-1.docx").read_bytes()
    (docs_root / "spec" / "spec-2.docx").unlink()

    server_params = StdioServerParameters(
        command=sys.executable,
        args=["-m", "cyberdocs", "-c", str(docs_root / "cyberdocs.toml"), "serve"],
        cwd=str(docs_root),
    )

    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()

            resources = await session.list_resources()
            uris = {str(resource.uri) for resource in resources.resources}
            assert uris == {
                "resource://cyber/spec-1.docx",
                "resource://cyber/spec-1.md",
                "resource://cyber/spec-2.docx",
                "resource://cyber/spec-2.md",
            }

            tools = await session.list_tools()
            assert {tool.name for tool in tools.tools} == {"docs.getSpec1", "docs.getSpec2"}

            blob_result = await session.read_resource("resource://cyber/spec-1.docx")
            blob = blob_result.contents[0]
            assert blob.mimeType == DOCX_MIME_TYPE
            assert str(blob.uri) == "resource://cyber/spec-1.docx"
            assert base64.b64decode(blob.blob) == original

            text_result = await session.read_resource("resource://cyber/spec-1.md")
            assert text_result.contents[0].mimeType == "text/markdown"
            assert text_result.contents[0].text.startswith("# Cyber MCP API Spec")

            with pytest.raises(McpError):
                await session.read_resource("resource://cyber/spec-2.docx")

            tool_result = await session.call_tool("docs.getSpec1", arguments={})
            assert not tool_result.isError
            text = _tool_text(tool_result)
            assert text.startswith("### API Spec #1")
            assert text.rstrip("\n").endswith("resource://cyber/spec-1.docx")


def test_stdio_transport_end_to_end(docs_root: Path) -> None:
    (docs_root / "cyberdocs.toml").write_text('[server]\nnamespace = "cyber"\n', encoding="utf-8")
    anyio.run(_exercise_stdio_server, docs_root)
