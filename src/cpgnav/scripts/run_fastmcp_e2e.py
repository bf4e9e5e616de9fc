"""Standalone FastMCP E2E runner to avoid pytest's event-loop interactions."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from fastmcp.client import Client as MCPClient
from fastmcp.exceptions import ToolError

logger = logging.getLogger("cpgnav.fastmcp_e2e")


@dataclass
class RunnerConfig:
    base_url: str
    timeout: float
    scenario: str
    api_token: str | None


async def _call_tool(
    client: MCPClient,
    name: str,
    payload: dict[str, Any],
    *,
    timeout: float,
) -> dict[str, Any]:
    result = await client.call_tool(name, payload, timeout=timeout)
    return result.structured_content


def _make_client(cfg: RunnerConfig) -> MCPClient:
    init_timeout = max(cfg.timeout / 3, 1.0)
    return MCPClient(
        cfg.base_url,
        timeout=cfg.timeout,
        init_timeout=init_timeout,
        auth=cfg.api_token,
    )


async def scenario_open_section(cfg: RunnerConfig) -> None:
    async with _make_client(cfg) as client:
        opened = await _call_tool(
            client,
            "open_cpg_section",
            {"cpg_number": "CPG 1.6", "reason": "e2e"},
            timeout=cfg.timeout,
        )
        if not opened.get("found") or opened["entry"]["id"] != "cpg-1.6":
            raise AssertionError(f"CPG 1.6 did not resolve to cpg-1.6: {opened}")
        if opened["navigation"]["page"] != 30:
            raise AssertionError("navigation target carries the wrong page")

        missing = await _call_tool(
            client,
            "open_cpg_section",
            {"cpg_number": "zzz-no-such-protocol"},
            timeout=cfg.timeout,
        )
        if missing.get("found"):
            raise AssertionError("nonsense query unexpectedly resolved")


async def scenario_search_counts(cfg: RunnerConfig) -> None:
    async with _make_client(cfg) as client:
        response = await _call_tool(client, "search_cpg", {"query": "cpr"}, timeout=cfg.timeout)
        ids = [item["id"] for item in response["results"]]
        if "cpg-2.1" not in ids:
            raise AssertionError(f"search for cpr missed cpg-2.1: {ids}")
        if response["total"] < len(ids):
            raise AssertionError("total must count every match, not only the preview")

        scoped = await _call_tool(
            client,
            "search_cpg",
            {"query": "overdose", "category": "Toxicology"},
            timeout=cfg.timeout,
        )
        if any(item["category"] != "Toxicology" for item in scoped["results"]):
            raise AssertionError("category filter leaked other categories")

        empty = await _call_tool(client, "search_cpg", {"query": "   "}, timeout=cfg.timeout)
        if empty["total"] != 0:
            raise AssertionError("blank query must not match the whole taxonomy")


async def scenario_categories(cfg: RunnerConfig) -> None:
    async with _make_client(cfg) as client:
        listing = await _call_tool(client, "list_cpg_categories", {}, timeout=cfg.timeout)
        names = [item["category"] for item in listing["categories"]]
        if names[:2] != ["Assessment", "Cardiac Arrest"]:
            raise AssertionError(f"categories not in first-seen order: {names}")


async def scenario_session(cfg: RunnerConfig) -> None:
    session_id = f"e2e-{uuid4().hex[:8]}"
    async with _make_client(cfg) as client:
        first = await _call_tool(
            client,
            "toggle_bookmark",
            {"entry_id": "cpg-2.1", "session_id": session_id},
            timeout=cfg.timeout,
        )
        second = await _call_tool(
            client,
            "toggle_bookmark",
            {"entry_id": "cpg-2.1", "session_id": session_id},
            timeout=cfg.timeout,
        )
        if (first["action"], second["action"]) != ("added", "removed"):
            raise AssertionError(f"bookmark toggle sequence wrong: {first} / {second}")

        for entry_id in ("cpg-1.1", "cpg-1.2", "cpg-1.1"):
            await _call_tool(
                client,
                "record_access",
                {"entry_id": entry_id, "session_id": session_id},
                timeout=cfg.timeout,
            )
        state = await _call_tool(
            client, "get_session_state", {"session_id": session_id}, timeout=cfg.timeout
        )
        recent_ids = [item["entry_id"] for item in state["recent"]]
        if recent_ids != ["cpg-1.1", "cpg-1.2"]:
            raise AssertionError(f"recent list not deduplicated newest-first: {recent_ids}")


async def scenario_unknown_entry(cfg: RunnerConfig) -> None:
    async with _make_client(cfg) as client:
        try:
            await _call_tool(
                client, "get_cpg_entry", {"entry_id": "cpg-99.9"}, timeout=cfg.timeout
            )
        except ToolError:
            return
        raise AssertionError("get_cpg_entry accepted an unknown id")


SCENARIOS = {
    "open-section": scenario_open_section,
    "search-counts": scenario_search_counts,
    "categories": scenario_categories,
    "session": scenario_session,
    "unknown-entry": scenario_unknown_entry,
}


async def run(cfg: RunnerConfig) -> None:
    scenario = SCENARIOS.get(cfg.scenario)
    if scenario is None:
        raise ValueError(f"Unknown scenario: {cfg.scenario}")
    await scenario(cfg)


def _default_mcp_client_host() -> str:
    return os.getenv("MCP_SERVICE_HOST") or os.getenv("MCP_HOST", "localhost")


def _default_mcp_base_url() -> str:
    host = _default_mcp_client_host()
    port = os.getenv("MCP_PORT", "3000")
    return f"http://{host}:{port}/mcp"


def parse_args(argv: list[str] | None = None) -> RunnerConfig:
    parser = argparse.ArgumentParser(description="Run FastMCP E2E scenarios outside pytest.")
    parser.add_argument("--base-url", default=_default_mcp_base_url())
    parser.add_argument(
        "--timeout",
        type=float,
        default=float(os.getenv("FASTMCP_E2E_TIMEOUT", "10")),
        help="Per-call timeout in seconds",
    )
    parser.add_argument(
        "--scenario",
        choices=sorted(SCENARIOS),
        default="open-section",
        help="Scenario to execute",
    )
    parser.add_argument(
        "--api-token",
        default=os.getenv("MCP_API_TOKEN"),
        help="Bearer token for MCP server authentication (defaults to MCP_API_TOKEN env).",
    )
    args = parser.parse_args(argv)
    return RunnerConfig(
        base_url=args.base_url.rstrip("/"),
        timeout=args.timeout,
        scenario=args.scenario,
        api_token=args.api_token or None,
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    cfg = parse_args(argv)
    try:
        asyncio.run(run(cfg))
    except Exception as exc:  # pragma: no cover - CLI diagnostics
        logger.error("FastMCP E2E scenario failed: %s", exc, exc_info=True)
        return 1
    logger.info("FastMCP E2E scenario '%s' succeeded", cfg.scenario)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
