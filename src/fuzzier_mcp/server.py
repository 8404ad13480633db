from mcp.server.fastmcp import FastMCP

mcp = FastMCP("fuzzier")

from .tools import fuzzy_search, preview, settings  # noqa: F401, E402


def main() -> None:
    mcp.run()
