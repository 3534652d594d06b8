"""ContentForge: MCP tools for publishing articles to a headless CMS."""

__version__ = "0.2.0"
