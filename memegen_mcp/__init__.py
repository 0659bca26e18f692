"""
Meme generator MCP tool server: template discovery, content-driven template
suggestions, quote extraction, and memegen.link rendering.
"""

__version__ = "0.1.0"
