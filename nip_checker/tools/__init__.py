"""
Registry Tools Package

All tools in this directory are auto-discovered by registry.py.
Each tool inherits from MCPTool and implements the required members.
"""

# Tools are auto-discovered, no explicit imports needed
