"""Top-level package for the cheap flights bot.

Turns a chat message naming two cities into a short list of the
cheapest round-trip fares with links to the search results.
"""

__version__ = "0.1.0"
