"""
GG Time - Gaming session invitations carried inside chat messages.

Someone proposes a game and a start time; friends answer Join, Maybe,
Can't Join, or Join at a different time. The package provides:
- The session value model and its roster queries
- A URL payload codec so every message carries the whole session
- The conversation-side flow (create, respond, message captions)
- A stateless HTTP API and a developer CLI over the same flow
"""

__version__ = "0.1.0"
