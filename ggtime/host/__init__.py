"""
Host Module - Conversation flow around sessions.

Platform-independent version of what the messaging extension does:
- Creates sessions from the share form
- Loads sessions from selected messages
- Applies the viewer's response and builds the replacement message
- Produces bubble captions and summary text
"""

from .catalog import POPULAR_GAMES, can_share, effective_game_name
from .controller import SessionController
from .layout import (
    MessageLayout,
    OutgoingMessage,
    build_layout,
    friendly_name,
    invitation_summary,
    participants_summary,
    update_summary,
)

__all__ = [
    "POPULAR_GAMES",
    "can_share",
    "effective_game_name",
    "SessionController",
    "MessageLayout",
    "OutgoingMessage",
    "build_layout",
    "friendly_name",
    "invitation_summary",
    "participants_summary",
    "update_summary",
]
