"""
Live broadcast for the interview request board.

Provides:
- BroadcastService for publishing record events
- RecruiterConsumer for WebSocket sessions joined to the recruiters group
"""
