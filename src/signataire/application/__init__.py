"""
Application layer: status channel, action guard, use cases, session.
"""
