"""Decorators: @attempt and @attempt_sync."""

from resultkit.decorators.attempt import attempt, attempt_sync

__all__ = [
    'attempt',
    'attempt_sync',
]
