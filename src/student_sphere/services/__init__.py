"""Business logic services for the Student Sphere application."""

from .moderation import ModerationService

__all__ = ["ModerationService"]
