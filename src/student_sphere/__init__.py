"""Student Sphere: student community forum API with admin moderation."""

__version__ = "0.1.0"
