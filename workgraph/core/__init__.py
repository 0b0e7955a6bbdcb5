"""Core building blocks: item stores and relationship inference."""
