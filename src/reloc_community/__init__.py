"""Reloc community backend: posts, comments, messaging and notifications."""
