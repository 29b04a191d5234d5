"""HTTP API for the Reloc community backend."""
