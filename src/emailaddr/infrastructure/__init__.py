"""Infrastructure layer: wire codec and logging adapters."""
