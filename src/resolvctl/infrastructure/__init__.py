"""Infrastructure layer: rendering a configuration to file text and disk."""
