"""Level layout: tiles, distance analysis, and map generators."""
