"""Journal CLI - append timestamped lines to a daily journal."""
