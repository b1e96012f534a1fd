"""Use cases that assemble domain results for the presentation layers."""
