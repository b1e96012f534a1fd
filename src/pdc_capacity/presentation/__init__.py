"""Text and tabular output of capacity views."""
