"""Single-page portfolio site builder."""
