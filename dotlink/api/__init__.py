"""dotlink API - command functions grouped by domain."""
