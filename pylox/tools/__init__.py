"""Build-time tools for pylox."""
