"""HTTP API exposing problem selection to the browser UI."""
