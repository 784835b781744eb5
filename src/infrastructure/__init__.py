"""Infrastructure: HTTP transport, Codeforces API client, page parsers."""
