"""Entry-point adapters: CLIs, payloads and interfaces."""
