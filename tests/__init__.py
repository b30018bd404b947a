"""Application-level tests: settings and the app factory."""
