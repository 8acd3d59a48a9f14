"""Global test fixtures."""

import os

import logfire

# Set the signing secret before any test module builds a Config.
# This must happen at module load time, not in a fixture.
os.environ.setdefault("NOTESMATE_AUTH__TOKEN__SECRET", "test-secret-for-unit-tests-min-32")
os.environ.setdefault("NOTESMATE_SERVER__ENVIRONMENT", "test")

# Keep instrumentation local during tests
logfire.configure(send_to_logfire=False, console=False)
