"""Password utilities for preparing seed data and bootstrap credentials."""

import sys
from getpass import getpass

import cyclopts

from notesmate.cli.console import get_console
from notesmate.infrastructure.auth.hasher import DEFAULT_ROUNDS, BcryptPasswordHasher

app = cyclopts.App(name="password", help="Password utilities")


@app.command(name="hash")
def hash_password(plaintext: str | None = None, rounds: int = DEFAULT_ROUNDS) -> None:
    """Print the bcrypt hash of a password.

    Prompts for the password when it is not given, so it stays out of shell history.

    Args:
        plaintext: Password to hash.
        rounds: bcrypt cost factor.
    """
    console = get_console()
    if plaintext is None:
        plaintext = getpass("Password: ")
        if plaintext != getpass("Repeat password: "):
            console.error("Passwords do not match")
            sys.exit(1)
    if not plaintext:
        console.error("Password must not be empty")
        sys.exit(1)

    console.print(BcryptPasswordHasher(rounds=rounds).hash(plaintext), highlight=False)
