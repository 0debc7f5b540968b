"""Authentication core: PIN hashing, tokens and the auth gate."""
