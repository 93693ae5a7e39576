"""Channel adapters and command dispatch for Tokenline."""
