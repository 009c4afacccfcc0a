"""Core types shared by the sprm services and the CLI driver."""
