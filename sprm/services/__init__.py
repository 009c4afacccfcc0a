"""Services with side effects: filesystem operations and operator prompts."""
