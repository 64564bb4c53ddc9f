"""Infrastructure layer: UserStore backends (MongoDB, in-memory)."""
