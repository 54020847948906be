"""Messages shared by the project-wide HTTP plumbing."""

INTERNAL_SERVER_ERROR = "Internal server error: {0}"
