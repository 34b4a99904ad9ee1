"""Infrastructure layer - logging setup and in-memory collaborator stubs."""
