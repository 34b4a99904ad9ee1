"""Application layer - ports for external collaborators and the workflows."""
