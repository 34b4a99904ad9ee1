"""
FHE Code Audit - encrypted audit record client core

Lets users submit code audit records whose vulnerability score is
protected under fully-homomorphic encryption, request ledger-verified
decryption of that score, and derive risk statistics over the record set.

Layers:
- domain: records, statistics, filters, the session reducer
- application: ports for external collaborators and the workflows
- infrastructure: structured logging and in-memory collaborator stubs
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
