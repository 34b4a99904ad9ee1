"""Application services - workflow orchestration.

Available services:
- RecordStoreService: Full-refresh loading of audit records
- EncryptionGateway: Plaintext score -> bound ciphertext and proof
- VerificationGateway: Handles -> cleartext, proof submitted via callback
- SessionStore: Reducer-driven state container
- EffectRunner: Executes reducer effects against collaborators
- UploadWorkflowService: Validate, encrypt, submit, confirm
- DecryptWorkflowService: Verified decryption of one record
- AuditClient: Facade for the presentation layer
"""

from fhe_audit.application.services.audit_client import AuditClient
from fhe_audit.application.services.decrypt_workflow_service import (
    DecryptWorkflowService,
)
from fhe_audit.application.services.effect_runner import EffectRunner
from fhe_audit.application.services.encryption_gateway import EncryptionGateway
from fhe_audit.application.services.record_store_service import RecordStoreService
from fhe_audit.application.services.session_store import SessionStore
from fhe_audit.application.services.upload_workflow_service import (
    UploadOutcome,
    UploadWorkflowService,
)
from fhe_audit.application.services.verification_gateway import (
    SubmitProof,
    VerificationGateway,
)

__all__: list[str] = [
    "AuditClient",
    "DecryptWorkflowService",
    "EffectRunner",
    "EncryptionGateway",
    "RecordStoreService",
    "SessionStore",
    "SubmitProof",
    "UploadOutcome",
    "UploadWorkflowService",
    "VerificationGateway",
]
