"""Bootstrap wiring for the audit client."""

from __future__ import annotations

from dataclasses import dataclass

from fhe_audit.application.ports.decryption_oracle import DecryptionOracleProtocol
from fhe_audit.application.ports.encryption_oracle import EncryptionOracleProtocol
from fhe_audit.application.ports.identity_provider import IdentityProviderProtocol
from fhe_audit.application.ports.ledger_reader import LedgerReaderProtocol
from fhe_audit.application.ports.ledger_writer import LedgerWriterProtocol
from fhe_audit.application.services.audit_client import AuditClient
from fhe_audit.application.services.decrypt_workflow_service import (
    DecryptWorkflowService,
)
from fhe_audit.application.services.effect_runner import EffectRunner
from fhe_audit.application.services.encryption_gateway import EncryptionGateway
from fhe_audit.application.services.record_store_service import RecordStoreService
from fhe_audit.application.services.session_store import SessionStore
from fhe_audit.application.services.upload_workflow_service import (
    UploadWorkflowService,
)
from fhe_audit.application.services.verification_gateway import VerificationGateway
from fhe_audit.config.audit_config import AuditClientConfig
from fhe_audit.domain.services.audit_ids import DEFAULT_ID_GENERATOR, AuditIdGenerator
from fhe_audit.infrastructure.observability.logging import get_logger_for_service
from fhe_audit.infrastructure.stubs.fhe_oracle_stub import FheOracleStub
from fhe_audit.infrastructure.stubs.identity_provider_stub import IdentityProviderStub
from fhe_audit.infrastructure.stubs.ledger_stub import LedgerStub

logger = get_logger_for_service("bootstrap", component="bootstrap")


def build_audit_client(
    reader: LedgerReaderProtocol,
    writer: LedgerWriterProtocol,
    encryption_oracle: EncryptionOracleProtocol,
    decryption_oracle: DecryptionOracleProtocol,
    identity: IdentityProviderProtocol,
    config: AuditClientConfig | None = None,
    id_generator: AuditIdGenerator = DEFAULT_ID_GENERATOR,
) -> AuditClient:
    """Wire an AuditClient over the given collaborators.

    Args:
        reader: Ledger read port.
        writer: Ledger write port.
        encryption_oracle: FHE encryption oracle.
        decryption_oracle: FHE decryption oracle.
        identity: Wallet connection state.
        config: Client configuration; read from the environment if None.
        id_generator: Source of new record ids.

    Returns:
        A ready AuditClient with an empty session.
    """
    config = config or AuditClientConfig.from_environment()

    store = SessionStore(settings=config.session_settings())
    record_store = RecordStoreService(reader)
    encryption = EncryptionGateway(encryption_oracle)
    verification = VerificationGateway(decryption_oracle)
    runner = EffectRunner(store, record_store, encryption, writer)

    upload_workflow = UploadWorkflowService(store, runner, identity, id_generator)
    decrypt_workflow = DecryptWorkflowService(
        store, runner, record_store, reader, writer, verification, identity
    )

    logger.debug("audit_client_wired", history_display_limit=config.history_display_limit)
    return AuditClient(
        store=store,
        runner=runner,
        reader=reader,
        encryption=encryption,
        upload_workflow=upload_workflow,
        decrypt_workflow=decrypt_workflow,
        identity=identity,
        config=config,
    )


@dataclass
class InMemoryAuditEnvironment:
    """A client wired to in-memory stubs, with the stubs exposed."""

    client: AuditClient
    ledger: LedgerStub
    fhe: FheOracleStub
    identity: IdentityProviderStub


def build_in_memory_audit_client(
    config: AuditClientConfig | None = None,
    id_generator: AuditIdGenerator = DEFAULT_ID_GENERATOR,
) -> InMemoryAuditEnvironment:
    """Wire an AuditClient over fresh in-memory stubs.

    For demos and tests; nothing leaves the process.
    """
    fhe = FheOracleStub()
    ledger = LedgerStub(fhe=fhe)
    identity = IdentityProviderStub()
    client = build_audit_client(
        reader=ledger,
        writer=ledger,
        encryption_oracle=fhe,
        decryption_oracle=fhe,
        identity=identity,
        config=config,
        id_generator=id_generator,
    )
    logger.info("in_memory_audit_client_built")
    return InMemoryAuditEnvironment(client=client, ledger=ledger, fhe=fhe, identity=identity)
