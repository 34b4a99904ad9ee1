"""Unit tests for the pure session reducer.

Drives the upload state machine event by event and checks the effects
each transition requests, with no collaborator involved.
"""

from dataclasses import replace

import pytest

from fhe_audit.domain.errors.upload import InvalidUploadTransitionError
from fhe_audit.domain.events.effects import (
    AwaitConfirmation,
    ClearStatusAfter,
    EncryptScore,
    RefreshRecords,
    SubmitRecord,
)
from fhe_audit.domain.events.session import (
    AvailabilityConfirmed,
    RecordDecrypted,
    RecordsLoaded,
    RecordSelected,
    RecordSubmitted,
    RiskFilterChanged,
    ScoreEncrypted,
    SearchTermChanged,
    StatusCleared,
    UploadConfirmed,
    UploadFailed,
    UploadFormClosed,
    UploadFormEdited,
    UploadFormOpened,
    UploadRequested,
)
from fhe_audit.domain.models.crypto import EncryptedScore
from fhe_audit.domain.models.ledger import TransactionReceipt
from fhe_audit.domain.models.risk import RiskFilter
from fhe_audit.domain.models.session_state import SessionSettings, SessionState
from fhe_audit.domain.models.upload import (
    MSG_CONNECT_WALLET,
    MSG_ENCRYPTING,
    MSG_NAME_REQUIRED,
    MSG_SYSTEM_AVAILABLE,
    MSG_TRANSACTION_REJECTED,
    MSG_UPLOAD_FAILED,
    MSG_UPLOAD_SUCCEEDED,
    MSG_UPLOADING,
    StatusKind,
    UploadForm,
    UploadPhase,
)
from fhe_audit.domain.services.session_reducer import reduce

ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
SETTINGS = SessionSettings(success_clear_seconds=2.0, error_clear_seconds=3.0)
ENCRYPTED = EncryptedScore(ciphertext=b"\x01" * 32, proof=b"\x02" * 32)


def _request(record_id: str | None = "audit-1", connected: bool = True) -> UploadRequested:
    return UploadRequested(
        record_id=record_id,
        connected=connected,
        submitter_address=ADDRESS if connected else None,
    )


@pytest.fixture
def ready_state() -> SessionState:
    """Session with a filled-in, open upload form."""
    return SessionState(
        upload_form=UploadForm.create(name="demo", description="d", vulnerability_score=8),
        form_open=True,
    )


def _encrypting(state: SessionState) -> SessionState:
    return reduce(state, _request(), SETTINGS).state


def _confirming(state: SessionState) -> SessionState:
    state = _encrypting(state)
    state = reduce(state, ScoreEncrypted(record_id="audit-1", encrypted=ENCRYPTED), SETTINGS).state
    return reduce(
        state, RecordSubmitted(record_id="audit-1", transaction_hash="0xabc"), SETTINGS
    ).state


class TestUiEvents:
    """Tests for events that only touch view state."""

    def test_form_open_close(self) -> None:
        state = reduce(SessionState(), UploadFormOpened()).state
        assert state.form_open is True
        assert reduce(state, UploadFormClosed()).state.form_open is False

    def test_form_edit(self) -> None:
        form = UploadForm.create(name="x")

        transition = reduce(SessionState(), UploadFormEdited(form=form))

        assert transition.state.upload_form == form
        assert transition.effects == ()

    def test_search_and_filter(self) -> None:
        state = reduce(SessionState(), SearchTermChanged(term="vault")).state
        state = reduce(state, RiskFilterChanged(risk_filter=RiskFilter.HIGH)).state

        assert state.search_term == "vault"
        assert state.risk_filter is RiskFilter.HIGH

    def test_records_loaded_replaces_set(self, make_record) -> None:
        state = SessionState(records=(make_record(record_id="old"),))

        state = reduce(state, RecordsLoaded(records=(make_record(record_id="new"),))).state

        assert [r.id for r in state.records] == ["new"]

    def test_record_selection_resolves_against_records(self, make_record) -> None:
        state = SessionState(records=(make_record(record_id="audit-1"),))

        state = reduce(state, RecordSelected(record_id="audit-1")).state

        assert state.selected_record is not None
        assert state.selected_record.id == "audit-1"
        assert reduce(state, RecordSelected(record_id="gone")).state.selected_record is None


class TestUploadRequested:
    """Tests for the start of an upload."""

    def test_not_connected(self, ready_state: SessionState) -> None:
        """Test that no wallet gives an error banner and no work."""
        transition = reduce(ready_state, _request(connected=False), SETTINGS)

        assert transition.state.status.message == MSG_CONNECT_WALLET
        assert transition.state.status.kind is StatusKind.ERROR
        assert transition.state.upload_phase is UploadPhase.IDLE
        assert transition.effects == (
            ClearStatusAfter(delay_seconds=3.0, token=transition.state.status_token),
        )

    def test_blank_name_stays_idle(self) -> None:
        """Test that validation failure requests no encryption."""
        state = SessionState(upload_form=UploadForm.create(name="  "))

        transition = reduce(state, _request(), SETTINGS)

        assert transition.state.upload_phase is UploadPhase.IDLE
        assert transition.state.uploading is False
        assert transition.state.status.message == MSG_NAME_REQUIRED
        assert not any(isinstance(e, EncryptScore) for e in transition.effects)

    def test_valid_form_starts_encryption(self, ready_state: SessionState) -> None:
        transition = reduce(ready_state, _request(), SETTINGS)

        state = transition.state
        assert state.upload_phase is UploadPhase.ENCRYPTING
        assert state.uploading is True
        assert state.pending_record_id == "audit-1"
        assert state.pending_form == ready_state.upload_form
        assert state.status.message == MSG_ENCRYPTING
        assert state.status.kind is StatusKind.PENDING
        assert transition.effects == (
            EncryptScore(record_id="audit-1", submitter_address=ADDRESS, score=8),
        )

    def test_second_request_while_uploading_is_ignored(self, ready_state: SessionState) -> None:
        state = _encrypting(ready_state)

        transition = reduce(state, _request(record_id="audit-2"), SETTINGS)

        assert transition.state is state
        assert transition.effects == ()


class TestUploadProgress:
    """Tests for the encrypt, submit and confirm steps."""

    def test_encrypted_score_is_submitted(self, ready_state: SessionState) -> None:
        state = _encrypting(ready_state)

        transition = reduce(
            state, ScoreEncrypted(record_id="audit-1", encrypted=ENCRYPTED), SETTINGS
        )

        assert transition.state.upload_phase is UploadPhase.SUBMITTING
        assert transition.effects == (
            SubmitRecord(record_id="audit-1", form=ready_state.upload_form, encrypted=ENCRYPTED),
        )

    def test_submitted_record_awaits_confirmation(self, ready_state: SessionState) -> None:
        state = _confirming(ready_state)

        assert state.upload_phase is UploadPhase.CONFIRMING
        assert state.status.message == MSG_UPLOADING

    def test_confirmed_upload(self, ready_state: SessionState) -> None:
        """Test that history is appended and records refreshed on confirmation."""
        state = _confirming(ready_state)

        transition = reduce(
            state,
            UploadConfirmed(record_id="audit-1", receipt=TransactionReceipt("0xabc", 1)),
            SETTINGS,
        )

        state = transition.state
        assert state.upload_phase is UploadPhase.SUCCEEDED
        assert state.uploading is False
        assert state.status.message == MSG_UPLOAD_SUCCEEDED
        assert [e.text for e in state.history.entries] == ["Uploaded: demo"]
        assert transition.effects == (
            RefreshRecords(),
            ClearStatusAfter(delay_seconds=2.0, token=state.status_token, reset_form=True),
        )

    def test_history_not_written_before_confirmation(self, ready_state: SessionState) -> None:
        assert len(_confirming(ready_state).history) == 0

    @pytest.mark.parametrize(
        ("user_rejected", "message"),
        [(True, MSG_TRANSACTION_REJECTED), (False, MSG_UPLOAD_FAILED)],
    )
    def test_failure_message(
        self, ready_state: SessionState, user_rejected: bool, message: str
    ) -> None:
        state = _encrypting(ready_state)

        transition = reduce(
            state, UploadFailed(record_id="audit-1", user_rejected=user_rejected), SETTINGS
        )

        assert transition.state.upload_phase is UploadPhase.FAILED
        assert transition.state.uploading is False
        assert transition.state.status.message == message
        assert len(transition.state.history) == 0
        assert transition.effects == (
            ClearStatusAfter(delay_seconds=3.0, token=transition.state.status_token),
        )

    def test_events_for_other_uploads_are_ignored(self, ready_state: SessionState) -> None:
        state = _encrypting(ready_state)

        transition = reduce(state, UploadFailed(record_id="audit-99"), SETTINGS)

        assert transition.state is state

    def test_illegal_phase_jump_raises(self, ready_state: SessionState) -> None:
        """Test that a broken event order trips the transition matrix."""
        state = replace(_encrypting(ready_state), upload_phase=UploadPhase.IDLE)

        with pytest.raises(InvalidUploadTransitionError):
            reduce(state, ScoreEncrypted(record_id="audit-1", encrypted=ENCRYPTED), SETTINGS)


class TestStatusCleared:
    """Tests for banner clearing and stale timers."""

    def test_success_clear_resets_form(self, ready_state: SessionState) -> None:
        state = _confirming(ready_state)
        state = reduce(
            state,
            UploadConfirmed(record_id="audit-1", receipt=TransactionReceipt("0xabc")),
            SETTINGS,
        ).state

        state = reduce(
            state, StatusCleared(token=state.status_token, reset_form=True), SETTINGS
        ).state

        assert state.status.visible is False
        assert state.upload_phase is UploadPhase.IDLE
        assert state.form_open is False
        assert state.upload_form == SETTINGS.default_form

    def test_superseded_success_clear_still_resets_form(self, ready_state: SessionState) -> None:
        """Test that a banner shown over the success banner resets the form when it clears."""
        state = _confirming(ready_state)
        state = reduce(
            state,
            UploadConfirmed(record_id="audit-1", receipt=TransactionReceipt("0xabc")),
            SETTINGS,
        ).state
        success_token = state.status_token
        state = reduce(state, AvailabilityConfirmed(), SETTINGS).state

        state = reduce(
            state, StatusCleared(token=success_token, reset_form=True), SETTINGS
        ).state
        assert state.form_open is True

        state = reduce(state, StatusCleared(token=state.status_token), SETTINGS).state

        assert state.upload_phase is UploadPhase.IDLE
        assert state.form_open is False
        assert state.upload_form == SETTINGS.default_form

    def test_request_without_id_asks_for_wallet(self, ready_state: SessionState) -> None:
        transition = reduce(ready_state, _request(record_id=None), SETTINGS)

        assert transition.state.status.message == MSG_CONNECT_WALLET
        assert transition.state.uploading is False
        assert transition.state.pending_record_id is None

    def test_error_clear_keeps_form(self, ready_state: SessionState) -> None:
        state = reduce(ready_state, _request(connected=False), SETTINGS).state

        state = reduce(state, StatusCleared(token=state.status_token), SETTINGS).state

        assert state.status.visible is False
        assert state.upload_form == ready_state.upload_form
        assert state.form_open is True

    def test_stale_token_is_ignored(self, ready_state: SessionState) -> None:
        """Test that an old timer cannot hide a newer banner."""
        stale = reduce(ready_state, _request(connected=False), SETTINGS).state
        stale_token = stale.status_token
        newer = reduce(stale, AvailabilityConfirmed(), SETTINGS).state

        transition = reduce(newer, StatusCleared(token=stale_token), SETTINGS)

        assert transition.state.status.message == MSG_SYSTEM_AVAILABLE
        assert transition.state.status.visible is True

    def test_new_upload_allowed_before_clear(self, ready_state: SessionState) -> None:
        state = reduce(
            _encrypting(ready_state), UploadFailed(record_id="audit-1"), SETTINGS
        ).state

        transition = reduce(state, _request(record_id="audit-2"), SETTINGS)

        assert transition.state.upload_phase is UploadPhase.ENCRYPTING
        assert transition.state.pending_record_id == "audit-2"


class TestOtherEvents:
    def test_availability_banner(self) -> None:
        transition = reduce(SessionState(), AvailabilityConfirmed(), SETTINGS)

        assert transition.state.status.kind is StatusKind.SUCCESS
        assert transition.state.status.message == MSG_SYSTEM_AVAILABLE
        assert isinstance(transition.effects[0], ClearStatusAfter)
        assert transition.effects[0].delay_seconds == 2.0

    def test_record_decrypted(self) -> None:
        """Test that decrypt history is written and records re-read."""
        transition = reduce(SessionState(), RecordDecrypted(record_id="audit-7"), SETTINGS)

        assert [e.text for e in transition.state.history.entries] == ["Decrypted: audit-7"]
        assert transition.effects == (RefreshRecords(),)

    def test_unknown_event_raises(self) -> None:
        with pytest.raises(TypeError, match="Unknown session event"):
            reduce(SessionState(), object())  # type: ignore[arg-type]

    def test_awaited_confirmation_effect_targets_record(self, ready_state: SessionState) -> None:
        state = _encrypting(ready_state)
        state = reduce(state, ScoreEncrypted(record_id="audit-1", encrypted=ENCRYPTED), SETTINGS).state

        transition = reduce(
            state, RecordSubmitted(record_id="audit-1", transaction_hash="0xabc"), SETTINGS
        )

        assert transition.effects == (AwaitConfirmation(record_id="audit-1"),)
