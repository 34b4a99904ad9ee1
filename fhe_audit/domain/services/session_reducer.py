"""Session reducer.

Pure transition function for the client session:

    reduce(state, event, settings) -> Transition(state, effects)

The reducer never talks to a collaborator. Whatever needs one (encrypt,
submit, wait for confirmation, refresh, clear a banner later) comes
back as an effect for the effect runner, which reports the outcome as
another event.

Upload flow:
    UploadRequested  -> VALIDATING -> ENCRYPTING   [EncryptScore]
    ScoreEncrypted   -> SUBMITTING                 [SubmitRecord]
    RecordSubmitted  -> CONFIRMING                 [AwaitConfirmation]
    UploadConfirmed  -> SUCCEEDED                  [RefreshRecords, ClearStatusAfter]
    UploadFailed     -> FAILED                     [ClearStatusAfter]
    StatusCleared    -> IDLE
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from fhe_audit.domain.errors.audit import AuditValidationError
from fhe_audit.domain.errors.upload import InvalidUploadTransitionError
from fhe_audit.domain.events.effects import (
    AwaitConfirmation,
    ClearStatusAfter,
    Effect,
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
    SessionEvent,
    StatusCleared,
    UploadConfirmed,
    UploadFailed,
    UploadFormClosed,
    UploadFormEdited,
    UploadFormOpened,
    UploadRequested,
)
from fhe_audit.domain.models.session_state import SessionSettings, SessionState
from fhe_audit.domain.models.upload import (
    HIDDEN_STATUS,
    MSG_CONNECT_WALLET,
    MSG_ENCRYPTING,
    MSG_SYSTEM_AVAILABLE,
    MSG_TRANSACTION_REJECTED,
    MSG_UPLOAD_FAILED,
    MSG_UPLOAD_SUCCEEDED,
    MSG_UPLOADING,
    TransactionStatus,
    UploadPhase,
)

UPLOADED_HISTORY_PREFIX = "Uploaded: "
DECRYPTED_HISTORY_PREFIX = "Decrypted: "


@dataclass(frozen=True)
class Transition:
    """Next state plus the effects to run, in order."""

    state: SessionState
    effects: tuple[Effect, ...] = ()


def _advance(state: SessionState, target: UploadPhase) -> SessionState:
    if target not in state.upload_phase.valid_transitions():
        raise InvalidUploadTransitionError(state.upload_phase, target)
    return replace(state, upload_phase=target)


def _with_status(state: SessionState, status: TransactionStatus) -> SessionState:
    return replace(state, status=status, status_token=state.status_token + 1)


def _flash(
    state: SessionState, status: TransactionStatus, delay: float, reset_form: bool = False
) -> Transition:
    """Show a banner and schedule its removal."""
    state = _with_status(state, status)
    return Transition(
        state,
        (ClearStatusAfter(delay_seconds=delay, token=state.status_token, reset_form=reset_form),),
    )


def _is_pending(state: SessionState, record_id: str) -> bool:
    return state.uploading and state.pending_record_id == record_id


def _on_form_opened(state: SessionState, event: UploadFormOpened, settings: SessionSettings) -> Transition:
    return Transition(replace(state, form_open=True))


def _on_form_closed(state: SessionState, event: UploadFormClosed, settings: SessionSettings) -> Transition:
    return Transition(replace(state, form_open=False))


def _on_form_edited(state: SessionState, event: UploadFormEdited, settings: SessionSettings) -> Transition:
    return Transition(replace(state, upload_form=event.form))


def _on_search(state: SessionState, event: SearchTermChanged, settings: SessionSettings) -> Transition:
    return Transition(replace(state, search_term=event.term))


def _on_risk_filter(state: SessionState, event: RiskFilterChanged, settings: SessionSettings) -> Transition:
    return Transition(replace(state, risk_filter=event.risk_filter))


def _on_selected(state: SessionState, event: RecordSelected, settings: SessionSettings) -> Transition:
    return Transition(replace(state, selected_record_id=event.record_id))


def _on_records_loaded(state: SessionState, event: RecordsLoaded, settings: SessionSettings) -> Transition:
    return Transition(replace(state, records=tuple(event.records)))


def _on_upload_requested(
    state: SessionState, event: UploadRequested, settings: SessionSettings
) -> Transition:
    # One upload per session
    if state.uploading:
        return Transition(state)

    if not event.connected or not event.submitter_address or event.record_id is None:
        return _flash(state, TransactionStatus.error(MSG_CONNECT_WALLET), settings.error_clear_seconds)

    state = _advance(state, UploadPhase.VALIDATING)
    form = state.upload_form
    try:
        form.validate()
    except AuditValidationError as e:
        state = _advance(state, UploadPhase.IDLE)
        return _flash(state, TransactionStatus.error(str(e)), settings.error_clear_seconds)

    state = _advance(state, UploadPhase.ENCRYPTING)
    state = replace(
        state,
        uploading=True,
        pending_record_id=event.record_id,
        pending_form=form,
    )
    state = _with_status(state, TransactionStatus.pending(MSG_ENCRYPTING))
    return Transition(
        state,
        (
            EncryptScore(
                record_id=event.record_id,
                submitter_address=event.submitter_address,
                score=form.vulnerability_score,
            ),
        ),
    )


def _on_score_encrypted(state: SessionState, event: ScoreEncrypted, settings: SessionSettings) -> Transition:
    if not _is_pending(state, event.record_id) or state.pending_form is None:
        return Transition(state)
    state = _advance(state, UploadPhase.SUBMITTING)
    return Transition(
        state,
        (SubmitRecord(record_id=event.record_id, form=state.pending_form, encrypted=event.encrypted),),
    )


def _on_record_submitted(state: SessionState, event: RecordSubmitted, settings: SessionSettings) -> Transition:
    if not _is_pending(state, event.record_id):
        return Transition(state)
    state = _advance(state, UploadPhase.CONFIRMING)
    state = _with_status(state, TransactionStatus.pending(MSG_UPLOADING))
    return Transition(state, (AwaitConfirmation(record_id=event.record_id),))


def _on_upload_confirmed(state: SessionState, event: UploadConfirmed, settings: SessionSettings) -> Transition:
    if not _is_pending(state, event.record_id):
        return Transition(state)
    name = state.pending_form.name if state.pending_form is not None else event.record_id
    state = _advance(state, UploadPhase.SUCCEEDED)
    state = replace(
        state,
        uploading=False,
        pending_record_id=None,
        pending_form=None,
        history=state.history.append(f"{UPLOADED_HISTORY_PREFIX}{name}"),
    )
    flash = _flash(
        state,
        TransactionStatus.success(MSG_UPLOAD_SUCCEEDED),
        settings.success_clear_seconds,
        reset_form=True,
    )
    return Transition(flash.state, (RefreshRecords(),) + flash.effects)


def _on_upload_failed(state: SessionState, event: UploadFailed, settings: SessionSettings) -> Transition:
    if not _is_pending(state, event.record_id):
        return Transition(state)
    message = MSG_TRANSACTION_REJECTED if event.user_rejected else MSG_UPLOAD_FAILED
    state = _advance(state, UploadPhase.FAILED)
    state = replace(state, uploading=False, pending_record_id=None, pending_form=None)
    return _flash(state, TransactionStatus.error(message), settings.error_clear_seconds)


def _on_status_cleared(state: SessionState, event: StatusCleared, settings: SessionSettings) -> Transition:
    # A newer banner replaced the one this timer was for
    if event.token != state.status_token:
        return Transition(state)
    # A success whose own clear was superseded still resets the form
    reset_form = event.reset_form or state.upload_phase is UploadPhase.SUCCEEDED
    state = replace(state, status=HIDDEN_STATUS)
    if state.upload_phase.is_terminal():
        state = _advance(state, UploadPhase.IDLE)
    if reset_form:
        state = replace(state, form_open=False, upload_form=settings.default_form)
    return Transition(state)


def _on_available(state: SessionState, event: AvailabilityConfirmed, settings: SessionSettings) -> Transition:
    return _flash(state, TransactionStatus.success(MSG_SYSTEM_AVAILABLE), settings.success_clear_seconds)


def _on_record_decrypted(state: SessionState, event: RecordDecrypted, settings: SessionSettings) -> Transition:
    state = replace(
        state, history=state.history.append(f"{DECRYPTED_HISTORY_PREFIX}{event.record_id}")
    )
    # Verified status comes from the next read, never from a local flip
    return Transition(state, (RefreshRecords(),))


_HANDLERS: dict[type, Callable[[SessionState, Any, SessionSettings], Transition]] = {
    UploadFormOpened: _on_form_opened,
    UploadFormClosed: _on_form_closed,
    UploadFormEdited: _on_form_edited,
    SearchTermChanged: _on_search,
    RiskFilterChanged: _on_risk_filter,
    RecordSelected: _on_selected,
    RecordsLoaded: _on_records_loaded,
    UploadRequested: _on_upload_requested,
    ScoreEncrypted: _on_score_encrypted,
    RecordSubmitted: _on_record_submitted,
    UploadConfirmed: _on_upload_confirmed,
    UploadFailed: _on_upload_failed,
    StatusCleared: _on_status_cleared,
    AvailabilityConfirmed: _on_available,
    RecordDecrypted: _on_record_decrypted,
}


def reduce(
    state: SessionState,
    event: SessionEvent,
    settings: SessionSettings | None = None,
) -> Transition:
    """Apply one event to the session state.

    Args:
        state: Current state.
        event: Event to apply.
        settings: Banner delays and form defaults; defaults if None.

    Returns:
        Transition with the next state and the effects to execute.

    Raises:
        TypeError: If the event type is unknown.
        InvalidUploadTransitionError: If the event sequence would break
            the upload state machine.
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unknown session event: {type(event).__name__}")
    return handler(state, event, settings or SessionSettings())
