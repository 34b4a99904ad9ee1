"""Unit tests for the upload state machine and form model."""

import pytest

from fhe_audit.domain.errors.audit import AuditValidationError
from fhe_audit.domain.models.upload import (
    MSG_NAME_REQUIRED,
    UPLOAD_TRANSITION_MATRIX,
    StatusKind,
    TransactionStatus,
    UploadForm,
    UploadPhase,
    clamp_score,
)


class TestUploadPhase:
    """Tests for the upload transition matrix."""

    def test_every_phase_has_transitions(self) -> None:
        assert set(UPLOAD_TRANSITION_MATRIX) == set(UploadPhase)

    def test_happy_path_is_allowed(self) -> None:
        path = [
            UploadPhase.IDLE,
            UploadPhase.VALIDATING,
            UploadPhase.ENCRYPTING,
            UploadPhase.SUBMITTING,
            UploadPhase.CONFIRMING,
            UploadPhase.SUCCEEDED,
            UploadPhase.IDLE,
        ]
        for current, target in zip(path, path[1:]):
            assert target in current.valid_transitions()

    def test_in_flight_phases_can_fail(self) -> None:
        for phase in (UploadPhase.ENCRYPTING, UploadPhase.SUBMITTING, UploadPhase.CONFIRMING):
            assert phase.is_in_flight()
            assert UploadPhase.FAILED in phase.valid_transitions()

    def test_idle_cannot_skip_validation(self) -> None:
        assert UploadPhase.ENCRYPTING not in UploadPhase.IDLE.valid_transitions()

    def test_terminal_phases(self) -> None:
        assert UploadPhase.SUCCEEDED.is_terminal()
        assert UploadPhase.FAILED.is_terminal()
        assert not UploadPhase.IDLE.is_terminal()


class TestUploadForm:
    """Tests for UploadForm."""

    @pytest.mark.parametrize(("raw", "clamped"), [(0, 1), (1, 1), (7, 7), (10, 10), (42, 10)])
    def test_clamp_score(self, raw: int, clamped: int) -> None:
        assert clamp_score(raw) == clamped

    def test_create_clamps_scores(self) -> None:
        form = UploadForm.create(name="demo", complexity=-1, vulnerability_score=99)

        assert form.complexity == 1
        assert form.vulnerability_score == 10

    def test_constructor_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            UploadForm(vulnerability_score=11)

    def test_with_changes_clamps_and_keeps_other_fields(self) -> None:
        form = UploadForm.create(name="demo", description="d")

        updated = form.with_changes(vulnerability_score=12)

        assert updated.vulnerability_score == 10
        assert updated.name == "demo"
        assert form.vulnerability_score == 5

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_fails_validation(self, name: str) -> None:
        with pytest.raises(AuditValidationError) as exc_info:
            UploadForm.create(name=name).validate()

        assert exc_info.value.field == "name"
        assert str(exc_info.value) == MSG_NAME_REQUIRED

    def test_named_form_validates(self) -> None:
        UploadForm.create(name="demo").validate()


class TestTransactionStatus:
    def test_constructors(self) -> None:
        assert TransactionStatus.pending("x").kind is StatusKind.PENDING
        assert TransactionStatus.success("x").kind is StatusKind.SUCCESS
        error = TransactionStatus.error("x")
        assert error.kind is StatusKind.ERROR
        assert error.visible is True
        assert error.message == "x"
