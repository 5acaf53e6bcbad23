import pytest

from ensemble_submission.submissions.reconciler import SubmissionReconciler


def test_missing_is_shortfall():
    assert SubmissionReconciler().missing(5, 2) == 3


def test_over_submission_is_zero_not_credit():
    assert SubmissionReconciler().missing(3, 5) == 0


def test_missing_never_negative():
    rec = SubmissionReconciler()
    for required in range(6):
        for submitted in range(6):
            assert rec.missing(required, submitted) == max(required - submitted, 0)


def test_negative_input_is_rejected():
    with pytest.raises(ValueError):
        SubmissionReconciler().missing(-1, 0)
