from __future__ import annotations

from ..common.validators import require_non_negative


class SubmissionReconciler:
    """Missing audio = required minus submitted, never below 0.

    Extra uploads are not carried over to other people or later runs.
    """

    def missing(self, required: int, submitted: int) -> int:
        required = require_non_negative(required, "required")
        submitted = require_non_negative(submitted, "submitted")
        return max(required - submitted, 0)
