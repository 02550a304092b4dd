"""Error taxonomy for the forecasting session.

Every error carries the message that is shown to the operator, so the
component that catches it can copy ``str(exc)`` straight into its state.
"""

from __future__ import annotations


class MediPredictError(Exception):
    """Base class for all session-level failures."""


class ValidationError(MediPredictError):
    """A required input is missing or not numeric. Never sent over the wire."""


class HistoryFetchError(MediPredictError):
    """The historical averages could not be loaded. Advisory only."""


class PredictionError(MediPredictError):
    """The forecast request failed; the operator may resubmit."""


class DataConsistencyError(MediPredictError):
    """The prediction payload disagrees with what was requested."""
