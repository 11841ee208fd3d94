"""Autofill core: shared models and the fill orchestrator.

The Dispatcher lives in ``cv_autofill.automation.dispatcher`` and is not
re-exported here, since it pulls in every registered platform.
"""

from cv_autofill.automation.models import (
    DetectOutcome,
    FieldKind,
    FieldName,
    FieldResult,
    FieldStatus,
    FillContext,
    FillOutcome,
    FormType,
    LocatedFieldMap,
    ValueMap,
)
from cv_autofill.automation.orchestrator import (
    FillOrchestrator,
    FixedDelaySettle,
    SettleStrategy,
    WriteStep,
)

__all__ = [
    # Models
    "DetectOutcome",
    "FieldKind",
    "FieldName",
    "FieldResult",
    "FieldStatus",
    "FillContext",
    "FillOutcome",
    "FormType",
    "LocatedFieldMap",
    "ValueMap",
    # Orchestrator
    "FillOrchestrator",
    "FixedDelaySettle",
    "SettleStrategy",
    "WriteStep",
]
