# logic/validations.py
"""
Validation results and the state deciding which of them are displayed.

Visibility persists across submissions and survives navigation through the
query string. A decode whose era differs from the active era restores the
full default list for the new era, even if checks had been hidden before.
No Streamlit dependencies.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from utils.constants import QP_BEGINNING, QP_LIST, QP_OPEN
from utils.helpers import normalize_text, parse_bool
from utils.logger import get_logger
from .eras import default_validation_names

logger = get_logger("validations")


@dataclass(frozen=True)
class ValidationResult:
    name: str
    value: bool
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidationResult":
        return cls(
            name=normalize_text(data.get("name")),
            value=bool(data.get("value")),
            description=normalize_text(data.get("description")),
        )


@dataclass(frozen=True)
class ValidationReport:
    """Engine output for one transaction: the checks run and the era they belong to."""
    validations: Tuple[ValidationResult, ...] = ()
    era: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ValidationReport":
        data = data or {}
        items = data.get("validations") or []
        return cls(
            validations=tuple(
                v if isinstance(v, ValidationResult) else ValidationResult.from_dict(v) for v in items
            ),
            era=normalize_text(data.get("era")),
        )


def summarize(results: Iterable[ValidationResult]) -> Dict[str, int]:
    """Counts for the panel header."""
    results = list(results)
    passed = sum(1 for r in results if r.value)
    return {"total": len(results), "passed": passed, "failed": len(results) - passed}


def _first(value: Any) -> Any:
    # query-param mappings may hold lists
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


@dataclass
class ValidationVisibilityState:
    always_open: bool = False
    show_at_beginning: bool = True
    visible_names: Set[str] = field(default_factory=set)
    active_era: Optional[str] = None

    def on_era_changed(self, new_era, results_for_era: Iterable[ValidationResult] = ()) -> None:
        """Make ``new_era`` active and show its full default list."""
        era = new_era.value if hasattr(new_era, "value") else normalize_text(new_era)
        self.active_era = era
        self.visible_names = set(default_validation_names(era, results_for_era))
        logger.info("Era changed to %s; %d validations visible", era, len(self.visible_names))

    def reconcile(self, report: ValidationReport) -> List[ValidationResult]:
        """Apply a fresh engine report and return what should be displayed."""
        if report.era and report.era != self.active_era:
            self.on_era_changed(report.era, report.validations)
        return self.filter_for_display(report.validations)

    def toggle(self, name: str) -> None:
        if name in self.visible_names:
            self.visible_names.discard(name)
        else:
            self.visible_names.add(name)

    def set_visible(self, name: str, visible: bool) -> None:
        if visible:
            self.visible_names.add(name)
        else:
            self.visible_names.discard(name)

    def is_visible(self, name: str) -> bool:
        return name in self.visible_names

    def filter_for_display(self, all_results: Iterable[ValidationResult]) -> List[ValidationResult]:
        return [r for r in all_results if r.name in self.visible_names]

    def ordered_names(self, era=None) -> List[str]:
        """Visible names in the era's default order, then any extras alphabetically."""
        defaults = default_validation_names(era if era is not None else self.active_era)
        ordered = [n for n in defaults if n in self.visible_names]
        return ordered + sorted(n for n in self.visible_names if n not in defaults)

    def to_query_params(self) -> Dict[str, str]:
        return {
            QP_LIST: ",".join(self.ordered_names()),
            QP_OPEN: "true" if self.always_open else "false",
            QP_BEGINNING: "true" if self.show_at_beginning else "false",
        }

    @classmethod
    def from_query_params(cls, params: Optional[Mapping[str, Any]],
                          active_era: Optional[str] = None) -> "ValidationVisibilityState":
        """
        Rebuild the state from query parameters.

        A missing or empty list means no check is visible.
        """
        params = params or {}
        raw_list = normalize_text(_first(params.get(QP_LIST)))
        names = {n.strip() for n in raw_list.split(",") if n.strip()}
        return cls(
            always_open=parse_bool(_first(params.get(QP_OPEN)), default=False),
            show_at_beginning=parse_bool(_first(params.get(QP_BEGINNING)), default=True),
            visible_names=names,
            active_era=active_era,
        )
