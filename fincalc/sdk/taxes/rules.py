"""Tax rules loading.

Rules for each year live in YAML: bundled files in taxes/rules/YYYY.yaml,
optionally overridden by <config_dir>/tax-rules/YYYY.yaml. There is no
module-level cache; callers that load repeatedly own a TaxRulesCache.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from ..config import get_tax_rules_override_dir
from ..errors import InvalidConfigurationError
from .schemas import TaxRules

logger = logging.getLogger(__name__)

DEFAULT_TAX_YEAR = 2024


def _get_bundled_rules_dir() -> Path:
    """Directory of tax rules shipped with the package."""
    return Path(__file__).parent / "rules"


def _find_rules_file(year: int) -> Optional[Path]:
    """Override file if present, else the bundled file, else None."""
    for rules_dir in (get_tax_rules_override_dir(), _get_bundled_rules_dir()):
        candidate = rules_dir / f"{year}.yaml"
        if candidate.exists():
            return candidate
    return None


def get_available_years() -> List[int]:
    """Sorted list of years with tax rules available (descending)."""
    years = set()
    for rules_dir in (get_tax_rules_override_dir(), _get_bundled_rules_dir()):
        if rules_dir.exists():
            years.update(int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit())
    return sorted(years, reverse=True)


def parse_tax_rules(data: dict, source: str = "<dict>") -> TaxRules:
    """Validate a raw rules mapping.

    Raises:
        InvalidConfigurationError: If the rules fail validation
    """
    try:
        return TaxRules.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid tax rules in {source}:\n{e}") from e


def load_tax_rules(year: Union[int, str] = DEFAULT_TAX_YEAR,
                   cache: Optional["TaxRulesCache"] = None) -> TaxRules:
    """Load tax rules for a specific year.

    Args:
        year: Tax year (e.g., 2024 or "2024")
        cache: Optional cache owned by the caller

    Raises:
        FileNotFoundError: If no rules file exists for the year
        InvalidConfigurationError: If the rules file fails validation
    """
    if cache is not None:
        return cache.get(year)

    year = int(year)
    rules_file = _find_rules_file(year)
    if rules_file is None:
        raise FileNotFoundError(
            f"Tax rules not found for year {year}. Available: {get_available_years()}"
        )

    logger.debug(f"load_tax_rules: {year} from {rules_file}")
    with open(rules_file, "r") as f:
        data = yaml.safe_load(f) or {}

    return parse_tax_rules(data, source=str(rules_file))


class TaxRulesCache:
    """Per-year memo of parsed tax rules.

    Owned by the composition root (CLI invocation, MCP server) so tests can
    start from an empty cache.
    """

    def __init__(self):
        self._rules: Dict[int, TaxRules] = {}

    def get(self, year: Union[int, str]) -> TaxRules:
        year = int(year)
        if year not in self._rules:
            self._rules[year] = load_tax_rules(year)
        return self._rules[year]

    def clear(self) -> None:
        self._rules.clear()

    def __len__(self) -> int:
        return len(self._rules)
