"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for suspicious but valid settings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    scoring = config_dict.get("scoring", {})
    if isinstance(scoring, dict):
        weights = scoring.get("weights", {}) or {}
        threshold = scoring.get("strong_match_threshold", 50)
        region_weight = weights.get("region", 50) if isinstance(weights, dict) else 50
        if (
            isinstance(region_weight, int)
            and isinstance(threshold, int)
            and region_weight < threshold
        ):
            warning_messages.append(
                f"Region weight ({region_weight}) is below strong_match_threshold "
                f"({threshold}); a same-region job alone will not count as a strong match"
            )

        if isinstance(weights, dict):
            zeroed = sorted(name for name, value in weights.items() if value == 0)
            if zeroed:
                warning_messages.append(
                    f"Weights set to 0 disable these factors: {', '.join(zeroed)}"
                )

    regions = config_dict.get("regions", {})
    neighbors = regions.get("neighbors") if isinstance(regions, dict) else None
    if isinstance(neighbors, dict):
        table = {
            str(region): {str(other) for other in (adjacent or [])}
            for region, adjacent in neighbors.items()
            if isinstance(adjacent, (list, type(None)))
        }
        for region, adjacent in sorted(table.items()):
            if region in adjacent:
                warning_messages.append(
                    f"Region {region} lists itself as a neighbor; the entry is ignored"
                )
            for other in sorted(adjacent - {region}):
                if region not in table.get(other, set()):
                    warning_messages.append(
                        f"Region {region} lists {other} as a neighbor but not vice versa; "
                        f"the edge is applied in both directions"
                    )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
