"""
Variant selection.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core.exceptions import BuildIntegrityViolationError
from ...core.logging import get_logger
from ...matchers.base import VariantPredicate
from ...models.build_output import Variant

logger = get_logger(__name__)


class VariantSelector:
    """Picks the one variant of a build whose targeting fits the device."""

    def __init__(self, predicate: VariantPredicate) -> None:
        """Initialize the selector.

        Args:
            predicate: Combined variant-level predicate for the device
        """
        self.predicate = predicate

    def select(self, variants: Sequence[Variant]) -> Variant | None:
        """Select the variant matching the device.

        Args:
            variants: Variants of one build output, in declared order

        Returns:
            The matching variant, or None if the device is outside the
            build's coverage.

        Raises:
            BuildIntegrityViolationError: If more than one variant matches.
        """
        matching = [variant for variant in variants if self.predicate(variant.targeting)]

        if not matching:
            logger.debug("No variant matches device", variants_checked=len(variants))
            return None

        if len(matching) > 1:
            numbers = [variant.variant_number for variant in matching]
            logger.error("Multiple variants match device", matching_variants=numbers)
            raise BuildIntegrityViolationError(
                message=f"Expected at most one matching variant but found {len(matching)}.",
                matching_variants=numbers,
            )

        logger.debug("Selected variant", variant_number=matching[0].variant_number)
        return matching[0]
