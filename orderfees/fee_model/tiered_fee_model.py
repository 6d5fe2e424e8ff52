from decimal import Decimal, InvalidOperation
from typing import List, Tuple, Union, Dict, Any, Optional

from orderfees.core.exceptions import FeeConfigurationError
from orderfees.securities import to_decimal
from .maker_taker_fee_model import MakerTakerFeeModel


Tier = Tuple[Decimal, Decimal, Decimal]

# (30 day volume threshold in USD, maker rate, taker rate)
BINANCE_SPOT_TIERS = [
    (0, '0.001', '0.001'),
    (1000000, '0.0009', '0.001'),
    (5000000, '0.0008', '0.001'),
    (20000000, '0.00042', '0.0006'),
    (100000000, '0.00042', '0.00054'),
    (150000000, '0.00036', '0.00048'),
    (400000000, '0.0003', '0.00042'),
    (800000000, '0.00024', '0.00036'),
    (2000000000, '0.00018', '0.0003'),
    (4000000000, '0.00012', '0.00024'),
]


class TieredFeeModel(MakerTakerFeeModel):
    """
    Maker/taker fee model whose rates come from a volume tier schedule.

    The tier is resolved once from `volume` when the model is built. A
    trader that moves to another tier gets a new model instance, so a
    model never changes its rates while it is shared.
    """

    def __init__(
        self,
        tiers: Optional[List[Tuple[Any, Any, Any]]] = None,
        volume: Union[int, float, str, Decimal] = 0
    ):
        """
        Initialize the tiered fee model.

        Parameters
        ----------
        tiers : List[Tuple[float, float, float]], optional
            List of (volume_threshold, maker_rate, taker_rate) tuples.
            Defaults to the Binance spot VIP schedule.
        volume : float, optional
            Trailing 30 day trading volume used to pick the tier

        Raises
        ------
        FeeConfigurationError
            If the tier table is malformed or the volume is negative
        InvalidFeeRateError
            If a tier carries a negative rate
        """
        volume_decimal = self._to_volume(volume, "Volume")

        self.fee_tiers = self._validate_and_sort_tiers(tiers if tiers is not None else BINANCE_SPOT_TIERS)
        self.volume = volume_decimal
        self.tier = self.tier_for_volume(self.fee_tiers, volume_decimal)

        _, maker_rate, taker_rate = self.fee_tiers[self.tier]
        super().__init__(maker_rate, taker_rate)

    @classmethod
    def _validate_and_sort_tiers(cls, tiers: List[Tuple[Any, Any, Any]]) -> List[Tier]:
        """
        Validate and sort volume tiers.

        Parameters
        ----------
        tiers : List[Tuple[float, float, float]]
            Raw tier data (volume_threshold, maker_rate, taker_rate)

        Returns
        -------
        List[Tuple[Decimal, Decimal, Decimal]]
            Validated tiers sorted by volume threshold
        """
        if not tiers:
            raise FeeConfigurationError("tiered", "Fee tiers cannot be empty")

        validated_tiers = []
        for i, tier in enumerate(tiers):
            if len(tier) != 3:
                raise FeeConfigurationError(
                    "tiered",
                    f"Each tier must have 3 values (volume, maker_rate, taker_rate), got {len(tier)} at tier {i}"
                )

            volume, maker_rate, taker_rate = tier
            volume = cls._to_volume(volume, f"Volume threshold at tier {i}")

            validated_tiers.append((
                volume,
                cls.validate_rate(f"tiers[{i}].maker_rate", maker_rate),
                cls.validate_rate(f"tiers[{i}].taker_rate", taker_rate)
            ))

        validated_tiers.sort(key=lambda x: x[0])

        if validated_tiers[0][0] != Decimal('0'):
            raise FeeConfigurationError("tiered", "First tier must start at volume 0")

        return validated_tiers

    @staticmethod
    def _to_volume(value: Any, label: str) -> Decimal:
        try:
            volume = to_decimal(value)
        except (InvalidOperation, ValueError, TypeError):
            volume = None
        if volume is None or not volume.is_finite() or volume < 0:
            raise FeeConfigurationError("tiered", f"{label} must be a finite non-negative number, got {value}")
        return volume

    @staticmethod
    def tier_for_volume(fee_tiers: List[Tier], volume: Decimal) -> int:
        """Index of the highest tier whose threshold `volume` reaches."""
        for i in range(len(fee_tiers) - 1, -1, -1):
            if volume >= fee_tiers[i][0]:
                return i
        return 0

    def with_volume(self, volume: Union[int, float, str, Decimal]) -> "TieredFeeModel":
        """Return a model on the same schedule for another trading volume."""
        return TieredFeeModel(self.fee_tiers, volume)

    def get_tier_info(self) -> Dict[str, Any]:
        """
        Get information about the current tier.

        Returns
        -------
        Dict[str, Any]
            Current tier information, including the next tier if any
        """
        volume_threshold, maker_rate, taker_rate = self.fee_tiers[self.tier]

        next_tier_info = None
        if self.tier < len(self.fee_tiers) - 1:
            next_volume_threshold, next_maker_rate, next_taker_rate = self.fee_tiers[self.tier + 1]
            volume_needed = next_volume_threshold - self.volume
            next_tier_info = {
                "tier": self.tier + 1,
                "volume_threshold": float(next_volume_threshold),
                "maker_rate": float(next_maker_rate),
                "taker_rate": float(next_taker_rate),
                "volume_needed": float(volume_needed) if volume_needed > 0 else 0
            }

        return {
            "current_tier": self.tier,
            "volume_threshold": float(volume_threshold),
            "current_volume": float(self.volume),
            "maker_rate": float(maker_rate),
            "taker_rate": float(taker_rate),
            "next_tier": next_tier_info
        }

    def get_fee_info(self) -> Dict[str, Any]:
        """Get information about this tiered fee model."""
        base_info = super().get_fee_info()
        base_info.update({
            "total_tiers": len(self.fee_tiers),
            "current_tier_info": self.get_tier_info()
        })
        return base_info
